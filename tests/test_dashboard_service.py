from datetime import datetime, timedelta, timezone

from frontdesk.application.services.checkin_service import check_in
from frontdesk.application.services.dashboard_service import summarize
from frontdesk.domain.schemas.guest import CheckInRequest
from tests.factories import make_stay


def test_summary_of_seeded_rooms(rooms, guests):
    summary = summarize(rooms, guests)

    assert summary.occupied_rooms == 1
    assert summary.available_rooms == 1
    assert summary.total_rooms == 2
    assert summary.current_in_house_guests == 0
    assert summary.total_guests_in_house == 0
    assert summary.todays_checkins == 0


def test_check_in_moves_one_room_from_available_to_occupied(rooms, guests, claims):
    before = summarize(rooms, guests)
    check_in(rooms, guests, claims, CheckInRequest(name="Alice", contact="555", roomNumber="101", adults=2, children=2))
    after = summarize(rooms, guests)

    assert after.occupied_rooms == before.occupied_rooms + 1
    assert after.available_rooms == before.available_rooms - 1
    assert after.current_in_house_guests == 1
    assert after.total_guests_in_house == 4
    assert after.todays_checkins == 1


def test_todays_checkins_ignores_earlier_days(rooms, guests):
    now = datetime.now(timezone.utc)
    guests.add(make_stay("Early", now - timedelta(days=2), adults=1, children=1))
    guests.add(make_stay("Today", now, room="202", adults=2))

    summary = summarize(rooms, guests)

    assert summary.current_in_house_guests == 2
    assert summary.total_guests_in_house == 4
    assert summary.todays_checkins == 1


def test_summary_serializes_camel_case(rooms, guests):
    payload = summarize(rooms, guests).model_dump(by_alias=True)

    assert set(payload) == {
        "currentInHouseGuests",
        "totalGuestsInHouse",
        "occupiedRooms",
        "availableRooms",
        "totalRooms",
        "todaysCheckins",
    }
