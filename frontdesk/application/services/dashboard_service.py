"""Dashboard service - occupancy and in-house guest metrics."""

from datetime import datetime, timezone

from frontdesk.domain.models.guest_stay import CHECKED_IN
from frontdesk.domain.models.room import RoomStatus
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.schemas.guest import DashboardSummary


def summarize(rooms: RoomRepository, guests: GuestStayRepository) -> DashboardSummary:
    """Aggregate current room and guest state. Read only."""
    with rooms.transaction():
        by_status = rooms.count_by_status()
        total_rooms = rooms.count()
        current = guests.list_by_status(CHECKED_IN)

    today = datetime.now(timezone.utc).date()
    todays_checkins = sum(
        1 for stay in current if stay.checkin_time.astimezone(timezone.utc).date() == today
    )

    return DashboardSummary(
        current_in_house_guests=len(current),
        total_guests_in_house=sum(stay.head_count for stay in current),
        occupied_rooms=by_status[RoomStatus.OCCUPIED],
        available_rooms=by_status[RoomStatus.AVAILABLE],
        total_rooms=total_rooms,
        todays_checkins=todays_checkins,
    )
