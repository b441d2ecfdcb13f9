import csv
import io
from datetime import datetime, timezone

import pytest

from frontdesk.application.services.report_service import (
    REPORT_COLUMNS,
    format_timestamp,
    generate_report,
    get_period_window,
)
from frontdesk.config import get_settings
from frontdesk.core.exceptions import NotFoundError, ValidationError
from tests.factories import make_stay

# Wednesday
NOW = datetime(2026, 10, 21, 15, 30, tzinfo=timezone.utc)


def _rows(content: str):
    return list(csv.reader(io.StringIO(content)))


@pytest.mark.parametrize(
    "period, start",
    [
        ("daily", datetime(2026, 10, 21, tzinfo=timezone.utc)),
        ("weekly", datetime(2026, 10, 19, tzinfo=timezone.utc)),
        ("monthly", datetime(2026, 10, 1, tzinfo=timezone.utc)),
        ("yearly", datetime(2026, 1, 1, tzinfo=timezone.utc)),
    ],
)
def test_period_window_start(period, start):
    window_start, window_end = get_period_window(period, NOW)

    assert window_start == start
    assert window_end == NOW


def test_weekly_window_on_sunday_goes_back_six_days():
    sunday = datetime(2026, 10, 25, 9, 0, tzinfo=timezone.utc)

    start, _ = get_period_window("weekly", sunday)

    assert start == datetime(2026, 10, 19, tzinfo=timezone.utc)


@pytest.mark.parametrize("period", ["hourly", "", None, "DAILY"])
def test_unknown_period_is_rejected_even_with_data(guests, period):
    guests.add(make_stay("Alice", NOW))

    with pytest.raises(ValidationError):
        generate_report(guests, period, now=NOW)


def test_daily_report_only_contains_today(guests):
    guests.add(make_stay("Yesterday", datetime(2026, 10, 20, 23, 59, tzinfo=timezone.utc)))
    guests.add(make_stay("Morning", datetime(2026, 10, 21, 0, 0, tzinfo=timezone.utc)))
    guests.add(make_stay("Noon", datetime(2026, 10, 21, 12, 0, tzinfo=timezone.utc), room="202"))

    report = generate_report(guests, "daily", now=NOW)
    rows = _rows(report.content)

    assert rows[0] == list(REPORT_COLUMNS)
    assert [row[1] for row in rows[1:]] == ["Morning", "Noon"]
    assert report.row_count == 2
    assert report.filename == "hotel_checkin_report_daily_2026-10-21.csv"


def test_report_excludes_stays_after_now(guests):
    guests.add(make_stay("Later", datetime(2026, 10, 21, 18, 0, tzinfo=timezone.utc)))

    with pytest.raises(NotFoundError):
        generate_report(guests, "daily", now=NOW)


def test_empty_window_is_not_found(guests):
    guests.add(make_stay("LastYear", datetime(2025, 12, 31, 12, 0, tzinfo=timezone.utc)))

    with pytest.raises(NotFoundError) as exc:
        generate_report(guests, "yearly", now=NOW)

    assert exc.value.message == "No check-in data found for the selected period (yearly)."


def test_report_row_values(guests):
    checked_in = datetime(2026, 10, 2, 8, 15, 30, 250000, tzinfo=timezone.utc)
    guests.add(
        make_stay(
            "Alice",
            checked_in,
            email="alice@example.com",
            adults=2,
            children=1,
            expected_checkout="2026-10-05",
            nationality="PT",
            notes="Needs crib, ground floor",
        )
    )

    report = generate_report(guests, "monthly", now=NOW)
    header, row = _rows(report.content)

    assert dict(zip(header, row)) == {
        "Guest ID": "stay-alice",
        "Name": "Alice",
        "Contact": "555-0100",
        "Email": "alice@example.com",
        "Room": "101",
        "Adults": "2",
        "Children": "1",
        "Checkin Time": "2026-10-02T08:15:30.250Z",
        "Expected Checkout": "2026-10-05",
        "Nationality": "PT",
        "Checked In By": "reception@hotel.com",
        "Notes": "Needs crib, ground floor",
    }


def test_format_timestamp_converts_to_utc():
    assert format_timestamp(NOW) == "2026-10-21T15:30:00.000Z"


@pytest.fixture
def sao_paulo(monkeypatch):
    monkeypatch.setattr(get_settings(), "TIMEZONE", "America/Sao_Paulo")


def test_daily_window_uses_configured_timezone(sao_paulo):
    now = datetime(2026, 10, 21, 2, 0, tzinfo=timezone.utc)

    start, end = get_period_window("daily", now)

    assert start == datetime(2026, 10, 20, 3, 0, tzinfo=timezone.utc)
    assert start.isoformat() == "2026-10-20T00:00:00-03:00"
    assert end == now


def test_report_filename_uses_configured_timezone_date(guests, sao_paulo):
    now = datetime(2026, 10, 21, 2, 0, tzinfo=timezone.utc)
    guests.add(make_stay("LateEvening", datetime(2026, 10, 21, 1, 0, tzinfo=timezone.utc)))
    guests.add(make_stay("LastNight", datetime(2026, 10, 20, 2, 0, tzinfo=timezone.utc)))

    report = generate_report(guests, "daily", now=now)

    assert report.filename == "hotel_checkin_report_daily_2026-10-20.csv"
    assert [row[1] for row in _rows(report.content)[1:]] == ["LateEvening"]
