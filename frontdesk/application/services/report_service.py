"""Report service - check-in reports exported as CSV.

Handles:
- Resolving the reporting window for daily / weekly / monthly / yearly
- Filtering guest stays by check-in time
- Serializing the rows with pandas
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Dict, List, Optional

import pandas as pd
import pytz
import structlog

from frontdesk.config import get_settings
from frontdesk.core.exceptions import InternalError, NotFoundError
from frontdesk.core.validation import require_choice
from frontdesk.domain.models.guest_stay import GuestStay
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.schemas.guest import Report

logger = structlog.get_logger(__name__)


def _start_of_week(today: date) -> date:
    # Weeks start on Monday; weekday() is 0 for Monday, 6 for Sunday
    return today - timedelta(days=today.weekday())


PERIOD_STARTS: Dict[str, Callable[[date], date]] = {
    "daily": lambda today: today,
    "weekly": _start_of_week,
    "monthly": lambda today: today.replace(day=1),
    "yearly": lambda today: date(today.year, 1, 1),
}

# Report header label → GuestStay attribute
REPORT_COLUMNS = {
    "Guest ID": "id",
    "Name": "name",
    "Contact": "contact",
    "Email": "email",
    "Room": "room_number",
    "Adults": "adults",
    "Children": "children",
    "Checkin Time": "checkin_time",
    "Expected Checkout": "expected_checkout",
    "Nationality": "nationality",
    "Checked In By": "checked_in_by",
    "Notes": "notes",
}


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_period_window(period: str, now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Return the [start, end] window for a report period.

    The start is midnight in the configured timezone; the end is ``now``.
    """
    require_choice(
        period,
        PERIOD_STARTS,
        "Invalid report period specified. Use daily, weekly, monthly, or yearly.",
    )
    tz = pytz.timezone(get_settings().TIMEZONE)
    now = (now or datetime.now(timezone.utc)).astimezone(tz)
    start_date = PERIOD_STARTS[period](now.date())
    start = tz.localize(datetime.combine(start_date, time.min))
    return start, now


def stays_to_csv(stays: List[GuestStay]) -> str:
    rows = []
    for stay in stays:
        row = {label: getattr(stay, attr) for label, attr in REPORT_COLUMNS.items()}
        row["Checkin Time"] = format_timestamp(stay.checkin_time)
        rows.append(row)

    df = pd.DataFrame(rows, columns=list(REPORT_COLUMNS))
    return df.to_csv(index=False, lineterminator="\n")


def generate_report(
    guests: GuestStayRepository,
    period: Optional[str],
    now: Optional[datetime] = None,
) -> Report:
    start, end = get_period_window(period, now)
    logger.info("Generating report", period=period, start=start.isoformat(), end=end.isoformat())

    stays = guests.list_checked_in_between(start, end)
    if not stays:
        logger.info("No data for report", period=period)
        raise NotFoundError(
            f"No check-in data found for the selected period ({period}).",
            details={"period": period},
        )

    try:
        content = stays_to_csv(stays)
    except (ValueError, TypeError) as e:
        logger.error("Report serialization failed", period=period, error=str(e))
        raise InternalError("Error generating report data") from e

    filename = f"hotel_checkin_report_{period}_{end.date().isoformat()}.csv"
    logger.info("Report generated", filename=filename, rows=len(stays))
    return Report(period=period, filename=filename, content=content, row_count=len(stays))
