"""Shared input validation and identifier normalization.

Every check here raises :class:`ValidationError` so routers and services
never build 400 responses by hand.
"""

import re
from typing import Any, Optional

from frontdesk.core.exceptions import ValidationError

_NON_DIGITS = re.compile(r"\D")


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Trim and lowercase an email. Blank input gives None."""
    if value is None:
        return None
    cleaned = value.strip().lower()
    return cleaned or None


def normalize_phone(value: Optional[str]) -> Optional[str]:
    """Keep only the digits of a phone number. No digits gives None."""
    if value is None:
        return None
    digits = _NON_DIGITS.sub("", value)
    return digits or None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(message: str, **fields: Any) -> None:
    """Raise ValidationError naming every blank field."""
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        raise ValidationError(message, details={"missing": missing})


def require_present(message: str, **fields: Any) -> None:
    """Raise ValidationError naming every absent or empty field. Whitespace counts as a value."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ValidationError(message, details={"missing": missing})


def require_min_length(value: str, minimum: int, message: str) -> None:
    if len(value) < minimum:
        raise ValidationError(message, details={"min_length": minimum})


def require_choice(value: Optional[str], choices, message: str) -> str:
    if value not in choices:
        raise ValidationError(message, details={"allowed": list(choices)})
    return value


def parse_count(value: Any, default: int, minimum: int = 0) -> int:
    """Parse a head count leniently, falling back to ``default``.

    Accepts ints and numeric strings ("2", "2.7" -> 2). Anything unparsable
    or below ``minimum`` yields ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if parsed < minimum:
        return default
    return parsed
