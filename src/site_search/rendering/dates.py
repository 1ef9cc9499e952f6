"""Publish date formatting for search result posts."""

from datetime import date, datetime, time
from typing import Any

from pydantic import TypeAdapter, ValidationError

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DATETIME_ADAPTER = TypeAdapter(datetime)


def month_name(month: int) -> str:
    """Get the full English name of a 1-based month number."""
    return MONTH_NAMES[month - 1]


def _from_epoch_millis(value: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    try:
        return _DATETIME_ADAPTER.validate_python(text)
    except ValidationError:
        return None


def parse_timestamp(raw: Any) -> datetime | None:
    """Parse a raw publish timestamp into a local datetime.

    Accepts datetimes, dates, ISO-8601 strings (date-only included) and
    epoch milliseconds. Aware values are converted to local time, naive ones
    are taken as local already.

    Args:
        raw: Raw timestamp value from the search provider

    Returns:
        Local datetime, or None when the value is missing or unparseable
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, date):
        parsed = datetime.combine(raw, time())
    elif isinstance(raw, (int, float)):
        parsed = _from_epoch_millis(raw)
    elif isinstance(raw, str):
        parsed = _parse_string(raw)
    else:
        return None

    if parsed is None:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone()
        except (OverflowError, OSError, ValueError):
            return None

    return parsed


def format_post_date(raw: Any) -> str | None:
    """Format a raw publish timestamp as ``DD Month YYYY``.

    Args:
        raw: Raw timestamp value, or None

    Returns:
        Display string such as ``09 March 2021``, or None when there is no
        displayable date
    """
    parsed = parse_timestamp(raw)
    if parsed is None:
        return None

    return f"{parsed.day:02d} {month_name(parsed.month)} {parsed.year:04d}"
