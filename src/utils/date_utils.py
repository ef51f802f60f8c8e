"""Date and time utility functions."""
from datetime import date, datetime, timezone
from typing import Optional


def now() -> datetime:
    """Current instant as a timezone-aware local datetime."""
    return datetime.now().astimezone()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp.

    Args:
        value: Timestamp string (e.g., "2025-07-01T10:15:00+06:00" or with "Z")

    Returns:
        datetime object; naive values are assumed to be UTC

    Raises:
        ValueError: If the timestamp format is invalid
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp format: {value!r}")

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {value}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as ISO 8601."""
    return value.isoformat()


def format_long_date(value: Optional[datetime] = None) -> str:
    """
    Format a date for display on tickets.

    Example: "Saturday, July 19, 2025"
    """
    value = value or now()
    return f"{value.strftime('%A')}, {value.strftime('%B')} {value.day}, {value.year}"


def format_locale_date(value: datetime) -> str:
    """Locale-aware short date used in spreadsheet exports."""
    return value.astimezone().strftime("%x")


def format_locale_datetime(value: datetime) -> str:
    """Locale-aware date and time used in the admin table."""
    return value.astimezone().strftime("%x %X")


def iso_date(value: Optional[date] = None) -> str:
    """
    YYYY-MM-DD for the given date, the current UTC date by default.

    Aware datetimes are converted to UTC before the date is taken.
    """
    if value is None:
        value = datetime.now(timezone.utc)
    if isinstance(value, datetime):
        value = value.astimezone(timezone.utc).date()
    return value.isoformat()
