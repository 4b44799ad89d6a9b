"""Date utilities for ledgerly.

Pure functions for the two fixed input formats: day granularity for
expenses and minute granularity for reminders.
"""

from datetime import date, datetime

from ledgerly.domain.errors import InvalidDateError, InvalidDateTimeError

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def _format(value: date, fmt: str) -> str:
    # strftime("%Y") drops the zero padding of years below 1000 on glibc
    return value.strftime(fmt.replace("%Y", f"{value.year:04d}"))


def _parse_strict(text: str, fmt: str) -> datetime | None:
    """Parse text, accepting it only if it formats back to the same string.

    strptime tolerates missing zero padding ("2025-1-5"), so the round trip
    is what enforces the fixed format.
    """
    try:
        parsed = datetime.strptime(text, fmt)
    except (TypeError, ValueError):
        return None
    if _format(parsed, fmt) != text:
        return None
    return parsed


def parse_date(text: str) -> date:
    """Parse a yyyy-MM-dd date.

    Args:
        text: Date text, e.g. "2025-01-15".

    Returns:
        Parsed date.

    Raises:
        InvalidDateError: If the text does not match the format exactly.
    """
    parsed = _parse_strict(text, DATE_FORMAT)
    if parsed is None:
        raise InvalidDateError()
    return parsed.date()


def parse_datetime(text: str) -> datetime:
    """Parse a yyyy-MM-dd HH:mm timestamp (naive, local time).

    Raises:
        InvalidDateTimeError: If the text does not match the format exactly.
    """
    parsed = _parse_strict(text, DATETIME_FORMAT)
    if parsed is None:
        raise InvalidDateTimeError()
    return parsed


def format_date(value: date) -> str:
    return _format(value, DATE_FORMAT)


def format_datetime(value: datetime) -> str:
    return _format(value, DATETIME_FORMAT)
