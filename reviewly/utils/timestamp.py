"""Timestamp parsing and formatting utilities."""

import math
from datetime import date, datetime, timezone
from typing import Union

SECONDS_PER_DAY = 60 * 60 * 24


def now() -> datetime:
    """Current local time, to the second."""
    return datetime.now().replace(microsecond=0)


def session_stamp() -> str:
    """Compact timestamp for log directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def as_naive_utc(dt: datetime) -> datetime:
    """
    Strip timezone info so aware and naive timestamps can be compared.

    Aware datetimes are converted to UTC first; naive ones are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def parse_timestamp(value: Union[str, int, float, date, datetime]) -> datetime:
    """
    Parse a timestamp from a datetime, date, epoch milliseconds, or ISO 8601 string.

    Args:
        value: Timestamp value. Dates become midnight; a trailing "Z" is read as UTC;
            numbers are milliseconds since the epoch (as importers send them).

    Returns:
        Naive datetime (UTC if the input carried an offset)

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp

    Examples:
        >>> parse_timestamp("2024-12-15")
        datetime.datetime(2024, 12, 15, 0, 0)
        >>> parse_timestamp("2024-12-15T10:30:00Z")
        datetime.datetime(2024, 12, 15, 10, 30)
        >>> parse_timestamp(1735689600000)
        datetime.datetime(2025, 1, 1, 0, 0)
    """
    if isinstance(value, datetime):
        return as_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return as_naive_utc(datetime.fromtimestamp(value / 1000, tz=timezone.utc))
        except (OverflowError, OSError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    if not isinstance(value, str):
        raise ValueError(f"Unsupported timestamp type: {type(value).__name__}")

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValueError(f"Unparsable timestamp: {value!r}") from None


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, rounded up (partial days count as one)."""
    delta = as_naive_utc(end) - as_naive_utc(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def millis(dt: datetime) -> int:
    """Milliseconds since the epoch, used for collector item ids."""
    return int(dt.timestamp() * 1000)
