# src/tasklift/convert/timestamps.py

"""
Timestamp normalizer.

The output model stores every point in time as integer seconds since the Unix
epoch. Sources hand us full timestamps (datetime or ISO-8601 text) and
calendar dates without a time of day ("2013-09-05").
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone

from ..core.errors import TimestampFormatError
from ..source.models import Timestamp

_DATE_ONLY_FORMAT = "%Y-%m-%d"


def _is_zero(value: datetime) -> bool:
    # datetime.min is what exporters emit for "never happened" (year 1).
    return value.replace(tzinfo=None) == datetime.min


def _parse_iso(raw: str) -> datetime:
    text = raw.strip()
    if not text:
        raise TimestampFormatError(raw, "empty string")
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))
    except ValueError as e:
        raise TimestampFormatError(raw, str(e)) from e


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        # e.g. 0001-01-01T00:30+01:00 lies before datetime.min in UTC
        raise TimestampFormatError(value, str(e)) from e


def to_epoch(value: Timestamp) -> int:
    """
    Seconds since epoch for a full timestamp, floored to whole seconds.

    None and the zero datetime map to 0. Naive datetimes are read as UTC.
    """
    if value is None:
        return 0
    if isinstance(value, str):
        value = _parse_iso(value)
    if not isinstance(value, datetime):
        raise TimestampFormatError(value, f"unsupported type {type(value).__name__}")
    if _is_zero(value):
        return 0
    return calendar.timegm(_as_utc(value).utctimetuple())


def to_epoch_from_date_only(value: str | None) -> int:
    """Epoch of midnight UTC on a YYYY-MM-DD date. Empty means no date and yields 0."""
    if value is None or value == "":
        return 0
    if not isinstance(value, str):
        raise TimestampFormatError(value, f"unsupported type {type(value).__name__}")
    try:
        day = datetime.strptime(value, _DATE_ONLY_FORMAT).date()
    except ValueError as e:
        raise TimestampFormatError(value, f"expected {_DATE_ONLY_FORMAT}") from e
    return date_to_epoch(day)


def date_to_epoch(day: date) -> int:
    return calendar.timegm(day.timetuple())


def to_datetime(value: Timestamp) -> datetime | None:
    """Aware UTC datetime for a timestamp, None for the zero/absent value."""
    if value is None:
        return None
    if isinstance(value, str):
        value = _parse_iso(value)
    if not isinstance(value, datetime):
        raise TimestampFormatError(value, f"unsupported type {type(value).__name__}")
    if _is_zero(value):
        return None
    return _as_utc(value)
