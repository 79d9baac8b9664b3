"""Normalization of backend timestamp shapes into plain datetimes."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone, tzinfo
from numbers import Real


def to_instant(value: object) -> datetime | None:
    """Coerce a stored timestamp into an aware datetime, or ``None`` if unknown.

    Accepted shapes are ``datetime`` (Firestore returns a subclass), objects or
    mappings carrying ``seconds`` and optional ``nanoseconds`` as produced by
    JSON exports of Firestore timestamps, and epoch seconds. Naive datetimes
    are treated as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, Mapping):
        return _from_epoch(value.get("seconds"), value.get("nanoseconds"))
    if hasattr(value, "seconds"):
        return _from_epoch(getattr(value, "seconds"), getattr(value, "nanoseconds", None))
    if isinstance(value, Real):
        return _from_epoch(value, None)
    return None


def _from_epoch(seconds: object, nanoseconds: object) -> datetime | None:
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        return None
    total = float(seconds)
    if isinstance(nanoseconds, Real) and not isinstance(nanoseconds, bool):
        total += float(nanoseconds) / 1_000_000_000
    try:
        return datetime.fromtimestamp(total, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_timestamp(instant: datetime, tz: tzinfo | None = None) -> str:
    """Format as ``M/D/YYYY, h:MM:SS AM`` in ``tz`` (local time when omitted)."""
    local = instant.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def format_date(instant: datetime) -> str:
    """Format the calendar date of ``instant`` as ``M/D/YYYY``."""
    return f"{instant.month}/{instant.day}/{instant.year}"
