# app/utils/datetime.py
from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo


def resolve_timezone(name: str | None) -> tzinfo:
    if not name or name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def as_aware(dt: datetime, tz: tzinfo = UTC) -> datetime:
    # naive は tz のローカル時刻として扱う
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt


def calendar_day(moment: datetime, tz: tzinfo = UTC) -> date:
    """Return the date of ``moment`` as seen in ``tz``."""
    return as_aware(moment, tz).astimezone(tz).date()


def day_bounds(moment: datetime, tz: tzinfo = UTC) -> tuple[datetime, datetime]:
    """Return ``[start_of_day, start_of_next_day)`` of ``moment`` in ``tz``.

    Both bounds are timezone-aware so they compare correctly against stored
    ``timestamptz`` values regardless of the zone they were written in.
    """
    day = calendar_day(moment, tz)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


__all__ = ["resolve_timezone", "as_aware", "calendar_day", "day_bounds"]
