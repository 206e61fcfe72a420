"""Local wall-clock helpers.

Naive datetimes coming from callers are read as local time in the configured
zone; aware ones are converted into it. All comparisons then happen between
aware values.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytz

_tz = pytz.timezone("Europe/Paris")


def configure_timezone(name: str) -> None:
    global _tz
    _tz = pytz.timezone(name)


def local_now() -> datetime:
    return datetime.now(tz=_tz)


def to_local(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return _tz.localize(dt)
    return dt.astimezone(_tz)


def start_of_day(dt: datetime) -> datetime:
    """Local midnight of the calendar day ``dt`` falls on."""
    local = to_local(dt).replace(tzinfo=None)
    return _tz.localize(local.replace(hour=0, minute=0, second=0, microsecond=0))


def add_local_days(dt: datetime, days: int) -> datetime:
    """Same local wall-clock time ``days`` calendar days later."""
    local = to_local(dt).replace(tzinfo=None)
    return _tz.localize(local + timedelta(days=days))
