"""Calendar helpers for scheduling weekly and monthly rounds."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def _build_weekdays() -> dict[str, int]:
    table: dict[str, int] = {}
    for number, name in enumerate(_DAY_NAMES):
        lower = name.lower()
        for alias in (name, name[:3], lower, lower[:3]):
            table[alias] = number
    table["Tues"] = TUESDAY
    table["Thurs"] = THURSDAY
    return table


_WEEKDAYS = _build_weekdays()


def _weekday_number(t: datetime) -> int:
    """Weekday of ``t`` counted from Sunday = 0."""
    return (t.weekday() + 1) % 7


def parse_weekday(s: str) -> int:
    """Parse a weekday name such as "Monday", "mon" or "Tues".

    Returns the day number counted from Sunday = 0.
    Raises ValueError for an unknown name.
    """
    try:
        return _WEEKDAYS[s]
    except KeyError:
        raise ValueError(f"invalid weekday {s!r}") from None


def next_weekday(t: datetime, weekday: str, hour: int) -> datetime:
    """Return the next occurrence of ``weekday`` after ``t`` at ``hour`` UTC.

    The same weekday as ``t`` moves a full week ahead. An unknown weekday
    name is treated as Sunday.
    """
    try:
        target = parse_weekday(weekday)
    except ValueError:
        target = SUNDAY

    current = _weekday_number(t)
    if current < target:
        diff = target - current
    elif current > target:
        diff = 7 - (current - target)
    else:
        diff = 7

    day = t + timedelta(days=diff)
    return datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc)


def next_month(t: datetime) -> datetime:
    """Return the same ordinal weekday of ``t`` in the following month.

    A fourth occurrence becomes the fifth when the next month has five.
    """
    weekday = t.weekday()
    ordinal = (t.day - 1) // 7 + 1

    year, month = (t.year + 1, 1) if t.month == 12 else (t.year, t.month + 1)
    first_day = datetime(year, month, 1, t.hour, t.minute, tzinfo=t.tzinfo)

    offset = (weekday - first_day.weekday()) % 7
    first_weekday = first_day + timedelta(days=offset)

    days_in_month = calendar.monthrange(year, month)[1]
    max_occurrences = len(range(1 + offset, days_in_month + 1, 7))

    if ordinal == 4 and max_occurrences == 5:
        ordinal = 5

    return first_weekday + timedelta(days=(ordinal - 1) * 7)


def format_monthly_occurrence(t: datetime) -> str:
    """Describe where in its month ``t`` falls, e.g. "first Monday"."""
    week = (t.day - 1) // 7 + 1
    occurrence = {1: "first", 2: "second", 3: "third"}.get(week, "last")
    return f"{occurrence} {_DAY_NAMES[_weekday_number(t)]}"


def mid_point(t1: datetime, t2: datetime) -> datetime:
    """Return the date half way between ``t1`` and ``t2`` at the hour of ``t2`` in UTC.

    Raises ValueError when ``t2`` is before ``t1``.
    """
    if t2 < t1:
        raise ValueError("t2 cannot be before t1")

    midpoint = t1 + (t2 - t1) / 2
    return datetime(
        midpoint.year, midpoint.month, midpoint.day, t2.hour, tzinfo=timezone.utc
    )