"""Country lookup and time zone formatting helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_PREFIX_LIMIT = 7
_WORD_START = re.compile(r"(?<![\w'\u2019])(\w)")


@dataclass(frozen=True)
class Country:
    """A country with its ISO code and time zones."""

    code: str
    name: str
    zones: tuple[str, ...] = field(default=())


def _title(s: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone."""
    return _WORD_START.sub(lambda m: m.group(1).upper(), s)


def get_country_by_name(name: str, countries: Iterable[Country]) -> Country | None:
    """Return the country whose name matches ``name``, or None."""
    if not name:
        return None

    name = _title(name).replace("Of", "of").replace("And", "and")
    return next((c for c in countries if c.name == name), None)


def get_countries_with_prefix(s: str, countries: Iterable[Country]) -> list[Country]:
    """Return countries whose names start with ``s``, up to its first 7 characters.

    ``countries`` must be sorted by name; the scan stops at the first name
    past the prefix.
    """
    if not s:
        return []

    prefix = _title(s)[:_PREFIX_LIMIT]
    stop = generate_stop_prefix(prefix)

    matches = []
    for country in countries:
        if country.name.startswith(stop):
            break
        if country.name.startswith(prefix):
            matches.append(country)
    return matches


def generate_stop_prefix(prefix: str) -> str:
    """Replace the last character of ``prefix`` with the next letter."""
    if not prefix:
        return ""
    return prefix[:-1] + next_letter(prefix[-1])


def next_letter(c: str) -> str:
    """Return the character after ``c``, wrapping "z" to "a" and "Z" to "A"."""
    if c == "z":
        return "a"
    if c == "Z":
        return "A"
    return chr(ord(c) + 1)


def _load_zone(name: str) -> tzinfo:
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        local = datetime.now().astimezone().tzinfo
        assert local is not None
        return local
    return ZoneInfo(name)


def _format_offset(moment: datetime) -> str:
    offset = moment.utcoffset()
    seconds = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def get_abbreviated_timezone(name: str, now: datetime | None = None) -> str:
    """Return a zone's abbreviation with its UTC offset, e.g. "EST (UTC-05:00)".

    ``now`` is the instant to evaluate (default: the current time).
    An unknown zone name gives an empty string.
    """
    try:
        zone = _load_zone(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return ""

    moment = (now or datetime.now(timezone.utc)).astimezone(zone)
    return f"{moment.tzname()} (UTC{_format_offset(moment)})"