# chatroulette

Small, dependency-free helpers for working out when the next round of a
recurring chat-roulette event happens, describing that schedule, looking
up countries and describing time zones.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Scheduling with `chatroulette.timex`

```python
from datetime import datetime, timezone
from chatroulette.timex import (
    parse_weekday, next_weekday, next_month,
    format_monthly_occurrence, mid_point,
)

now = datetime(2021, 1, 13, 12, tzinfo=timezone.utc)  # a Wednesday

parse_weekday("Tues")             # 2 (days are numbered from Sunday = 0)
next_weekday(now, "Friday", 12)   # 2021-01-15 12:00 UTC
next_month(datetime(2024, 6, 11, 10, tzinfo=timezone.utc))
                                  # second Tuesday of July: 2024-07-09 10:00 UTC
format_monthly_occurrence(datetime(2024, 8, 12, tzinfo=timezone.utc))
                                  # "second Monday"
mid_point(datetime(2024, 10, 1, tzinfo=timezone.utc),
          datetime(2024, 10, 8, 12, tzinfo=timezone.utc))
                                  # 2024-10-04 12:00 UTC
```

- `parse_weekday` accepts long names ("Monday"), three-letter names
  ("Mon"), their lower-case forms, and "Tues" and "Thurs". Any other text
  raises `ValueError`. The constants `SUNDAY` to `SATURDAY` hold the
  numbers it returns.
- `next_weekday(t, weekday, hour)` returns the next date after `t` that
  falls on `weekday`, at `hour` o'clock UTC. If `t` is already on that
  weekday the result is a week later; an unknown weekday name counts as
  Sunday.
- `next_month(t)` returns the same ordinal weekday (first, second, ...) in
  the following month, keeping the hour, minute and time zone of `t`. A
  fourth occurrence becomes the fifth when the next month has five.
- `format_monthly_occurrence(t)` gives "first", "second" or "third"
  followed by the weekday name, and "last" for anything from the 22nd on.
- `mid_point(t1, t2)` returns the date half way between the two times, at
  the hour of `t2`, in UTC. It raises `ValueError` if `t2` is before `t1`.

## Countries and time zones with `chatroulette.tzx`

`Country` is a frozen dataclass with `code`, `name` and `zones`. The
package ships no country list of its own: both lookups take the countries
to search as their second argument.

```python
from chatroulette.tzx import Country, get_country_by_name, get_countries_with_prefix

countries = [
    Country("CM", "Cameroon"),
    Country("CA", "Canada", ("America/Toronto",)),
    Country("CN", "China"),
]

get_country_by_name("canada", countries)        # Country(code="CA", ...)
get_countries_with_prefix("ca", countries)       # Cameroon and Canada
```

- `get_country_by_name(name, countries)` upper-cases the first letter of
  each word of `name`, writes "Of" and "And" back in lower case, and
  returns the country with exactly that name, or `None` (also for an empty
  name).
- `get_countries_with_prefix(s, countries)` returns the countries whose
  names start with the first seven characters of `s` (capitalised the same
  way). `countries` must be sorted by name: the scan stops at the first
  name past the prefix. An empty `s` gives an empty list.
- `generate_stop_prefix(prefix)` replaces the last character with the next
  one (`"Ca"` becomes `"Cb"`), and `next_letter(c)` returns the following
  character, wrapping `"z"` to `"a"` and `"Z"` to `"A"`.
- `get_abbreviated_timezone(name, now=None)` returns the zone's
  abbreviation and UTC offset, such as `"MST (UTC-07:00)"` for
  `"America/Phoenix"`. An empty name or `"UTC"` means UTC, and `"Local"`
  the machine's local zone. An unknown zone gives an empty string. Pass
  `now` to describe a particular moment instead of the current one.

## Build information with `chatroulette.version`

`BuildInfo` holds a `build_date` and a `commit_sha`.
`BuildInfo.truncated_commit_sha()` returns the first ten characters of the
commit SHA and raises `ValueError` when it is shorter than that.

## What this package does not do

It is a library of helpers only. It has no command-line program, does not
run or store jobs, does not talk to any chat service, and keeps no
database. It has no built-in list of countries; callers supply their own
`Country` entries.