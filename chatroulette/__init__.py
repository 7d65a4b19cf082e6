"""Weekday, monthly schedule, country, time zone and build information helpers."""

__version__ = "0.1.0"
__all__ = ["timex", "tzx", "version"]