"""
Conversion between ISO strings, stdlib datetime and whenever types;
current time in a timezone.
"""

from tiempo.core.timezones import is_valid_timezone, system_timezone

from .convert import (
    get_today,
    now,
    parse_instant,
    to_date,
    to_plain_date,
    to_plain_time,
    to_utc,
    to_zoned_time,
    today,
)

__all__ = [
    "get_today",
    "is_valid_timezone",
    "now",
    "parse_instant",
    "system_timezone",
    "to_date",
    "to_plain_date",
    "to_plain_time",
    "to_utc",
    "to_zoned_time",
    "today",
]
