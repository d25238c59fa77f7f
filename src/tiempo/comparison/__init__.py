"""
Comparison: ordering of instants, dates and times; same-period checks.
"""

from .ordering import (
    is_after,
    is_before,
    is_future,
    is_past,
    is_plain_date_after,
    is_plain_date_before,
    is_plain_date_equal,
    is_plain_time_after,
    is_plain_time_before,
    is_plain_time_equal,
    is_within_interval,
)
from .same import (
    is_same_day,
    is_same_hour,
    is_same_microsecond,
    is_same_millisecond,
    is_same_minute,
    is_same_month,
    is_same_nanosecond,
    is_same_second,
    is_same_week,
    is_same_year,
)

__all__ = [
    "is_before",
    "is_after",
    "is_future",
    "is_past",
    "is_within_interval",
    "is_plain_date_before",
    "is_plain_date_after",
    "is_plain_date_equal",
    "is_plain_time_before",
    "is_plain_time_after",
    "is_plain_time_equal",
    "is_same_year",
    "is_same_month",
    "is_same_week",
    "is_same_day",
    "is_same_hour",
    "is_same_minute",
    "is_same_second",
    "is_same_millisecond",
    "is_same_microsecond",
    "is_same_nanosecond",
]
