"""
Arithmetic: shifting by calendar and exact units, rounding, differences.
"""

from .difference import (
    difference_in_days,
    difference_in_hours,
    difference_in_microseconds,
    difference_in_milliseconds,
    difference_in_minutes,
    difference_in_months,
    difference_in_nanoseconds,
    difference_in_seconds,
    difference_in_weeks,
    difference_in_years,
)
from .rounding import round_to_nearest_hour, round_to_nearest_minute, round_to_nearest_second
from .shift import (
    add_days,
    add_hours,
    add_microseconds,
    add_milliseconds,
    add_minutes,
    add_months,
    add_nanoseconds,
    add_seconds,
    add_weeks,
    add_years,
    sub_days,
    sub_hours,
    sub_microseconds,
    sub_milliseconds,
    sub_minutes,
    sub_months,
    sub_nanoseconds,
    sub_seconds,
    sub_weeks,
    sub_years,
)

__all__ = [
    # Shift
    "add_years",
    "add_months",
    "add_weeks",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "add_milliseconds",
    "add_microseconds",
    "add_nanoseconds",
    "sub_years",
    "sub_months",
    "sub_weeks",
    "sub_days",
    "sub_hours",
    "sub_minutes",
    "sub_seconds",
    "sub_milliseconds",
    "sub_microseconds",
    "sub_nanoseconds",
    # Rounding
    "round_to_nearest_hour",
    "round_to_nearest_minute",
    "round_to_nearest_second",
    # Difference
    "difference_in_nanoseconds",
    "difference_in_microseconds",
    "difference_in_milliseconds",
    "difference_in_seconds",
    "difference_in_minutes",
    "difference_in_hours",
    "difference_in_days",
    "difference_in_weeks",
    "difference_in_months",
    "difference_in_years",
]
