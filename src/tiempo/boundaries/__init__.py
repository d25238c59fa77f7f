"""
Boundaries: start/end of periods and enumeration of periods in an interval.
"""

from .intervals import (
    each_day_of_interval,
    each_hour_of_interval,
    each_minute_of_interval,
    each_month_of_interval,
    each_week_of_interval,
    each_year_of_interval,
)
from .periods import (
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)

__all__ = [
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_year",
    "end_of_day",
    "end_of_week",
    "end_of_month",
    "end_of_year",
    "each_day_of_interval",
    "each_week_of_interval",
    "each_month_of_interval",
    "each_year_of_interval",
    "each_hour_of_interval",
    "each_minute_of_interval",
]
