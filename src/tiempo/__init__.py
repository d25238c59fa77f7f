"""
tiempo — datetime utilities on top of the whenever calendar engine.

date-fns-style helpers for Instant / ZonedDateTime / Date values:
formatting with token strings, conversion, arithmetic, rounding,
differences, period boundaries and comparisons.

    >>> from tiempo import ZonedDateTime, format
    >>> zoned = ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")
    >>> format(zoned, "EEEE, MMMM do, yyyy 'at' h:mm a")
    'Monday, January 20th, 2025 at 3:00 PM'
"""

from tiempo.arithmetic import (
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
    round_to_nearest_hour,
    round_to_nearest_minute,
    round_to_nearest_second,
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
from tiempo.boundaries import (
    each_day_of_interval,
    each_hour_of_interval,
    each_minute_of_interval,
    each_month_of_interval,
    each_week_of_interval,
    each_year_of_interval,
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from tiempo.comparison import (
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
    is_within_interval,
)
from tiempo.conversion import (
    get_today,
    is_valid_timezone,
    now,
    system_timezone,
    to_date,
    to_plain_date,
    to_plain_time,
    to_utc,
    to_zoned_time,
    today,
)
from tiempo.core.domain import (
    Date,
    FormatOptions,
    FormatPlainDateOptions,
    Instant,
    Interval,
    IntlFormatDistanceOptions,
    RoundToNearestHourOptions,
    RoundToNearestMinuteOptions,
    RoundToNearestSecondOptions,
    SimpleFormatOptions,
    TemporalInput,
    Time,
    ToIso9075Options,
    ToIsoOptions,
    ZonedDateTime,
)
from tiempo.core.normalize import normalize_temporal_input
from tiempo.formatting import (
    format,
    format_plain_date,
    intl_format_distance,
    simple_format,
    to_iso,
    to_iso9075,
    to_utc_string,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Date",
    "Instant",
    "Interval",
    "TemporalInput",
    "Time",
    "ZonedDateTime",
    # Options
    "FormatOptions",
    "FormatPlainDateOptions",
    "IntlFormatDistanceOptions",
    "RoundToNearestHourOptions",
    "RoundToNearestMinuteOptions",
    "RoundToNearestSecondOptions",
    "SimpleFormatOptions",
    "ToIso9075Options",
    "ToIsoOptions",
    # Normalization
    "normalize_temporal_input",
    # Conversion
    "to_zoned_time",
    "to_utc",
    "to_plain_date",
    "to_plain_time",
    "to_date",
    "is_valid_timezone",
    "system_timezone",
    # Current time
    "now",
    "today",
    "get_today",
    # Formatting
    "format",
    "format_plain_date",
    "simple_format",
    "intl_format_distance",
    "to_iso",
    "to_iso9075",
    "to_utc_string",
    # Arithmetic
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
    # Boundaries
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
    # Comparison
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
