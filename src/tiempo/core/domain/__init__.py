"""
Domain types and option models.

Contains the temporal value aliases (backed by whenever) and the
immutable option records accepted by the public functions.
"""

from tiempo.core.domain.options import (
    FormatOptions,
    FormatPlainDateOptions,
    IntlFormatDistanceOptions,
    RoundToNearestHourOptions,
    RoundToNearestMinuteOptions,
    RoundToNearestSecondOptions,
    SimpleFormatOptions,
    ToIso9075Options,
    ToIsoOptions,
)
from tiempo.core.domain.temporal import (
    Date,
    DateLikeInput,
    Instant,
    Interval,
    TemporalInput,
    Time,
    ZonedDateTime,
)

__all__ = [
    # Temporal types
    "Date",
    "DateLikeInput",
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
]
