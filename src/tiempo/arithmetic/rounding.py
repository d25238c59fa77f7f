"""
Rounding — Округление до ближайшего часа, минуты или секунды

Округляется время на часах ZonedDateTime (не абсолютное время):
14:40 -> 15:00 в любом часовом поясе. Результат может перейти
на следующие сутки (23:45 -> 00:00 следующего дня). Если результат попал
в разрыв перехода на летнее время, он сдвигается вперёд ("compatible").

Режимы:
- round: до ближайшего, половина — вверх (half-expand)
- ceil: всегда вверх
- floor: всегда вниз
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.config import NS_PER_DAY, NS_PER_HOUR, NS_PER_MINUTE, NS_PER_SECOND
from tiempo.core.domain.options import (
    RoundingMode,
    RoundToNearestHourOptions,
    RoundToNearestMinuteOptions,
    RoundToNearestSecondOptions,
)
from tiempo.core.normalize import normalize_temporal_input


def _round_steps(elapsed: int, step: int, mode: RoundingMode) -> int:
    """Количество шагов после округления elapsed / step."""
    steps, remainder = divmod(elapsed, step)
    if mode == "floor" or remainder == 0:
        return steps
    if mode == "ceil":
        return steps + 1
    return steps + 1 if remainder * 2 >= step else steps


def _round_wall_clock(
    value: Instant | ZonedDateTime, unit_ns: int, increment: int, mode: RoundingMode
) -> ZonedDateTime:
    zoned = normalize_temporal_input(value)
    elapsed = (
        zoned.hour * NS_PER_HOUR
        + zoned.minute * NS_PER_MINUTE
        + zoned.second * NS_PER_SECOND
        + zoned.nanosecond
    )
    step = unit_ns * increment
    rounded = _round_steps(elapsed, step, mode) * step

    extra_days, rest = divmod(rounded, NS_PER_DAY)
    hour, rest = divmod(rest, NS_PER_HOUR)
    minute, rest = divmod(rest, NS_PER_MINUTE)
    second, nanosecond = divmod(rest, NS_PER_SECOND)

    date = zoned.date().add(days=extra_days)
    return zoned.replace(
        year=date.year,
        month=date.month,
        day=date.day,
        hour=hour,
        minute=minute,
        second=second,
        nanosecond=nanosecond,
        disambiguate="compatible",
    )


def round_to_nearest_hour(
    value: Instant | ZonedDateTime,
    options: RoundToNearestHourOptions | None = None,
) -> ZonedDateTime:
    """
    Округлить до часа (или до N часов, N делит 24).

    Args:
        value: Instant или ZonedDateTime
        options: mode и nearest_to (1, 2, 3, 4, 6, 8, 12)

    Returns:
        ZonedDateTime с обнулёнными минутами и мельче

    Examples:
        >>> zoned = ZonedDateTime(2025, 1, 20, 14, 40, tz="UTC")
        >>> round_to_nearest_hour(zoned).hour
        15
        >>> round_to_nearest_hour(zoned, RoundToNearestHourOptions(mode="floor")).hour
        14
        >>> round_to_nearest_hour(zoned, RoundToNearestHourOptions(nearest_to=6)).hour
        12
    """
    options = options or RoundToNearestHourOptions()
    return _round_wall_clock(value, NS_PER_HOUR, options.nearest_to, options.mode)


def round_to_nearest_minute(
    value: Instant | ZonedDateTime,
    options: RoundToNearestMinuteOptions | None = None,
) -> ZonedDateTime:
    """
    Округлить до минуты (или до N минут, N делит 60).

    Examples:
        >>> zoned = ZonedDateTime(2025, 1, 20, 14, 7, 30, tz="UTC")
        >>> round_to_nearest_minute(zoned).minute
        8
        >>> round_to_nearest_minute(zoned, RoundToNearestMinuteOptions(nearest_to=15)).minute
        15
    """
    options = options or RoundToNearestMinuteOptions()
    return _round_wall_clock(value, NS_PER_MINUTE, options.nearest_to, options.mode)


def round_to_nearest_second(
    value: Instant | ZonedDateTime,
    options: RoundToNearestSecondOptions | None = None,
) -> ZonedDateTime:
    """Округлить до секунды (или до N секунд, N делит 60)."""
    options = options or RoundToNearestSecondOptions()
    return _round_wall_clock(value, NS_PER_SECOND, options.nearest_to, options.mode)
