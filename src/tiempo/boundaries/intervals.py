"""
Intervals — Перечисление периодов внутри интервала

Все функции:
- работают в часовом поясе interval.start (Instant -> UTC)
- включают оба конца: период, содержащий end, тоже попадает в список
- возвращают пустой список, если start позже end
- возвращают начала периодов (полночь, начало часа и т.д.)
"""

from whenever import Date, ZonedDateTime

from tiempo.arithmetic.rounding import round_to_nearest_hour, round_to_nearest_minute
from tiempo.core.domain.options import RoundToNearestHourOptions, RoundToNearestMinuteOptions
from tiempo.core.domain.temporal import Interval
from tiempo.core.normalize import normalize_temporal_input, plain_date_to_zoned_date_time


def _bounds(interval: Interval) -> tuple[ZonedDateTime, ZonedDateTime]:
    """(start, end) в часовом поясе start."""
    start = normalize_temporal_input(interval.start)
    end = normalize_temporal_input(interval.end).instant().to_tz(start.tz)
    return start, end


def _each_date(first: Date, last: Date, timezone: str, **step: int) -> list[ZonedDateTime]:
    dates: list[ZonedDateTime] = []
    current = first
    while current <= last:
        dates.append(plain_date_to_zoned_date_time(current, timezone))
        current = current.add(**step)
    return dates


def each_day_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """
    Начало каждого дня интервала.

    Examples:
        >>> interval = Interval(
        ...     start=ZonedDateTime(2025, 1, 1, 12, tz="UTC"),
        ...     end=ZonedDateTime(2025, 1, 3, 8, tz="UTC"),
        ... )
        >>> [z.day for z in each_day_of_interval(interval)]
        [1, 2, 3]
    """
    start, end = _bounds(interval)
    return _each_date(start.date(), end.date(), start.tz, days=1)


def each_week_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """Понедельник (00:00) каждой ISO недели интервала."""
    start, end = _bounds(interval)
    first = start.date().subtract(days=start.date().day_of_week().value - 1)
    last = end.date().subtract(days=end.date().day_of_week().value - 1)
    return _each_date(first, last, start.tz, weeks=1)


def each_month_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """Первое число (00:00) каждого месяца интервала."""
    start, end = _bounds(interval)
    first = start.date().replace(day=1)
    last = end.date().replace(day=1)
    return _each_date(first, last, start.tz, months=1)


def each_year_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """1 января (00:00) каждого года интервала."""
    start, end = _bounds(interval)
    return [
        plain_date_to_zoned_date_time(Date(year, 1, 1), start.tz)
        for year in range(start.year, end.year + 1)
    ]


def _each_exact(
    first: ZonedDateTime, last: ZonedDateTime, **step: int
) -> list[ZonedDateTime]:
    moments: list[ZonedDateTime] = []
    current = first
    while current <= last:
        moments.append(current)
        current = current.add(**step)
    return moments


def each_hour_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """
    Начало каждого часа интервала (шаг — абсолютный час).

    В день перехода DST часов может быть 23 или 25.
    """
    start, end = _bounds(interval)
    floor = RoundToNearestHourOptions(mode="floor")
    return _each_exact(
        round_to_nearest_hour(start, floor), round_to_nearest_hour(end, floor), hours=1
    )


def each_minute_of_interval(interval: Interval) -> list[ZonedDateTime]:
    """Начало каждой минуты интервала."""
    start, end = _bounds(interval)
    floor = RoundToNearestMinuteOptions(mode="floor")
    return _each_exact(
        round_to_nearest_minute(start, floor), round_to_nearest_minute(end, floor), minutes=1
    )
