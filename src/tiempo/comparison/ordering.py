"""
Ordering — Сравнение моментов времени, дат и времени суток

Моменты (Instant / ZonedDateTime) сравниваются по абсолютному времени:
часовой пояс на результат не влияет.
"""

from whenever import Date, Instant, Time, ZonedDateTime

from tiempo.core.domain.temporal import Interval
from tiempo.core.normalize import normalize_temporal_input


def _instant(value: Instant | ZonedDateTime) -> Instant:
    return normalize_temporal_input(value).instant()


# =============================================================================
# МОМЕНТЫ ВРЕМЕНИ
# =============================================================================


def is_before(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """
    value строго раньше other.

    Examples:
        >>> ny = ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")  # 20:00 UTC
        >>> is_before(ny, Instant.from_utc(2025, 1, 20, 21))
        True
    """
    return _instant(value) < _instant(other)


def is_after(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """value строго позже other."""
    return _instant(value) > _instant(other)


def is_future(value: Instant | ZonedDateTime) -> bool:
    """value позже текущего момента."""
    return _instant(value) > Instant.now()


def is_past(value: Instant | ZonedDateTime) -> bool:
    """value раньше текущего момента."""
    return _instant(value) < Instant.now()


def is_within_interval(value: Instant | ZonedDateTime, interval: Interval) -> bool:
    """
    value лежит в [interval.start, interval.end] (границы включительно).

    Для start > end всегда False.
    """
    moment = _instant(value)
    return not moment < _instant(interval.start) and not moment > _instant(interval.end)


# =============================================================================
# КАЛЕНДАРНЫЕ ДАТЫ
# =============================================================================


def is_plain_date_before(date: Date, other: Date) -> bool:
    """date строго раньше other."""
    return date < other


def is_plain_date_after(date: Date, other: Date) -> bool:
    """date строго позже other."""
    return date > other


def is_plain_date_equal(date: Date, other: Date) -> bool:
    """Один и тот же календарный день."""
    return date == other


# =============================================================================
# ВРЕМЯ СУТОК
# =============================================================================


def is_plain_time_before(time: Time, other: Time) -> bool:
    """time строго раньше other (в пределах одних суток)."""
    return time < other


def is_plain_time_after(time: Time, other: Time) -> bool:
    """time строго позже other."""
    return time > other


def is_plain_time_equal(time: Time, other: Time) -> bool:
    """Одинаковое время суток с точностью до наносекунды."""
    return time == other
