"""
Difference — Разница между двумя моментами времени

Все функции принимают (later, earlier): положительный результат, если
later позже earlier, отрицательный — если раньше.

Точные единицы (наносекунды ... часы):
- считаются по абсолютному времени
- целое число, дробная часть отбрасывается в сторону нуля

Календарные единицы (дни, недели, месяцы, годы):
- дробное число, отсчёт от earlier в его часовом поясе
- сутки длиной 23 или 25 часов (переход DST) считаются одним днём
- месяц — от числа до того же числа следующего месяца
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.config import (
    NS_PER_HOUR,
    NS_PER_MICROSECOND,
    NS_PER_MILLISECOND,
    NS_PER_MINUTE,
    NS_PER_SECOND,
)
from tiempo.core.normalize import normalize_temporal_input


def _truncate(nanoseconds: int, unit_ns: int) -> int:
    """Целое деление с отбрасыванием в сторону нуля."""
    whole = abs(nanoseconds) // unit_ns
    return whole if nanoseconds >= 0 else -whole


# =============================================================================
# ТОЧНЫЕ ЕДИНИЦЫ
# =============================================================================


def difference_in_nanoseconds(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """
    Разница в наносекундах (без потери точности).

    Examples:
        >>> a = Instant.from_utc(2025, 1, 20, 12, 0, 0, nanosecond=500)
        >>> difference_in_nanoseconds(a, Instant.from_utc(2025, 1, 20, 12))
        500
    """
    zoned_later = normalize_temporal_input(later)
    zoned_earlier = normalize_temporal_input(earlier)
    return (zoned_later - zoned_earlier).in_nanoseconds()


def difference_in_microseconds(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """Разница в целых микросекундах."""
    return _truncate(difference_in_nanoseconds(later, earlier), NS_PER_MICROSECOND)


def difference_in_milliseconds(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """Разница в целых миллисекундах."""
    return _truncate(difference_in_nanoseconds(later, earlier), NS_PER_MILLISECOND)


def difference_in_seconds(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """Разница в целых секундах."""
    return _truncate(difference_in_nanoseconds(later, earlier), NS_PER_SECOND)


def difference_in_minutes(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """Разница в целых минутах."""
    return _truncate(difference_in_nanoseconds(later, earlier), NS_PER_MINUTE)


def difference_in_hours(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> int:
    """
    Разница в целых часах (абсолютное время).

    Examples:
        >>> later = ZonedDateTime(2025, 1, 20, 15, 59, tz="UTC")
        >>> difference_in_hours(later, ZonedDateTime(2025, 1, 20, 12, tz="UTC"))
        3
    """
    return _truncate(difference_in_nanoseconds(later, earlier), NS_PER_HOUR)


# =============================================================================
# КАЛЕНДАРНЫЕ ЕДИНИЦЫ
# =============================================================================


def _estimate_steps(later: ZonedDateTime, earlier: ZonedDateTime, unit: str) -> int:
    """Грубая оценка числа целых шагов, уточняется в _calendar_total."""
    if unit == "years":
        return later.year - earlier.year
    if unit == "months":
        return (later.year - earlier.year) * 12 + (later.month - earlier.month)
    days = earlier.date().days_until(later.date())
    return days // 7 if unit == "weeks" else days


def _calendar_total(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime, unit: str
) -> float:
    """
    Дробное число календарных единиц от earlier до later.

    Целая часть n — наибольшее число шагов от earlier, не перескакивающее
    later; дробная — доля пройденного отрезка [earlier + n, earlier + n + 1]
    по абсолютному времени.
    """
    target = normalize_temporal_input(later)
    anchor = normalize_temporal_input(earlier)
    # Шаги отсчитываются в часовом поясе earlier
    target = target.instant().to_tz(anchor.tz)

    direction = 1 if target >= anchor else -1

    def shifted(steps: int) -> ZonedDateTime:
        return anchor.add(**{unit: steps}, disambiguate="compatible")

    def overshoots(moment: ZonedDateTime) -> bool:
        return moment > target if direction == 1 else moment < target

    steps = _estimate_steps(target, anchor, unit)
    while steps != 0 and overshoots(shifted(steps)):
        steps -= direction
    while not overshoots(shifted(steps + direction)):
        steps += direction

    start = shifted(steps)
    end = shifted(steps + direction)
    fraction = (target - start).in_nanoseconds() / (end - start).in_nanoseconds()
    return steps + direction * fraction


def difference_in_days(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> float:
    """
    Разница в днях (дробная, с учётом DST).

    Examples:
        >>> # 9 марта 2025 в Нью-Йорке длится 23 часа
        >>> later = ZonedDateTime(2025, 3, 10, tz="America/New_York")
        >>> difference_in_days(later, ZonedDateTime(2025, 3, 9, tz="America/New_York"))
        1.0
        >>> later = ZonedDateTime(2025, 1, 21, 12, tz="UTC")
        >>> difference_in_days(later, ZonedDateTime(2025, 1, 20, tz="UTC"))
        1.5
    """
    return _calendar_total(later, earlier, "days")


def difference_in_weeks(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> float:
    """Разница в неделях (дробная)."""
    return _calendar_total(later, earlier, "weeks")


def difference_in_months(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> float:
    """
    Разница в месяцах (дробная).

    Examples:
        >>> later = ZonedDateTime(2025, 3, 15, tz="UTC")
        >>> difference_in_months(later, ZonedDateTime(2025, 1, 15, tz="UTC"))
        2.0
    """
    return _calendar_total(later, earlier, "months")


def difference_in_years(
    later: Instant | ZonedDateTime, earlier: Instant | ZonedDateTime
) -> float:
    """Разница в годах (дробная)."""
    return _calendar_total(later, earlier, "years")
