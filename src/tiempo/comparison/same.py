"""
Same — Совпадение моментов времени с заданной точностью

Сравниваются поля на часах, каждое значение — в своём часовом поясе
(Instant -> UTC). Два представления одного момента в разных поясах
могут оказаться в разных днях:

    is_same_day(ZonedDateTime(2025, 1, 20, 23, tz="America/New_York"),
                ZonedDateTime(2025, 1, 21, 5, tz="Europe/Madrid"))  -> False

Чтобы сравнивать в одном поясе, переведите значения заранее.
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.config import NS_PER_MICROSECOND, NS_PER_MILLISECOND
from tiempo.core.normalize import normalize_temporal_input


def _fields(value: Instant | ZonedDateTime, depth: int) -> tuple[int, ...]:
    """Первые depth полей: год, месяц, день, час, минута, секунда, наносекунда."""
    zoned = normalize_temporal_input(value)
    fields = (
        zoned.year,
        zoned.month,
        zoned.day,
        zoned.hour,
        zoned.minute,
        zoned.second,
        zoned.nanosecond,
    )
    return fields[:depth]


def _same(
    value: Instant | ZonedDateTime, other: Instant | ZonedDateTime, depth: int
) -> bool:
    return _fields(value, depth) == _fields(other, depth)


def _same_subsecond(
    value: Instant | ZonedDateTime, other: Instant | ZonedDateTime, unit_ns: int
) -> bool:
    if not _same(value, other, 6):
        return False
    return (
        normalize_temporal_input(value).nanosecond // unit_ns
        == normalize_temporal_input(other).nanosecond // unit_ns
    )


def is_same_year(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Один и тот же календарный год."""
    return _same(value, other, 1)


def is_same_month(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Один и тот же месяц одного года."""
    return _same(value, other, 2)


def is_same_week(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """
    Одна и та же ISO неделя (понедельник ... воскресенье, ISO год недели).

    Examples:
        >>> # 29 декабря 2025 и 1 января 2026: неделя 2026-W01
        >>> is_same_week(
        ...     ZonedDateTime(2025, 12, 29, tz="UTC"), ZonedDateTime(2026, 1, 1, tz="UTC")
        ... )
        True
    """
    week = normalize_temporal_input(value).date().py_date().isocalendar()[:2]
    other_week = normalize_temporal_input(other).date().py_date().isocalendar()[:2]
    return week == other_week


def is_same_day(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Один и тот же календарный день."""
    return _same(value, other, 3)


def is_same_hour(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Один и тот же час одного дня."""
    return _same(value, other, 4)


def is_same_minute(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Одна и та же минута."""
    return _same(value, other, 5)


def is_same_second(value: Instant | ZonedDateTime, other: Instant | ZonedDateTime) -> bool:
    """Одна и та же секунда."""
    return _same(value, other, 6)


def is_same_millisecond(
    value: Instant | ZonedDateTime, other: Instant | ZonedDateTime
) -> bool:
    """Одна и та же миллисекунда."""
    return _same_subsecond(value, other, NS_PER_MILLISECOND)


def is_same_microsecond(
    value: Instant | ZonedDateTime, other: Instant | ZonedDateTime
) -> bool:
    """Одна и та же микросекунда."""
    return _same_subsecond(value, other, NS_PER_MICROSECOND)


def is_same_nanosecond(
    value: Instant | ZonedDateTime, other: Instant | ZonedDateTime
) -> bool:
    """Все поля совпадают вплоть до наносекунды."""
    return _same(value, other, 7)
