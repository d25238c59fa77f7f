"""
Shift — Сдвиг момента времени на N единиц

Все функции нормализуют вход (Instant -> UTC) и возвращают ZonedDateTime.

Календарные единицы (годы, месяцы, недели, дни) сохраняют время на часах:
1 марта 10:00 + 1 день = 2 марта 10:00 даже через переход на летнее время.
Неоднозначное время разрешается стратегией "compatible": время в разрыве
(переход на летнее время) сдвигается вперёд на длину разрыва, из
повторяющегося часа берётся более раннее смещение.

Точные единицы (часы и мельче) сдвигают момент на абсолютное количество
наносекунд: в день перехода на летнее время +24 часа != +1 день.

Конец месяца обрезается: 31 января + 1 месяц = 28/29 февраля.
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.normalize import normalize_temporal_input


def _add(value: Instant | ZonedDateTime, **amount: int) -> ZonedDateTime:
    return normalize_temporal_input(value).add(**amount)


def _subtract(value: Instant | ZonedDateTime, **amount: int) -> ZonedDateTime:
    return normalize_temporal_input(value).subtract(**amount)


def _add_calendar(value: Instant | ZonedDateTime, **amount: int) -> ZonedDateTime:
    return normalize_temporal_input(value).add(**amount, disambiguate="compatible")


def _subtract_calendar(value: Instant | ZonedDateTime, **amount: int) -> ZonedDateTime:
    return normalize_temporal_input(value).subtract(**amount, disambiguate="compatible")


# =============================================================================
# КАЛЕНДАРНЫЕ ЕДИНИЦЫ
# =============================================================================


def add_years(value: Instant | ZonedDateTime, years: int) -> ZonedDateTime:
    """
    Прибавить годы.

    Examples:
        >>> add_years(ZonedDateTime(2024, 2, 29, tz="UTC"), 1)
        ZonedDateTime(2025-02-28 00:00:00+00:00[UTC])
    """
    return _add_calendar(value, years=years)


def add_months(value: Instant | ZonedDateTime, months: int) -> ZonedDateTime:
    """
    Прибавить месяцы (день обрезается до конца месяца).

    Examples:
        >>> add_months(ZonedDateTime(2025, 1, 31, tz="UTC"), 1)
        ZonedDateTime(2025-02-28 00:00:00+00:00[UTC])
    """
    return _add_calendar(value, months=months)


def add_weeks(value: Instant | ZonedDateTime, weeks: int) -> ZonedDateTime:
    """Прибавить недели."""
    return _add_calendar(value, weeks=weeks)


def add_days(value: Instant | ZonedDateTime, days: int) -> ZonedDateTime:
    """Прибавить дни (время на часах сохраняется)."""
    return _add_calendar(value, days=days)


def sub_years(value: Instant | ZonedDateTime, years: int) -> ZonedDateTime:
    """Вычесть годы."""
    return _subtract_calendar(value, years=years)


def sub_months(value: Instant | ZonedDateTime, months: int) -> ZonedDateTime:
    """
    Вычесть месяцы.

    Examples:
        >>> sub_months(ZonedDateTime(2025, 3, 31, tz="UTC"), 1)
        ZonedDateTime(2025-02-28 00:00:00+00:00[UTC])
    """
    return _subtract_calendar(value, months=months)


def sub_weeks(value: Instant | ZonedDateTime, weeks: int) -> ZonedDateTime:
    """Вычесть недели."""
    return _subtract_calendar(value, weeks=weeks)


def sub_days(value: Instant | ZonedDateTime, days: int) -> ZonedDateTime:
    """Вычесть дни."""
    return _subtract_calendar(value, days=days)


# =============================================================================
# ТОЧНЫЕ ЕДИНИЦЫ
# =============================================================================


def add_hours(value: Instant | ZonedDateTime, hours: int) -> ZonedDateTime:
    """
    Прибавить часы (абсолютное время).

    Examples:
        >>> add_hours(ZonedDateTime(2025, 3, 9, 1, tz="America/New_York"), 1)
        ZonedDateTime(2025-03-09 03:00:00-04:00[America/New_York])
    """
    return _add(value, hours=hours)


def add_minutes(value: Instant | ZonedDateTime, minutes: int) -> ZonedDateTime:
    """Прибавить минуты."""
    return _add(value, minutes=minutes)


def add_seconds(value: Instant | ZonedDateTime, seconds: int) -> ZonedDateTime:
    """Прибавить секунды."""
    return _add(value, seconds=seconds)


def add_milliseconds(value: Instant | ZonedDateTime, milliseconds: int) -> ZonedDateTime:
    """Прибавить миллисекунды."""
    return _add(value, milliseconds=milliseconds)


def add_microseconds(value: Instant | ZonedDateTime, microseconds: int) -> ZonedDateTime:
    """Прибавить микросекунды."""
    return _add(value, microseconds=microseconds)


def add_nanoseconds(value: Instant | ZonedDateTime, nanoseconds: int) -> ZonedDateTime:
    """Прибавить наносекунды."""
    return _add(value, nanoseconds=nanoseconds)


def sub_hours(value: Instant | ZonedDateTime, hours: int) -> ZonedDateTime:
    """Вычесть часы."""
    return _subtract(value, hours=hours)


def sub_minutes(value: Instant | ZonedDateTime, minutes: int) -> ZonedDateTime:
    """Вычесть минуты."""
    return _subtract(value, minutes=minutes)


def sub_seconds(value: Instant | ZonedDateTime, seconds: int) -> ZonedDateTime:
    """Вычесть секунды."""
    return _subtract(value, seconds=seconds)


def sub_milliseconds(value: Instant | ZonedDateTime, milliseconds: int) -> ZonedDateTime:
    """Вычесть миллисекунды."""
    return _subtract(value, milliseconds=milliseconds)


def sub_microseconds(value: Instant | ZonedDateTime, microseconds: int) -> ZonedDateTime:
    """Вычесть микросекунды."""
    return _subtract(value, microseconds=microseconds)


def sub_nanoseconds(value: Instant | ZonedDateTime, nanoseconds: int) -> ZonedDateTime:
    """Вычесть наносекунды."""
    return _subtract(value, nanoseconds=nanoseconds)
