"""
Periods — Начало и конец дня, недели, месяца, года

Границы считаются в часовом поясе значения (Instant -> UTC).
Неделя — ISO: понедельник ... воскресенье.
Конец периода — последняя наносекунда перед началом следующего.

Функции дня и недели дополнительно принимают Date + часовой пояс.
"""

from whenever import Date, Instant, ZonedDateTime

from tiempo.core.normalize import normalize_temporal_input, normalize_with_plain_date


def _end_of_day(zoned: ZonedDateTime) -> ZonedDateTime:
    """Последняя наносекунда календарного дня (дни 23/25 часов учтены)."""
    next_day = zoned.start_of_day().add(days=1, disambiguate="compatible")
    return next_day.subtract(nanoseconds=1)


def _monday_of(zoned: ZonedDateTime) -> Date:
    date = zoned.date()
    return date.subtract(days=date.day_of_week().value - 1)


# =============================================================================
# ДЕНЬ
# =============================================================================


def start_of_day(
    value: Instant | ZonedDateTime | Date, timezone: str | None = None
) -> ZonedDateTime:
    """
    Начало календарного дня.

    Обычно полночь; если полночь пропущена переходом на летнее время —
    первый существующий момент дня.

    Raises:
        ValueError: Если передан Date без timezone
    """
    return normalize_with_plain_date(value, timezone).start_of_day()


def end_of_day(
    value: Instant | ZonedDateTime | Date, timezone: str | None = None
) -> ZonedDateTime:
    """
    Конец календарного дня: 23:59:59.999999999.

    Examples:
        >>> end_of_day(ZonedDateTime(2025, 1, 20, 15, tz="UTC"))
        ZonedDateTime(2025-01-20 23:59:59.999999999+00:00[UTC])
    """
    return _end_of_day(normalize_with_plain_date(value, timezone))


# =============================================================================
# НЕДЕЛЯ
# =============================================================================


def start_of_week(
    value: Instant | ZonedDateTime | Date, timezone: str | None = None
) -> ZonedDateTime:
    """
    Начало ISO недели: понедельник 00:00.

    Examples:
        >>> start_of_week(ZonedDateTime(2025, 1, 22, 15, tz="UTC"))
        ZonedDateTime(2025-01-20 00:00:00+00:00[UTC])
    """
    zoned = normalize_with_plain_date(value, timezone)
    return zoned.replace_date(_monday_of(zoned), disambiguate="compatible").start_of_day()


def end_of_week(
    value: Instant | ZonedDateTime | Date, timezone: str | None = None
) -> ZonedDateTime:
    """Конец ISO недели: воскресенье 23:59:59.999999999."""
    zoned = normalize_with_plain_date(value, timezone)
    sunday = _monday_of(zoned).add(days=6)
    return _end_of_day(zoned.replace_date(sunday, disambiguate="compatible"))


# =============================================================================
# МЕСЯЦ И ГОД
# =============================================================================


def start_of_month(value: Instant | ZonedDateTime) -> ZonedDateTime:
    """Первое число месяца, 00:00."""
    zoned = normalize_temporal_input(value)
    first_day = zoned.date().replace(day=1)
    return zoned.replace_date(first_day, disambiguate="compatible").start_of_day()


def end_of_month(value: Instant | ZonedDateTime) -> ZonedDateTime:
    """
    Последнее число месяца, 23:59:59.999999999.

    Examples:
        >>> end_of_month(ZonedDateTime(2024, 2, 10, tz="UTC")).day
        29
    """
    zoned = normalize_temporal_input(value)
    last_day = zoned.date().replace(day=1).add(months=1).subtract(days=1)
    return _end_of_day(zoned.replace_date(last_day, disambiguate="compatible"))


def start_of_year(value: Instant | ZonedDateTime) -> ZonedDateTime:
    """1 января, 00:00."""
    zoned = normalize_temporal_input(value)
    january_first = zoned.replace_date(Date(zoned.year, 1, 1), disambiguate="compatible")
    return january_first.start_of_day()


def end_of_year(value: Instant | ZonedDateTime) -> ZonedDateTime:
    """31 декабря, 23:59:59.999999999."""
    zoned = normalize_temporal_input(value)
    december_last = zoned.replace_date(Date(zoned.year, 12, 31), disambiguate="compatible")
    return _end_of_day(december_last)
