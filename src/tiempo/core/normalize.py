"""
Normalize — Приведение входа к ZonedDateTime

Все функции библиотеки принимают Instant или ZonedDateTime, но
арифметика, сравнения и извлечение полей написаны один раз — для
ZonedDateTime. Этот модуль — единственная точка такого приведения.

Правила:
- Instant -> ZonedDateTime в часовом поясе "UTC" (смещение 0)
- ZonedDateTime -> тот же объект, часовой пояс сохраняется
"""

from whenever import Date, Instant, ZonedDateTime

from tiempo.core.config import UTC_TIMEZONE


def normalize_temporal_input(value: Instant | ZonedDateTime) -> ZonedDateTime:
    """
    Привести Instant или ZonedDateTime к ZonedDateTime.

    Args:
        value: Instant или ZonedDateTime

    Returns:
        ZonedDateTime ("UTC" для Instant, исходный объект для ZonedDateTime)

    Raises:
        TypeError: Если передан другой тип

    Examples:
        >>> normalize_temporal_input(Instant.from_utc(2025, 1, 20, 20)).tz
        'UTC'
    """
    if isinstance(value, ZonedDateTime):
        return value
    if isinstance(value, Instant):
        return value.to_tz(UTC_TIMEZONE)
    raise TypeError(
        f"Expected Instant or ZonedDateTime, got {type(value).__name__}"
    )


def plain_date_to_zoned_date_time(date: Date, timezone: str) -> ZonedDateTime:
    """
    Начало календарной даты (00:00) в указанном часовом поясе.

    Если полночь попадает в DST-разрыв, время сдвигается вперёд
    (стратегия "compatible").
    """
    return ZonedDateTime(date.year, date.month, date.day, tz=timezone)


def normalize_with_plain_date(
    value: Instant | ZonedDateTime | Date, timezone: str | None = None
) -> ZonedDateTime:
    """
    Как normalize_temporal_input, но дополнительно принимает Date.

    Для Date часовой пояс обязателен: дата без пояса не задаёт момент времени.

    Raises:
        ValueError: Если передан Date без timezone
    """
    if isinstance(value, Date):
        if timezone is None:
            raise ValueError("timezone is required when input is a Date")
        return plain_date_to_zoned_date_time(value, timezone)
    return normalize_temporal_input(value)


def now_zoned() -> ZonedDateTime:
    """Текущий момент в UTC."""
    return normalize_temporal_input(Instant.now())
