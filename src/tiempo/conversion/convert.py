"""
Convert — Преобразования между представлениями времени

Поддерживаемые входы:
- str: ISO 8601 со смещением или Z ("2025-01-20T15:00:00-05:00"),
  допускается суффикс часового пояса ("...-05:00[America/New_York]")
- datetime: стандартный datetime с tzinfo (naive отклоняется)
- Instant, ZonedDateTime

Текущее время:
- now / today без часового пояса используют пояс хоста (tzlocal)
"""

from datetime import datetime

from whenever import Date, Instant, OffsetDateTime, Time, ZonedDateTime

from tiempo.core.timezones import system_timezone

ConvertibleInput = str | datetime | Instant | ZonedDateTime


def parse_instant(text: str) -> Instant:
    """
    ISO 8601 строка -> Instant.

    Raises:
        ValueError: Если строка не ISO 8601 или в ней нет смещения
    """
    if "[" in text:
        return ZonedDateTime.parse_common_iso(text).instant()
    return OffsetDateTime.parse_common_iso(text).instant()


def _to_instant(value: ConvertibleInput) -> Instant:
    if isinstance(value, str):
        return parse_instant(value)
    if isinstance(value, datetime):
        return Instant.from_py_datetime(value)
    if isinstance(value, Instant):
        return value
    if isinstance(value, ZonedDateTime):
        return value.instant()
    raise TypeError(
        f"Expected str, datetime, Instant or ZonedDateTime, got {type(value).__name__}"
    )


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def to_zoned_time(value: ConvertibleInput, timezone: str) -> ZonedDateTime:
    """
    Тот же момент, наблюдаемый в часовом поясе timezone.

    Examples:
        >>> to_zoned_time("2025-01-20T20:00:00Z", "America/New_York")
        ZonedDateTime(2025-01-20 15:00:00-05:00[America/New_York])
    """
    return _to_instant(value).to_tz(timezone)


def to_utc(value: str | ZonedDateTime) -> Instant:
    """
    ISO строка или ZonedDateTime -> Instant.

    Examples:
        >>> to_utc("2025-01-20T15:00:00-05:00")
        Instant(2025-01-20 20:00:00Z)
    """
    if not isinstance(value, (str, ZonedDateTime)):
        raise TypeError(f"Expected str or ZonedDateTime, got {type(value).__name__}")
    return _to_instant(value)


def _resolve_zoned(value: ConvertibleInput, timezone: str | None) -> ZonedDateTime:
    if timezone is None:
        if isinstance(value, ZonedDateTime):
            return value
        raise ValueError("Timezone is required unless input is a ZonedDateTime")
    return to_zoned_time(value, timezone)


def to_plain_date(value: ConvertibleInput, timezone: str | None = None) -> Date:
    """
    Календарная дата момента в часовом поясе.

    Args:
        value: Момент времени
        timezone: Обязателен, если value не ZonedDateTime

    Raises:
        ValueError: Если часовой пояс не задан и value не ZonedDateTime
    """
    return _resolve_zoned(value, timezone).date()


def to_plain_time(value: ConvertibleInput, timezone: str | None = None) -> Time:
    """
    Время суток момента в часовом поясе.

    Raises:
        ValueError: Если часовой пояс не задан и value не ZonedDateTime
    """
    return _resolve_zoned(value, timezone).time()


def to_date(value: Instant | ZonedDateTime) -> datetime:
    """
    Момент -> стандартный datetime в UTC (tzinfo=UTC).

    Наносекунды обрезаются до микросекунд.
    """
    if isinstance(value, ZonedDateTime):
        value = value.instant()
    if not isinstance(value, Instant):
        raise TypeError(f"Expected Instant or ZonedDateTime, got {type(value).__name__}")
    return value.py_datetime()


# =============================================================================
# ТЕКУЩЕЕ ВРЕМЯ
# =============================================================================


def now(timezone: str | None = None) -> ZonedDateTime:
    """Текущий момент в часовом поясе (по умолчанию — пояс хоста)."""
    return ZonedDateTime.now(timezone or system_timezone())


def today(timezone: str | None = None) -> Date:
    """Сегодняшняя дата в часовом поясе (по умолчанию — пояс хоста)."""
    return now(timezone).date()


def get_today(timezone: str | None = None) -> Date:
    """Синоним today."""
    return today(timezone)
