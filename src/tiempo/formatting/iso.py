"""
ISO — Строковые представления ISO 8601 и ISO 9075
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.config import UTC_TIMEZONE
from tiempo.core.domain.options import ToIso9075Options, ToIsoOptions


def _to_instant(value: Instant | ZonedDateTime) -> Instant:
    if isinstance(value, Instant):
        return value
    if isinstance(value, ZonedDateTime):
        return value.instant()
    raise TypeError(f"Expected Instant or ZonedDateTime, got {type(value).__name__}")


def to_utc_string(value: Instant | ZonedDateTime) -> str:
    """
    Момент времени в UTC, ISO 8601 с суффиксом Z.

    Examples:
        >>> to_utc_string(ZonedDateTime(2025, 1, 20, 15, tz="America/New_York"))
        '2025-01-20T20:00:00Z'
    """
    return _to_instant(value).format_common_iso()


def to_iso(value: Instant | ZonedDateTime, options: ToIsoOptions | None = None) -> str:
    """
    ISO 8601 строка без названия часового пояса.

    Args:
        value: Instant или ZonedDateTime
        options: mode='utc' -> UTC с Z (по умолчанию);
            mode='offset' -> местное время со смещением (только для ZonedDateTime)

    Examples:
        >>> zoned = ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")
        >>> to_iso(zoned)
        '2025-01-20T20:00:00Z'
        >>> to_iso(zoned, ToIsoOptions(mode="offset"))
        '2025-01-20T15:00:00-05:00'
    """
    options = options or ToIsoOptions()
    if isinstance(value, ZonedDateTime) and options.mode == "offset":
        return value.to_fixed_offset().format_common_iso()
    return to_utc_string(value)


def to_iso9075(
    value: Instant | ZonedDateTime, options: ToIso9075Options | None = None
) -> str:
    """
    ISO 9075 (SQL) строка: "YYYY-MM-DD HH:MM:SS".

    Args:
        value: Instant или ZonedDateTime
        options: mode ('utc' / 'local') и representation ('complete' / 'date' / 'time').
            mode='local' действует только для ZonedDateTime; Instant всегда в UTC.

    Examples:
        >>> zoned = ZonedDateTime(2019, 9, 18, 19, 0, 52, tz="America/New_York")
        >>> to_iso9075(zoned)
        '2019-09-18 23:00:52'
        >>> to_iso9075(zoned, ToIso9075Options(mode="local", representation="time"))
        '19:00:52'
    """
    options = options or ToIso9075Options()

    if isinstance(value, ZonedDateTime) and options.mode == "local":
        zoned = value
    else:
        zoned = _to_instant(value).to_tz(UTC_TIMEZONE)

    date_part = f"{zoned.year:04d}-{zoned.month:02d}-{zoned.day:02d}"
    time_part = f"{zoned.hour:02d}:{zoned.minute:02d}:{zoned.second:02d}"

    if options.representation == "date":
        return date_part
    if options.representation == "time":
        return time_part
    return f"{date_part} {time_part}"
