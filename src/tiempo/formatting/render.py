"""
Render — Отрисовка токенов формата

Токен + значение + локаль -> фрагмент строки.

Числовые поля берутся из значения напрямую (с дополнением нулями),
названия (месяц, день недели, эра, AM/PM, часовой пояс) запрашиваются
у FieldNameProvider. Неизвестный токен выводится как есть.
"""

import math

from whenever import Date, ZonedDateTime

from tiempo.core.config import NS_PER_MILLISECOND, NS_PER_MINUTE
from tiempo.formatting.locale_names import DEFAULT_FIELD_NAMES, FieldNameProvider
from tiempo.formatting.ordinal import ordinal, ordinal_suffix


def _pad(value: int, width: int) -> str:
    return str(value).zfill(width)


def quarter_of(month: int) -> int:
    """Квартал месяца: ceil(month / 3)."""
    return math.ceil(month / 3)


# =============================================================================
# ДАТА
# =============================================================================


def render_date_token(
    token: str,
    date: Date | ZonedDateTime,
    locale: str,
    names: FieldNameProvider = DEFAULT_FIELD_NAMES,
) -> str:
    """
    Отрисовать токен даты (эра, год, квартал, месяц, день, день недели).

    Args:
        token: Токен из DATE_TOKENS (или "Mo" / "do")
        date: Значение с полями year / month / day
        locale: BCP 47 локаль для названий
        names: Источник локализованных названий

    Returns:
        Фрагмент строки
    """
    # Era
    if token == "GGGGG":
        return names.field_name(date, "era", "narrow", locale)
    if token == "GGGG":
        return names.field_name(date, "era", "long", locale)
    if token in ("GGG", "GG", "G"):
        return names.field_name(date, "era", "short", locale)

    # Year
    if token == "yyyy":
        return _pad(date.year, 4)
    if token == "yyy":
        return _pad(date.year, 3)
    if token == "yy":
        return _pad(date.year % 100, 2)
    if token == "y":
        return str(date.year)

    # Quarter
    if token in ("QQQQQ", "Q"):
        return str(quarter_of(date.month))
    if token == "QQQQ":
        quarter = quarter_of(date.month)
        return f"{quarter}{ordinal_suffix(quarter)} quarter"
    if token == "QQQ":
        return f"Q{quarter_of(date.month)}"
    if token == "QQ":
        return _pad(quarter_of(date.month), 2)

    # Month
    if token == "MMMMM":
        return names.field_name(date, "month", "narrow", locale)
    if token == "MMMM":
        return names.field_name(date, "month", "long", locale)
    if token == "MMM":
        return names.field_name(date, "month", "short", locale)
    if token == "MM":
        return _pad(date.month, 2)
    if token == "Mo":
        return ordinal(date.month)
    if token == "M":
        return str(date.month)

    # Day of month
    if token == "do":
        return ordinal(date.day)
    if token == "dd":
        return _pad(date.day, 2)
    if token == "d":
        return str(date.day)

    # Day of week
    if token == "EEEEEE":
        return names.field_name(date, "weekday", "short", locale)[:2]
    if token == "EEEEE":
        return names.field_name(date, "weekday", "narrow", locale)
    if token == "EEEE":
        return names.field_name(date, "weekday", "long", locale)
    if token in ("EEE", "EE", "E"):
        return names.field_name(date, "weekday", "short", locale)

    return token


# =============================================================================
# ВРЕМЯ, СМЕЩЕНИЕ, ЧАСОВОЙ ПОЯС
# =============================================================================


def format_offset(zoned: ZonedDateTime) -> str:
    """
    Смещение от UTC в виде ±hh:mm.

    Examples:
        >>> format_offset(ZonedDateTime(2025, 1, 20, tz="America/New_York"))
        '-05:00'
    """
    offset_ns = zoned.offset.in_nanoseconds()
    # Секунды исторических смещений (LMT) отбрасываются
    total_minutes = abs(offset_ns) // NS_PER_MINUTE
    sign = "-" if offset_ns < 0 and total_minutes else "+"
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _render_offset(token: str, zoned: ZonedDateTime) -> str:
    offset = format_offset(zoned)
    is_utc = offset == "+00:00"
    zulu = token[0] == "X"

    if zulu and is_utc:
        return "Z"
    if len(token) == 1:
        return offset.split(":")[0]
    if len(token) in (2, 4):
        return offset.replace(":", "")
    return offset


def _hour12(hour: int) -> int:
    return hour % 12 or 12


def render_time_token(
    token: str,
    zoned: ZonedDateTime,
    locale: str,
    names: FieldNameProvider = DEFAULT_FIELD_NAMES,
) -> str:
    """
    Отрисовать токен времени суток, смещения, часового пояса или метки времени.

    Токены даты делегируются render_date_token.
    """
    # AM/PM
    if token == "aaaaa":
        return names.field_name(zoned, "dayPeriod", "narrow", locale).lower()[:1]
    if token == "aaaa":
        return "a.m." if zoned.hour < 12 else "p.m."
    if token == "aaa":
        return names.field_name(zoned, "dayPeriod", "short", locale).lower()
    if token in ("aa", "a"):
        return names.field_name(zoned, "dayPeriod", "short", locale)

    # Hour [0-23]
    if token == "HH":
        return _pad(zoned.hour, 2)
    if token == "H":
        return str(zoned.hour)

    # Hour [1-12]
    if token == "hh":
        return _pad(_hour12(zoned.hour), 2)
    if token == "h":
        return str(_hour12(zoned.hour))

    # Minute / second
    if token == "mm":
        return _pad(zoned.minute, 2)
    if token == "m":
        return str(zoned.minute)
    if token == "ss":
        return _pad(zoned.second, 2)
    if token == "s":
        return str(zoned.second)

    # Fractional seconds
    millisecond = zoned.nanosecond // NS_PER_MILLISECOND
    if token == "SSS":
        return _pad(millisecond, 3)
    if token == "SS":
        return _pad(millisecond // 10, 2)
    if token == "S":
        return str(millisecond // 100)

    # Offset
    if token[0] in "Xx":
        return _render_offset(token, zoned)

    # Timezone name
    if token == "zzzz":
        return names.field_name(zoned, "timeZoneName", "long", locale)
    if token in ("zzz", "zz", "z"):
        return names.field_name(zoned, "timeZoneName", "short", locale)

    # Timestamps
    if token == "T":
        return str(zoned.timestamp_millis())
    if token == "t":
        return str(zoned.timestamp())

    return render_date_token(token, zoned, locale, names)
