"""
Zoned — Форматирование момента времени по строке токенов

Тот же язык формата, что и у format_plain_date, плюс токены времени суток,
смещения, часового пояса и меток времени.
"""

from whenever import Instant, ZonedDateTime

from tiempo.core.domain.options import FormatOptions
from tiempo.core.normalize import normalize_temporal_input
from tiempo.formatting.locale_names import DEFAULT_FIELD_NAMES, FieldNameProvider
from tiempo.formatting.plain_date import expand_format
from tiempo.formatting.render import render_time_token
from tiempo.formatting.tokens import DATETIME_TOKENS


def resolve_zoned(value: Instant | ZonedDateTime, time_zone: str | None) -> ZonedDateTime:
    """
    Значение в часовом поясе вывода.

    time_zone задан -> перевод через Instant; иначе обычная нормализация.
    """
    if time_zone:
        instant = value if isinstance(value, Instant) else value.instant()
        return instant.to_tz(time_zone)
    return normalize_temporal_input(value)


def format(
    value: Instant | ZonedDateTime,
    format_str: str,
    options: FormatOptions | None = None,
    names: FieldNameProvider = DEFAULT_FIELD_NAMES,
) -> str:
    """
    Отформатировать Instant или ZonedDateTime по строке токенов.

    Args:
        value: Момент времени
        format_str: Строка формата (например, "yyyy-MM-dd HH:mm:ss")
        options: Локаль и часовой пояс вывода
        names: Источник локализованных названий

    Returns:
        Отформатированная строка

    Examples:
        >>> zoned = ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")
        >>> format(zoned, "EEEE, MMMM do, yyyy 'at' h:mm a")
        'Monday, January 20th, 2025 at 3:00 PM'
        >>> format(zoned, "HH:mm", FormatOptions(time_zone="Europe/London"))
        '20:00'
    """
    options = options or FormatOptions()
    zoned = resolve_zoned(value, options.time_zone)
    return expand_format(
        format_str,
        DATETIME_TOKENS,
        lambda token: render_time_token(token, zoned, options.locale, names),
    )
