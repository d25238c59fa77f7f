"""
Plain Date — Форматирование календарной даты по строке токенов

Один проход слева направо:
1. Кавычка -> экранированный участок копируется как есть
2. Токен из словаря -> отрисованный фрагмент
3. Иначе -> один символ как есть

Ошибок не бывает: нераспознанный текст просто копируется.
"""

from collections.abc import Callable

from whenever import Date

from tiempo.core.domain.options import FormatPlainDateOptions
from tiempo.formatting.locale_names import DEFAULT_FIELD_NAMES, FieldNameProvider
from tiempo.formatting.render import render_date_token
from tiempo.formatting.tokens import DATE_TOKENS, QUOTE, consume_quoted, scan_token


def expand_format(
    format_str: str,
    vocabulary: frozenset[str],
    render: Callable[[str], str],
) -> str:
    """
    Пройти строку формата и заменить каждый токен результатом render(token).

    Args:
        format_str: Строка формата
        vocabulary: Словарь распознаваемых токенов
        render: Отрисовка одного токена

    Returns:
        Итоговая строка
    """
    parts: list[str] = []
    i = 0
    length = len(format_str)

    while i < length:
        char = format_str[i]

        if char == QUOTE:
            literal, i = consume_quoted(format_str, i)
            parts.append(literal)
            continue

        token = scan_token(format_str, i, vocabulary)
        if token is None:
            parts.append(char)
            i += 1
            continue

        parts.append(render(token))
        i += len(token)

    return "".join(parts)


def format_plain_date(
    date: Date,
    format_str: str,
    options: FormatPlainDateOptions | None = None,
    names: FieldNameProvider = DEFAULT_FIELD_NAMES,
) -> str:
    """
    Отформатировать Date по строке токенов.

    Args:
        date: Календарная дата
        format_str: Строка формата (например, "EEEE, MMMM do, yyyy")
        options: Локаль (по умолчанию en-US)
        names: Источник локализованных названий

    Returns:
        Отформатированная строка

    Raises:
        babel.UnknownLocaleError: Если локаль неизвестна и формат
            содержит именованные поля

    Examples:
        >>> format_plain_date(Date(2025, 1, 20), "yyyy-MM-dd")
        '2025-01-20'
        >>> format_plain_date(Date(2025, 1, 20), "EEEE, MMMM do, yyyy")
        'Monday, January 20th, 2025'
        >>> format_plain_date(Date(2025, 1, 20), "MMMM", FormatPlainDateOptions(locale="es-ES"))
        'enero'
    """
    locale = (options or FormatPlainDateOptions()).locale
    return expand_format(
        format_str,
        DATE_TOKENS,
        lambda token: render_date_token(token, date, locale, names),
    )
