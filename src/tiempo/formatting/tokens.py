"""
Tokens — Сканер строки формата

Строка формата — смесь литерального текста, экранированных участков в
одинарных кавычках и токенов (серий одинаковых букв, например "yyyy").

Правила сканера:
1. `'...'` копируется как есть; `''` даёт одну кавычку (и снаружи, и внутри)
2. "Mo" и "do" проверяются первыми: это два разных символа, серия их не выразит
3. Иначе считается длина серии одинаковых символов и проверяется словарь
   от min(серия, MAX_TOKEN_WIDTH) вниз до 1 — побеждает самый длинный
4. Нет совпадения — вызывающий код копирует ОДИН символ и сдвигается на 1
"""

from typing import Final

QUOTE: Final[str] = "'"

# Самый длинный токен словаря ("EEEEEE")
MAX_TOKEN_WIDTH: Final[int] = 6

# Порядковые токены: проверяются до общего правила серий
ORDINAL_TOKENS: Final[frozenset[str]] = frozenset({"Mo", "do"})


# =============================================================================
# СЛОВАРИ ТОКЕНОВ
# =============================================================================

# Только дата: эра, год, квартал, месяц, день, день недели
DATE_TOKENS: Final[frozenset[str]] = frozenset(
    {
        # Era
        "GGGGG", "GGGG", "GGG", "GG", "G",
        # Year
        "yyyy", "yyy", "yy", "y",
        # Quarter
        "QQQQQ", "QQQQ", "QQQ", "QQ", "Q",
        # Month
        "MMMMM", "MMMM", "MMM", "MM", "M",
        # Day of month
        "dd", "d",
        # Day of week
        "EEEEEE", "EEEEE", "EEEE", "EEE", "EE", "E",
    }
)

# Время суток, смещение, часовой пояс, метки времени
TIME_TOKENS: Final[frozenset[str]] = frozenset(
    {
        # AM/PM
        "aaaaa", "aaaa", "aaa", "aa", "a",
        # Hour
        "HH", "H", "hh", "h",
        # Minute / second / fraction
        "mm", "m", "ss", "s", "SSS", "SS", "S",
        # Offset
        "XXXXX", "XXXX", "XXX", "XX", "X",
        "xxxxx", "xxxx", "xxx", "xx", "x",
        # Timezone name
        "zzzz", "zzz", "zz", "z",
        # Timestamps
        "T", "t",
    }
)

DATETIME_TOKENS: Final[frozenset[str]] = DATE_TOKENS | TIME_TOKENS


# =============================================================================
# СКАНЕР
# =============================================================================


def consume_quoted(format_str: str, start: int) -> tuple[str, int]:
    """
    Прочитать экранированный участок, начинающийся с кавычки в позиции start.

    Args:
        format_str: Строка формата
        start: Позиция открывающей кавычки

    Returns:
        (литеральный текст без экранирования, позиция после участка)

    Examples:
        >>> consume_quoted("'at' h", 0)
        ('at', 4)
        >>> consume_quoted("''", 0)
        ("'", 2)
        >>> consume_quoted("'o''clock'", 0)
        ("o'clock", 10)
    """
    length = len(format_str)

    # '' вне участка: одна кавычка
    if start + 1 < length and format_str[start + 1] == QUOTE:
        return QUOTE, start + 2

    literal: list[str] = []
    i = start + 1
    while i < length:
        char = format_str[i]
        if char == QUOTE:
            if i + 1 < length and format_str[i + 1] == QUOTE:
                literal.append(QUOTE)
                i += 2
                continue
            # закрывающая кавычка не выводится
            i += 1
            break
        literal.append(char)
        i += 1

    return "".join(literal), i


def scan_token(
    format_str: str,
    start: int,
    vocabulary: frozenset[str] = DATE_TOKENS,
) -> str | None:
    """
    Найти токен, начинающийся в позиции start.

    Args:
        format_str: Строка формата
        start: Позиция курсора
        vocabulary: Допустимые токены (DATE_TOKENS или DATETIME_TOKENS)

    Returns:
        Совпавший токен (его длина — сколько символов съесть) или None

    Examples:
        >>> scan_token("yyyy-MM", 0)
        'yyyy'
        >>> scan_token("yyyyy", 0)
        'yyyy'
        >>> scan_token("do", 0)
        'do'
        >>> scan_token("X", 0) is None
        True
    """
    char = format_str[start]
    pair = format_str[start : start + 2]
    if pair in ORDINAL_TOKENS:
        return pair

    end = start
    while end < len(format_str) and format_str[end] == char:
        end += 1
    run = end - start

    for width in range(min(run, MAX_TOKEN_WIDTH), 0, -1):
        candidate = char * width
        if candidate in vocabulary:
            return candidate

    return None
