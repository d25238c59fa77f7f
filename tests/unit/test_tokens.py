"""
Тесты порядковых суффиксов и сканера строки формата.
"""

import pytest

from tiempo.formatting.ordinal import ordinal, ordinal_suffix
from tiempo.formatting.tokens import (
    DATE_TOKENS,
    DATETIME_TOKENS,
    MAX_TOKEN_WIDTH,
    consume_quoted,
    scan_token,
)


# =============================================================================
# ORDINAL
# =============================================================================


class TestOrdinalSuffix:
    """st / nd / rd / th с исключением 11-13."""

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
            (11, "th"), (12, "th"), (13, "th"),
            (21, "st"), (22, "nd"), (23, "rd"), (31, "st"),
            (101, "st"), (111, "th"), (112, "th"), (113, "th"),
            (0, "th"),
        ],
    )
    def test_suffix(self, n, expected):
        assert ordinal_suffix(n) == expected

    def test_ordinal_concatenates(self):
        """Число + суффикс."""
        assert ordinal(20) == "20th"
        assert ordinal(22) == "22nd"


# =============================================================================
# QUOTED LITERALS
# =============================================================================


class TestConsumeQuoted:
    """Экранированные участки в одинарных кавычках."""

    def test_simple_literal(self):
        """'at' -> at, курсор после закрывающей кавычки."""
        assert consume_quoted("'at' h", 0) == ("at", 4)

    def test_double_quote_outside(self):
        """'' вне участка -> одна кавычка."""
        assert consume_quoted("''", 0) == ("'", 2)

    def test_double_quote_inside(self):
        """'' внутри участка -> одна кавычка."""
        assert consume_quoted("'o''clock'", 0) == ("o'clock", 10)

    def test_unterminated_runs_to_end(self):
        """Незакрытый участок — до конца строки."""
        assert consume_quoted("'abc", 0) == ("abc", 4)

    def test_empty_at_end(self):
        """Одинокая кавычка в конце — пустой литерал."""
        assert consume_quoted("yyyy'", 4) == ("", 5)

    def test_tokens_inside_are_literal(self):
        """Буквы внутри кавычек — не токены."""
        assert consume_quoted("'yyyy MM'", 0) == ("yyyy MM", 9)


# =============================================================================
# TOKEN SCANNER
# =============================================================================


class TestScanToken:
    """Жадное сопоставление серий с фиксированным словарём."""

    def test_exact_token(self):
        assert scan_token("yyyy-MM-dd", 0) == "yyyy"
        assert scan_token("yyyy-MM-dd", 5) == "MM"
        assert scan_token("yyyy-MM-dd", 8) == "dd"

    def test_longest_match_wins(self):
        """Серия длиннее словаря — берётся самый длинный токен."""
        assert scan_token("yyyyy", 0) == "yyyy"
        assert scan_token("ddd", 0) == "dd"
        assert scan_token("EEEEEEE", 0) == "EEEEEE"

    def test_ordinal_tokens_first(self):
        """Mo и do распознаются раньше правила серий."""
        assert scan_token("Mo", 0) == "Mo"
        assert scan_token("do", 0) == "do"
        assert scan_token("MMo", 1) == "Mo"

    def test_no_token(self):
        """Символ не из словаря — None."""
        assert scan_token("-", 0) is None
        assert scan_token(" ", 0) is None
        assert scan_token("o", 0) is None

    def test_time_tokens_only_in_datetime_vocabulary(self):
        """Токены времени не распознаются в словаре дат."""
        assert scan_token("HH", 0) is None
        assert scan_token("HH", 0, DATETIME_TOKENS) == "HH"
        assert scan_token("XXXXXX", 0, DATETIME_TOKENS) == "XXXXX"

    def test_vocabulary_widths(self):
        """Ни один токен не длиннее MAX_TOKEN_WIDTH."""
        assert max(len(t) for t in DATETIME_TOKENS) == MAX_TOKEN_WIDTH
        assert DATE_TOKENS <= DATETIME_TOKENS
