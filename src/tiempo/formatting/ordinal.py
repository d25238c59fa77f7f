"""
Ordinal — Английские порядковые суффиксы ("st", "nd", "rd", "th")
"""


def ordinal_suffix(n: int) -> str:
    """
    Порядковый суффикс для числа.

    11, 12, 13 (и 111, 112, ...) получают "th" вопреки последней цифре.
    Границы не проверяются: функция чисто числовая.

    Examples:
        >>> ordinal_suffix(1), ordinal_suffix(11), ordinal_suffix(22)
        ('st', 'th', 'nd')
    """
    j = n % 10
    k = n % 100
    if j == 1 and k != 11:
        return "st"
    if j == 2 and k != 12:
        return "nd"
    if j == 3 and k != 13:
        return "rd"
    return "th"


def ordinal(n: int) -> str:
    """Число с порядковым суффиксом: 21 -> '21st'."""
    return f"{n}{ordinal_suffix(n)}"
