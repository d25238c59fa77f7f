"""
Config — Константы и значения по умолчанию

Единственное место, где определены:
- локаль и часовой пояс по умолчанию
- размеры единиц времени в наносекундах
- допустимые шаги округления
"""

from typing import Final

# =============================================================================
# ЛОКАЛЬ И ЧАСОВОЙ ПОЯС
# =============================================================================

# Локаль, если вызывающий код её не передал
DEFAULT_LOCALE: Final[str] = "en-US"

# Идентификатор, к которому привязываются Instant при нормализации
UTC_TIMEZONE: Final[str] = "UTC"


# =============================================================================
# ЕДИНИЦЫ ВРЕМЕНИ (наносекунды)
# =============================================================================

NS_PER_MICROSECOND: Final[int] = 1_000
NS_PER_MILLISECOND: Final[int] = 1_000_000
NS_PER_SECOND: Final[int] = 1_000_000_000
NS_PER_MINUTE: Final[int] = 60 * NS_PER_SECOND
NS_PER_HOUR: Final[int] = 60 * NS_PER_MINUTE
NS_PER_DAY: Final[int] = 24 * NS_PER_HOUR


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================

# Шаги, которые делят сутки / час / минуту без остатка
HOUR_ROUNDING_INCREMENTS: Final[frozenset[int]] = frozenset({1, 2, 3, 4, 6, 8, 12})
MINUTE_ROUNDING_INCREMENTS: Final[frozenset[int]] = frozenset(
    {1, 2, 3, 4, 5, 6, 10, 12, 15, 20, 30}
)
SECOND_ROUNDING_INCREMENTS: Final[frozenset[int]] = MINUTE_ROUNDING_INCREMENTS
