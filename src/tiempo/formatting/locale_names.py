"""
Locale Names — Локализованные названия полей календаря

Единственная точка связи с сервисом интернационализации. Рендерер токенов
не знает ничего о CLDR: он получает объект, реализующий FieldNameProvider,
и спрашивает у него название поля (месяц, день недели, эра, AM/PM, пояс)
для даты, стиля и локали.

Реализация по умолчанию — BabelFieldNames (данные CLDR из Babel).
Ошибки неизвестной локали не перехватываются и доходят до вызывающего кода.
"""

from functools import lru_cache
from typing import Literal, Protocol

from babel import Locale
from babel import dates as babel_dates
from whenever import Date, ZonedDateTime

NameField = Literal["era", "month", "weekday", "dayPeriod", "timeZoneName"]
NameStyle = Literal["narrow", "short", "long"]

# Стиль -> ширина в терминах CLDR
_CLDR_WIDTHS: dict[str, str] = {
    "narrow": "narrow",
    "short": "abbreviated",
    "long": "wide",
}

# Отдельно стоящее название: запрашивается одно поле, без контекста фразы
_CONTEXT = "stand-alone"


class FieldNameProvider(Protocol):
    """Источник локализованных названий полей календаря."""

    def field_name(
        self,
        value: Date | ZonedDateTime,
        field: NameField,
        style: NameStyle,
        locale: str,
    ) -> str: ...


@lru_cache(maxsize=64)
def parse_locale(locale: str) -> Locale:
    """
    BCP 47 ('es-ES') или POSIX ('es_ES') идентификатор -> babel.Locale.

    Raises:
        babel.UnknownLocaleError: Если для локали нет данных CLDR
        ValueError: Если идентификатор синтаксически неверен
    """
    return Locale.parse(locale.replace("-", "_"))


class BabelFieldNames:
    """
    FieldNameProvider на данных CLDR (Babel).

    dayPeriod и timeZoneName требуют ZonedDateTime; остальные поля
    принимают и Date, и ZonedDateTime.
    """

    def field_name(
        self,
        value: Date | ZonedDateTime,
        field: NameField,
        style: NameStyle,
        locale: str,
    ) -> str:
        babel_locale = parse_locale(locale)
        width = _CLDR_WIDTHS[style]

        if field == "month":
            return babel_dates.get_month_names(width, _CONTEXT, babel_locale)[value.month]

        if field == "weekday":
            date = value.date() if isinstance(value, ZonedDateTime) else value
            # CLDR: 0 = понедельник; ISO: 1 = понедельник
            return babel_dates.get_day_names(width, _CONTEXT, babel_locale)[
                date.day_of_week().value - 1
            ]

        if field == "era":
            return babel_dates.get_era_names(width, babel_locale)[1 if value.year > 0 else 0]

        if field == "dayPeriod":
            period = "am" if value.hour < 12 else "pm"
            return babel_dates.get_period_names(width, "format", babel_locale)[period]

        if field == "timeZoneName":
            return babel_dates.get_timezone_name(
                value.py_datetime(),
                width="long" if style == "long" else "short",
                locale=babel_locale,
            )

        raise ValueError(f"Unsupported calendar field: {field!r}")


# Общий экземпляр для функций форматирования
DEFAULT_FIELD_NAMES: FieldNameProvider = BabelFieldNames()
