"""
Distance — Локализованное относительное расстояние ("in 2 hours", "3 days ago")

Единица выбирается по величине разницы (если не задана явно):
    < 60 секунд -> second
    < 60 минут  -> minute
    < 24 часов  -> hour
    < 7 дней    -> day
    < 4 недель  -> week
    < 12 месяцев -> month
    иначе       -> year

Фраза строится Babel (format_timedelta, шаблоны CLDR "future"/"past").
Значение округляется до целого (половина — от нуля).
"""

import math

from babel import dates as babel_dates
from whenever import Instant, ZonedDateTime

from tiempo.arithmetic.difference import (
    difference_in_days,
    difference_in_hours,
    difference_in_minutes,
    difference_in_months,
    difference_in_seconds,
    difference_in_weeks,
    difference_in_years,
)
from tiempo.core.domain.options import DistanceUnit, IntlFormatDistanceOptions
from tiempo.core.normalize import normalize_temporal_input
from tiempo.formatting.locale_names import parse_locale

# Секунд в единице по меркам Babel (месяц = 30 дней, год = 365 дней)
_SECONDS_PER_UNIT: dict[str, int] = dict(babel_dates.TIMEDELTA_UNITS)

_DIFFERENCES = {
    "second": difference_in_seconds,
    "minute": difference_in_minutes,
    "hour": difference_in_hours,
    "day": difference_in_days,
    "week": difference_in_weeks,
    "month": difference_in_months,
    "year": difference_in_years,
}


def select_unit(later: ZonedDateTime, earlier: ZonedDateTime) -> DistanceUnit:
    """Наибольшая единица, в которой разница ещё не меньше одной следующей."""
    if abs(difference_in_seconds(later, earlier)) < 60:
        return "second"
    if abs(difference_in_minutes(later, earlier)) < 60:
        return "minute"
    if abs(difference_in_hours(later, earlier)) < 24:
        return "hour"
    if abs(difference_in_days(later, earlier)) < 7:
        return "day"
    if abs(difference_in_weeks(later, earlier)) < 4:
        return "week"
    if abs(difference_in_months(later, earlier)) < 12:
        return "month"
    return "year"


def _round_half_away(value: float) -> int:
    whole = math.floor(abs(value) + 0.5)
    return whole if value >= 0 else -whole


def intl_format_distance(
    later: Instant | ZonedDateTime,
    earlier: Instant | ZonedDateTime,
    options: IntlFormatDistanceOptions | None = None,
) -> str:
    """
    Расстояние от earlier до later как локализованная фраза.

    Args:
        later: Момент, о котором говорим
        earlier: Точка отсчёта ("сейчас")
        options: Принудительная единица, локаль, стиль

    Returns:
        "in N <unit>" если later позже earlier, "N <unit> ago" иначе

    Raises:
        babel.UnknownLocaleError: Если локаль неизвестна

    Examples:
        >>> base = ZonedDateTime(2025, 1, 20, 12, tz="UTC")
        >>> intl_format_distance(ZonedDateTime(2025, 1, 20, 13, tz="UTC"), base)
        'in 1 hour'
        >>> intl_format_distance(ZonedDateTime(2025, 1, 18, 12, tz="UTC"), base)
        '2 days ago'
    """
    options = options or IntlFormatDistanceOptions()
    zoned_later = normalize_temporal_input(later)
    zoned_earlier = normalize_temporal_input(earlier)

    unit = options.unit or select_unit(zoned_later, zoned_earlier)
    value = _round_half_away(_DIFFERENCES[unit](zoned_later, zoned_earlier))

    return babel_dates.format_timedelta(
        value * _SECONDS_PER_UNIT[unit],
        granularity=unit,
        threshold=math.inf,
        add_direction=True,
        format=options.style,
        locale=parse_locale(options.locale),
    )
