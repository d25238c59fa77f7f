"""
Simple — Короткий человекочитаемый формат ("Jan 20", "Jan 20, 2025")

Локализованные шаблоны берутся из CLDR (Babel) по скелетам:
- "MMMd" / "yMMMd" — дата с годом или без
- "hm" / "Hm" — время суток в 12- или 24-часовом виде
Дата и время склеиваются шаблоном локали datetime_formats["medium"].
"""

from babel import dates as babel_dates
from whenever import Date, Instant, ZonedDateTime

from tiempo.core.config import UTC_TIMEZONE
from tiempo.core.domain.options import SimpleFormatOptions
from tiempo.formatting.locale_names import parse_locale

_DATE_SKELETON = "MMMd"
_DATE_SKELETON_WITH_YEAR = "yMMMd"
_TIME_SKELETONS = {"12h": "hm", "24h": "Hm"}


def _show_year(year: int, policy: str) -> bool:
    if policy == "always":
        return True
    if policy == "never":
        return False
    return year != Date.today_in_system_tz().year


def simple_format(
    value: Date | ZonedDateTime | Instant,
    options: SimpleFormatOptions | None = None,
) -> str:
    """
    Отформатировать дату коротко: месяц сокращённо, день, год при необходимости.

    Args:
        value: Date, ZonedDateTime или Instant
        options: Локаль, время суток, часовой пояс, политика года

    Returns:
        Локализованная строка

    Notes:
        - Для Instant часовой пояс берётся из options.time_zone (по умолчанию UTC)
        - Для ZonedDateTime с options.time_zone значение переводится в этот пояс
        - Для Date параметр time игнорируется

    Examples:
        >>> simple_format(Date(2020, 12, 23))
        'Dec 23, 2020'
        >>> simple_format(Date(2020, 12, 23), SimpleFormatOptions(year="never"))
        'Dec 23'
    """
    options = options or SimpleFormatOptions()
    locale = parse_locale(options.locale)

    if isinstance(value, Instant):
        value = value.to_tz(options.time_zone or UTC_TIMEZONE)
    elif isinstance(value, ZonedDateTime) and options.time_zone:
        value = value.instant().to_tz(options.time_zone)
    elif not isinstance(value, (Date, ZonedDateTime)):
        raise TypeError(
            f"Expected Date, Instant or ZonedDateTime, got {type(value).__name__}"
        )

    skeleton = _DATE_SKELETON_WITH_YEAR if _show_year(value.year, options.year) else _DATE_SKELETON

    if isinstance(value, Date):
        return babel_dates.format_skeleton(skeleton, value.py_date(), locale=locale)

    moment = value.py_datetime()
    date_part = babel_dates.format_skeleton(skeleton, moment, locale=locale)
    if options.time is None:
        return date_part

    time_part = babel_dates.format_skeleton(_TIME_SKELETONS[options.time], moment, locale=locale)
    glue = locale.datetime_formats["medium"].replace("'", "")
    return glue.replace("{0}", time_part).replace("{1}", date_part)
