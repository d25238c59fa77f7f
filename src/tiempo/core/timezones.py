"""
Timezones — Часовые пояса хоста и проверка IANA идентификаторов
"""

import zoneinfo

import tzlocal

from tiempo.core.config import UTC_TIMEZONE


def system_timezone() -> str:
    """
    IANA идентификатор часового пояса, настроенного на хосте.

    Returns:
        Например, 'Europe/Madrid'; 'UTC', если хост не сообщает пояс
    """
    return tzlocal.get_localzone_name() or UTC_TIMEZONE


def available_timezones() -> frozenset[str]:
    """Все IANA идентификаторы, известные локальной базе tzdata."""
    return frozenset(zoneinfo.available_timezones()) | {UTC_TIMEZONE}


def is_valid_timezone(timezone: str) -> bool:
    """
    Проверка, что строка — известный IANA идентификатор.

    Examples:
        >>> is_valid_timezone("America/New_York")
        True
        >>> is_valid_timezone("Mars/Olympus_Mons")
        False
    """
    try:
        zoneinfo.ZoneInfo(timezone)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
