"""
Тесты преобразований, текущего времени и часовых поясов хоста.
"""

from datetime import datetime, timedelta, timezone

import pytest
from whenever import Date, Instant, Time, ZonedDateTime

from tiempo.conversion import (
    get_today,
    is_valid_timezone,
    now,
    parse_instant,
    system_timezone,
    to_date,
    to_plain_date,
    to_plain_time,
    to_utc,
    to_zoned_time,
    today,
)
from tiempo.core.timezones import available_timezones

EVENING_UTC = Instant.from_utc(2025, 1, 20, 20)


# =============================================================================
# PARSING
# =============================================================================


class TestParseInstant:
    """ISO 8601 со смещением или Z."""

    @pytest.mark.parametrize(
        "text",
        [
            "2025-01-20T20:00:00Z",
            "2025-01-20T15:00:00-05:00",
            "2025-01-21T05:00:00+09:00",
            "2025-01-20T15:00:00-05:00[America/New_York]",
        ],
    )
    def test_same_moment(self, text):
        assert parse_instant(text) == EVENING_UTC

    def test_fraction(self):
        result = parse_instant("2025-01-20T20:00:00.25Z")
        assert result == EVENING_UTC.add(milliseconds=250)

    @pytest.mark.parametrize("text", ["2025-01-20", "2025-01-20T20:00:00", "yesterday", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_instant(text)


# =============================================================================
# CONVERSIONS
# =============================================================================


class TestToZonedTime:
    """Тот же момент в другом часовом поясе."""

    @pytest.mark.parametrize(
        "value",
        [
            "2025-01-20T20:00:00Z",
            datetime(2025, 1, 20, 20, tzinfo=timezone.utc),
            EVENING_UTC,
            ZonedDateTime(2025, 1, 21, 5, tz="Asia/Tokyo"),
        ],
    )
    def test_inputs(self, value):
        result = to_zoned_time(value, "America/New_York")

        assert result.tz == "America/New_York"
        assert (result.day, result.hour) == (20, 15)
        assert result.instant() == EVENING_UTC

    def test_datetime_with_offset(self):
        aware = datetime(2025, 1, 20, 21, tzinfo=timezone(timedelta(hours=1)))
        assert to_zoned_time(aware, "UTC").hour == 20

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError):
            to_zoned_time(datetime(2025, 1, 20, 20), "UTC")

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            to_zoned_time(1737403200, "UTC")


class TestToUtc:
    """ISO строка или ZonedDateTime -> Instant."""

    def test_offset_string(self):
        assert to_utc("2025-01-20T15:00:00-05:00") == EVENING_UTC

    def test_bracketed_zone(self):
        assert to_utc("2025-01-21T05:00:00+09:00[Asia/Tokyo]") == EVENING_UTC

    def test_zoned(self):
        assert to_utc(ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")) == EVENING_UTC

    def test_malformed_string(self):
        with pytest.raises(ValueError):
            to_utc("20/01/2025 20:00")

    def test_rejects_datetime(self):
        with pytest.raises(TypeError):
            to_utc(datetime(2025, 1, 20, 20, tzinfo=timezone.utc))


class TestPlainParts:
    """Календарная дата и время суток момента."""

    def test_with_timezone(self):
        assert to_plain_date(EVENING_UTC, "Asia/Tokyo") == Date(2025, 1, 21)
        assert to_plain_time(EVENING_UTC, "Asia/Tokyo") == Time(5, 0)

    def test_zoned_without_timezone(self):
        zoned = ZonedDateTime(2025, 1, 20, 15, 30, tz="America/New_York")

        assert to_plain_date(zoned) == Date(2025, 1, 20)
        assert to_plain_time(zoned) == Time(15, 30)

    def test_string_input(self):
        assert to_plain_date("2025-01-20T20:00:00Z", "America/New_York") == Date(2025, 1, 20)

    @pytest.mark.parametrize("value", [EVENING_UTC, "2025-01-20T20:00:00Z"])
    def test_timezone_required(self, value):
        with pytest.raises(ValueError, match="Timezone is required"):
            to_plain_date(value)
        with pytest.raises(ValueError, match="Timezone is required"):
            to_plain_time(value)


class TestToDate:
    """Момент -> datetime в UTC."""

    def test_instant(self):
        assert to_date(EVENING_UTC) == datetime(2025, 1, 20, 20, tzinfo=timezone.utc)

    def test_zoned_is_converted_to_utc(self):
        result = to_date(ZonedDateTime(2025, 1, 20, 15, tz="America/New_York"))

        assert result.utcoffset() == timedelta(0)
        assert result.hour == 20

    def test_nanoseconds_truncated(self):
        result = to_date(EVENING_UTC.add(nanoseconds=1_999))
        assert result.microsecond == 1

    def test_rejects_string(self):
        with pytest.raises(TypeError):
            to_date("2025-01-20T20:00:00Z")


# =============================================================================
# NOW / TODAY
# =============================================================================


class TestNow:
    """Текущее время; пояс по умолчанию — пояс хоста."""

    def test_explicit_timezone(self):
        result = now("Asia/Tokyo")

        assert result.tz == "Asia/Tokyo"
        assert abs((result.instant() - Instant.now()).in_seconds()) < 5

    def test_system_timezone_default(self, monkeypatch):
        monkeypatch.setattr("tiempo.conversion.convert.system_timezone", lambda: "Europe/Madrid")

        assert now().tz == "Europe/Madrid"

    def test_today(self, monkeypatch):
        monkeypatch.setattr("tiempo.conversion.convert.system_timezone", lambda: "UTC")

        assert today() == now("UTC").date()
        assert get_today("Pacific/Kiritimati") == now("Pacific/Kiritimati").date()


# =============================================================================
# TIMEZONES
# =============================================================================


class TestTimezones:
    """Пояс хоста (tzlocal) и проверка идентификаторов."""

    def test_system_timezone_from_tzlocal(self, monkeypatch):
        monkeypatch.setattr("tzlocal.get_localzone_name", lambda: "America/Chicago")
        assert system_timezone() == "America/Chicago"

    def test_system_timezone_falls_back_to_utc(self, monkeypatch):
        monkeypatch.setattr("tzlocal.get_localzone_name", lambda: None)
        assert system_timezone() == "UTC"

    @pytest.mark.parametrize("name", ["UTC", "America/New_York", "Asia/Kolkata", "Europe/Madrid"])
    def test_valid(self, name):
        assert is_valid_timezone(name)

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "", "../etc/passwd"])
    def test_invalid(self, name):
        assert not is_valid_timezone(name)

    def test_available_contains_common_zones(self):
        zones = available_timezones()

        assert "UTC" in zones
        assert "America/New_York" in zones
