"""
Тесты нормализации входа: Instant / ZonedDateTime / Date -> ZonedDateTime.
"""

import pytest
from whenever import Date, Instant, ZonedDateTime

from tiempo.core.normalize import (
    normalize_temporal_input,
    normalize_with_plain_date,
    now_zoned,
    plain_date_to_zoned_date_time,
)


# =============================================================================
# normalize_temporal_input
# =============================================================================


class TestNormalizeTemporalInput:
    """Instant -> UTC, ZonedDateTime без изменений."""

    def test_instant_becomes_utc_zoned(self):
        """Instant получает часовой пояс UTC."""
        instant = Instant.from_utc(2025, 1, 20, 20, 0)

        zoned = normalize_temporal_input(instant)

        assert isinstance(zoned, ZonedDateTime)
        assert zoned.tz == "UTC"
        assert zoned.instant() == instant
        assert (zoned.year, zoned.month, zoned.day, zoned.hour) == (2025, 1, 20, 20)

    def test_zoned_passes_through_unchanged(self):
        """ZonedDateTime возвращается тем же объектом."""
        zoned = ZonedDateTime(2025, 1, 20, 15, tz="America/New_York")

        result = normalize_temporal_input(zoned)

        assert result is zoned
        assert result.tz == "America/New_York"
        assert result.hour == 15

    def test_instant_keeps_nanoseconds(self):
        """Наносекунды не теряются."""
        instant = Instant.from_utc(2025, 1, 20, nanosecond=123_456_789)

        assert normalize_temporal_input(instant).nanosecond == 123_456_789

    @pytest.mark.parametrize("value", ["2025-01-20T20:00:00Z", 1737403200, Date(2025, 1, 20), None])
    def test_other_types_rejected(self, value):
        """Всё остальное — TypeError."""
        with pytest.raises(TypeError, match="Expected Instant or ZonedDateTime"):
            normalize_temporal_input(value)


# =============================================================================
# Date + часовой пояс
# =============================================================================


class TestPlainDateNormalization:
    """Date требует часовой пояс."""

    def test_plain_date_to_midnight(self):
        """Дата -> полночь в указанном поясе."""
        zoned = plain_date_to_zoned_date_time(Date(2025, 1, 20), "Asia/Tokyo")

        assert zoned.tz == "Asia/Tokyo"
        assert (zoned.year, zoned.month, zoned.day) == (2025, 1, 20)
        assert (zoned.hour, zoned.minute, zoned.second, zoned.nanosecond) == (0, 0, 0, 0)

    def test_date_with_timezone(self):
        """normalize_with_plain_date принимает Date + timezone."""
        zoned = normalize_with_plain_date(Date(2025, 1, 20), "Europe/Madrid")

        assert zoned.tz == "Europe/Madrid"
        assert zoned.hour == 0

    def test_date_without_timezone_rejected(self):
        """Date без timezone — ValueError."""
        with pytest.raises(ValueError, match="timezone is required"):
            normalize_with_plain_date(Date(2025, 1, 20))

    def test_instant_ignores_timezone_argument(self):
        """Для Instant аргумент timezone не используется."""
        zoned = normalize_with_plain_date(Instant.from_utc(2025, 1, 20), "Asia/Tokyo")

        assert zoned.tz == "UTC"

    def test_now_zoned_is_utc(self):
        """now_zoned — текущий момент в UTC."""
        before = Instant.now()
        zoned = now_zoned()
        after = Instant.now()

        assert zoned.tz == "UTC"
        assert before <= zoned.instant() <= after
