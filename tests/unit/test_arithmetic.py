"""
Тесты арифметики: сдвиги, округление, разница.
"""

import pytest
from pydantic import ValidationError
from whenever import Instant, ZonedDateTime

from tiempo.arithmetic import (
    add_days,
    add_hours,
    add_microseconds,
    add_milliseconds,
    add_minutes,
    add_months,
    add_nanoseconds,
    add_seconds,
    add_weeks,
    add_years,
    difference_in_days,
    difference_in_hours,
    difference_in_microseconds,
    difference_in_milliseconds,
    difference_in_minutes,
    difference_in_months,
    difference_in_nanoseconds,
    difference_in_seconds,
    difference_in_weeks,
    difference_in_years,
    round_to_nearest_hour,
    round_to_nearest_minute,
    round_to_nearest_second,
    sub_days,
    sub_hours,
    sub_microseconds,
    sub_milliseconds,
    sub_minutes,
    sub_months,
    sub_nanoseconds,
    sub_seconds,
    sub_weeks,
    sub_years,
)
from tiempo.core.domain.options import (
    RoundToNearestHourOptions,
    RoundToNearestMinuteOptions,
    RoundToNearestSecondOptions,
)

NEW_YORK = "America/New_York"
# Полночь пропускается при переходе на летнее время
HAVANA = "America/Havana"
SANTIAGO = "America/Santiago"


@pytest.fixture
def base():
    """20 января 2025, 12:00 UTC."""
    return ZonedDateTime(2025, 1, 20, 12, tz="UTC")


# =============================================================================
# SHIFT
# =============================================================================


class TestShift:
    """add_* / sub_*."""

    @pytest.mark.parametrize(
        "func, amount, expected",
        [
            (add_years, 1, ZonedDateTime(2026, 1, 20, 12, tz="UTC")),
            (add_months, 2, ZonedDateTime(2025, 3, 20, 12, tz="UTC")),
            (add_weeks, 1, ZonedDateTime(2025, 1, 27, 12, tz="UTC")),
            (add_days, 12, ZonedDateTime(2025, 2, 1, 12, tz="UTC")),
            (add_hours, 13, ZonedDateTime(2025, 1, 21, 1, tz="UTC")),
            (add_minutes, 90, ZonedDateTime(2025, 1, 20, 13, 30, tz="UTC")),
            (add_seconds, 61, ZonedDateTime(2025, 1, 20, 12, 1, 1, tz="UTC")),
            (sub_years, 1, ZonedDateTime(2024, 1, 20, 12, tz="UTC")),
            (sub_months, 1, ZonedDateTime(2024, 12, 20, 12, tz="UTC")),
            (sub_weeks, 3, ZonedDateTime(2024, 12, 30, 12, tz="UTC")),
            (sub_days, 20, ZonedDateTime(2024, 12, 31, 12, tz="UTC")),
            (sub_hours, 12, ZonedDateTime(2025, 1, 20, tz="UTC")),
            (sub_minutes, 1, ZonedDateTime(2025, 1, 20, 11, 59, tz="UTC")),
            (sub_seconds, 1, ZonedDateTime(2025, 1, 20, 11, 59, 59, tz="UTC")),
        ],
    )
    def test_units(self, func, amount, expected, base):
        result = func(base, amount)

        assert result == expected
        assert result.tz == "UTC"

    def test_subsecond_units(self, base):
        assert add_milliseconds(base, 5).nanosecond == 5_000_000
        assert add_microseconds(base, 5).nanosecond == 5_000
        assert add_nanoseconds(base, 5).nanosecond == 5
        assert sub_milliseconds(base, 1).nanosecond == 999_000_000
        assert sub_microseconds(base, 1).nanosecond == 999_999_000
        assert sub_nanoseconds(base, 1).nanosecond == 999_999_999

    def test_month_end_clamped(self):
        """31 января + 1 месяц = 28 февраля."""
        result = add_months(ZonedDateTime(2025, 1, 31, tz="UTC"), 1)
        assert (result.month, result.day) == (2, 28)

    def test_leap_day_plus_year(self):
        result = add_years(ZonedDateTime(2024, 2, 29, tz="UTC"), 1)
        assert (result.year, result.month, result.day) == (2025, 2, 28)

    def test_instant_input_returns_utc_zoned(self):
        result = add_days(Instant.from_utc(2025, 1, 20), 1)

        assert isinstance(result, ZonedDateTime)
        assert result.tz == "UTC"
        assert result.day == 21

    def test_days_keep_wall_clock_across_dst(self):
        """Календарный день через переход DST сохраняет время на часах."""
        before = ZonedDateTime(2025, 3, 8, 10, tz=NEW_YORK)

        result = add_days(before, 1)

        assert result.hour == 10
        assert (result - before).in_hours() == 23

    def test_hours_are_exact_across_dst(self):
        """24 часа через переход DST — другое время на часах."""
        before = ZonedDateTime(2025, 3, 8, 10, tz=NEW_YORK)

        result = add_hours(before, 24)

        assert (result.day, result.hour) == (9, 11)

    @pytest.mark.parametrize(
        "before, expected",
        [
            (ZonedDateTime(2025, 3, 8, tz=HAVANA), (2025, 3, 9, 1)),
            (ZonedDateTime(2024, 9, 7, tz=SANTIAGO), (2024, 9, 8, 1)),
        ],
    )
    def test_day_into_skipped_midnight_moves_forward(self, before, expected):
        """Полночи следующего дня нет: результат — 01:00 того же дня."""
        result = add_days(before, 1)

        assert (result.year, result.month, result.day, result.hour) == expected
        assert result > before

    def test_sub_day_into_skipped_midnight(self):
        result = sub_days(ZonedDateTime(2025, 3, 10, tz=HAVANA), 1)
        assert (result.day, result.hour) == (9, 1)

    def test_month_into_skipped_midnight(self):
        result = add_months(ZonedDateTime(2025, 2, 9, tz=HAVANA), 1)
        assert (result.month, result.day, result.hour) == (3, 9, 1)

    def test_timezone_preserved(self):
        zoned = ZonedDateTime(2025, 1, 20, 12, tz="Asia/Tokyo")
        assert add_weeks(zoned, 2).tz == "Asia/Tokyo"


# =============================================================================
# ROUNDING
# =============================================================================


class TestRounding:
    """round_to_nearest_* по времени на часах."""

    @pytest.mark.parametrize(
        "mode, minute, expected_hour",
        [
            ("round", 20, 14), ("round", 30, 15), ("round", 40, 15),
            ("ceil", 20, 15), ("ceil", 0, 14),
            ("floor", 40, 14),
        ],
    )
    def test_hour_modes(self, mode, minute, expected_hour):
        zoned = ZonedDateTime(2025, 1, 20, 14, minute, tz="UTC")

        result = round_to_nearest_hour(zoned, RoundToNearestHourOptions(mode=mode))

        assert result.hour == expected_hour
        assert (result.minute, result.second, result.nanosecond) == (0, 0, 0)

    def test_hour_increment(self):
        zoned = ZonedDateTime(2025, 1, 20, 14, 40, tz="UTC")

        assert round_to_nearest_hour(zoned, RoundToNearestHourOptions(nearest_to=6)).hour == 12
        ceil_six = RoundToNearestHourOptions(nearest_to=6, mode="ceil")
        assert round_to_nearest_hour(zoned, ceil_six).hour == 18

    def test_rolls_into_next_day(self):
        zoned = ZonedDateTime(2025, 1, 31, 23, 45, tz="UTC")

        result = round_to_nearest_hour(zoned)

        assert (result.month, result.day, result.hour) == (2, 1, 0)

    def test_minute(self):
        zoned = ZonedDateTime(2025, 1, 20, 14, 7, 30, tz="UTC")

        assert round_to_nearest_minute(zoned).minute == 8
        assert round_to_nearest_minute(zoned, RoundToNearestMinuteOptions(mode="floor")).minute == 7
        quarter = RoundToNearestMinuteOptions(nearest_to=15)
        assert round_to_nearest_minute(zoned, quarter).minute == 15

    def test_second_drops_subsecond(self):
        zoned = ZonedDateTime(2025, 1, 20, 14, 0, 10, nanosecond=499_999_999, tz="UTC")

        result = round_to_nearest_second(zoned)

        assert (result.second, result.nanosecond) == (10, 0)
        ceil = RoundToNearestSecondOptions(mode="ceil")
        assert round_to_nearest_second(zoned, ceil).second == 11

    def test_wall_clock_in_zone(self):
        """Округляется местное время, пояс сохраняется."""
        zoned = ZonedDateTime(2025, 1, 20, 9, 31, tz="Asia/Kolkata")

        result = round_to_nearest_hour(zoned)

        assert result.tz == "Asia/Kolkata"
        assert (result.hour, result.minute) == (10, 0)

    def test_rounds_into_skipped_midnight(self):
        """23:40 -> полночь, которой нет: результат сдвигается вперёд, а не назад."""
        zoned = ZonedDateTime(2025, 3, 8, 23, 40, tz=HAVANA)

        result = round_to_nearest_hour(zoned)

        assert result > zoned
        assert (result.day, result.hour) == (9, 1)

    def test_ceil_into_skipped_midnight(self):
        zoned = ZonedDateTime(2025, 3, 8, 23, 5, tz=HAVANA)

        half_hour = RoundToNearestMinuteOptions(mode="ceil", nearest_to=30)

        result = round_to_nearest_minute(zoned, half_hour)

        assert result > zoned
        assert (result.day, result.hour, result.minute) == (8, 23, 30)
        ceil_hour = round_to_nearest_hour(zoned, RoundToNearestHourOptions(mode="ceil"))
        assert (ceil_hour.day, ceil_hour.hour) == (9, 1)

    def test_instant_input(self):
        result = round_to_nearest_minute(Instant.from_utc(2025, 1, 20, 10, 0, 31))

        assert result.tz == "UTC"
        assert result.minute == 1

    @pytest.mark.parametrize(
        "options_cls, value",
        [
            (RoundToNearestHourOptions, 5),
            (RoundToNearestHourOptions, 24),
            (RoundToNearestMinuteOptions, 7),
            (RoundToNearestSecondOptions, 45),
        ],
    )
    def test_invalid_increment(self, options_cls, value):
        with pytest.raises(ValidationError, match="nearest_to must be one of"):
            options_cls(nearest_to=value)


# =============================================================================
# DIFFERENCE
# =============================================================================


class TestExactDifference:
    """Точные единицы: целые, отбрасывание к нулю."""

    def test_hours(self, base):
        later = base.add(hours=3, minutes=59)

        assert difference_in_hours(later, base) == 3
        assert difference_in_hours(base, later) == -3

    def test_minutes_and_seconds(self, base):
        later = base.add(minutes=2, seconds=30)

        assert difference_in_minutes(later, base) == 2
        assert difference_in_seconds(later, base) == 150

    def test_subsecond(self, base):
        later = base.add(nanoseconds=1_234_567)

        assert difference_in_nanoseconds(later, base) == 1_234_567
        assert difference_in_microseconds(later, base) == 1_234
        assert difference_in_milliseconds(later, base) == 1
        assert difference_in_milliseconds(base, later) == -1

    def test_mixed_inputs(self):
        """Instant и ZonedDateTime сравниваются по абсолютному времени."""
        zoned = ZonedDateTime(2025, 1, 20, 15, tz=NEW_YORK)
        instant = Instant.from_utc(2025, 1, 20, 18)

        assert difference_in_hours(zoned, instant) == 2

    def test_dst_day_has_23_hours(self):
        later = ZonedDateTime(2025, 3, 10, tz=NEW_YORK)
        earlier = ZonedDateTime(2025, 3, 9, tz=NEW_YORK)

        assert difference_in_hours(later, earlier) == 23


class TestCalendarDifference:
    """Календарные единицы: дробные, с учётом DST."""

    def test_dst_day_counts_as_one(self):
        later = ZonedDateTime(2025, 3, 10, tz=NEW_YORK)
        earlier = ZonedDateTime(2025, 3, 9, tz=NEW_YORK)

        assert difference_in_days(later, earlier) == 1

    def test_day_after_skipped_midnight(self):
        """9 марта 2025 в Гаване начинается в 01:00: это ровно один день."""
        earlier = ZonedDateTime(2025, 3, 8, tz=HAVANA)

        assert difference_in_days(ZonedDateTime(2025, 3, 9, 1, tz=HAVANA), earlier) == 1
        assert difference_in_days(ZonedDateTime(2025, 3, 10, tz=HAVANA), earlier) == 2

    def test_fractional_days(self, base):
        assert difference_in_days(base.add(hours=36), base) == pytest.approx(1.5)
        assert difference_in_days(base, base.add(hours=36)) == pytest.approx(-1.5)

    def test_weeks(self, base):
        assert difference_in_weeks(base.add(days=14), base) == 2
        assert difference_in_weeks(base.add(days=3, hours=12), base) == pytest.approx(0.5)

    def test_months(self):
        later = ZonedDateTime(2025, 3, 15, tz="UTC")
        earlier = ZonedDateTime(2025, 1, 15, tz="UTC")

        assert difference_in_months(later, earlier) == 2
        assert difference_in_months(earlier, later) == -2

    def test_fractional_month(self):
        """Половина 30-дневного апреля."""
        later = ZonedDateTime(2025, 4, 16, tz="UTC")
        earlier = ZonedDateTime(2025, 4, 1, tz="UTC")

        assert difference_in_months(later, earlier) == pytest.approx(0.5)

    def test_years(self):
        later = ZonedDateTime(2025, 1, 1, tz="UTC")
        earlier = ZonedDateTime(2020, 1, 1, tz="UTC")

        assert difference_in_years(later, earlier) == 5
        assert difference_in_years(earlier, later) == -5

    def test_same_moment_is_zero(self, base):
        assert difference_in_days(base, base) == 0
        assert difference_in_years(base, base) == 0
