"""
Unit Tests for Date Utilities.

Tests for:
- UTC offset normalization (lenient fallback to 0)
- Local midnight computation with calendar rollover
- Civil date formatting under an offset
- UTC day ranges used by the history pager
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.utils.date_utils import (
    civil_date_string,
    format_utc_instant,
    local_midnight_utc,
    local_today,
    normalize_utc_offset,
    utc_day_range,
    utc_now,
)


# =============================================================================
# Offset Normalization Tests
# =============================================================================


class TestNormalizeUtcOffset:
    """Tests for normalize_utc_offset."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            pytest.param(None, 0, id="absent"),
            pytest.param(0, 0, id="zero"),
            pytest.param(60, 60, id="int_positive"),
            pytest.param(-300, -300, id="int_negative"),
            pytest.param("330", 330, id="string_positive"),
            pytest.param(" -480 ", -480, id="string_with_whitespace"),
            pytest.param(840, 840, id="upper_bound_inclusive"),
            pytest.param(-840, -840, id="lower_bound_inclusive"),
            pytest.param("840", 840, id="upper_bound_string"),
        ],
    )
    def test_valid_offsets(self, raw, expected: int) -> None:
        assert normalize_utc_offset(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            pytest.param(841, id="just_above_range"),
            pytest.param(-841, id="just_below_range"),
            pytest.param(100000, id="far_above_range"),
            pytest.param("-9999", id="string_out_of_range"),
            pytest.param("abc", id="non_numeric"),
            pytest.param("", id="empty_string"),
            pytest.param("1.5", id="decimal_string"),
            pytest.param("60min", id="trailing_garbage"),
            pytest.param(True, id="bool_is_not_numeric"),
            pytest.param("6_0", id="digit_group_underscore"),
            pytest.param("\u0666\u0660", id="non_ascii_digits"),
            pytest.param("+", id="sign_only"),
        ],
    )
    def test_invalid_offsets_fall_back_to_utc(self, raw) -> None:
        assert normalize_utc_offset(raw) == 0


# =============================================================================
# Local Midnight Tests
# =============================================================================


class TestLocalMidnightUtc:
    """Tests for local_midnight_utc."""

    def test_utc_offset_zero(self) -> None:
        assert local_midnight_utc(2024, 4, 1, 0) == datetime(2024, 4, 1, 0, 0)

    def test_positive_offset_starts_previous_utc_day(self) -> None:
        # Local midnight in UTC+1 is 23:00 UTC the day before
        assert local_midnight_utc(2024, 4, 1, 60) == datetime(2024, 3, 31, 23, 0)

    def test_negative_offset_starts_later(self) -> None:
        assert local_midnight_utc(2024, 4, 1, -300) == datetime(2024, 4, 1, 5, 0)

    def test_month_13_rolls_into_next_year(self) -> None:
        assert local_midnight_utc(2024, 13, 1, 0) == datetime(2025, 1, 1)

    def test_day_zero_is_last_day_of_previous_month(self) -> None:
        assert local_midnight_utc(2024, 3, 0, 0) == datetime(2024, 2, 29)

    def test_negative_day_rolls_back_across_month(self) -> None:
        # Local today 2024-03-03 -> 21-day window starts 2024-02-12
        assert local_midnight_utc(2024, 3, 3 - 20, 0) == datetime(2024, 2, 12)

    def test_negative_day_rolls_back_across_year(self) -> None:
        assert local_midnight_utc(2024, 1, 5 - 20, 0) == datetime(2023, 12, 16)

    def test_rollover_combined_with_offset(self) -> None:
        assert local_midnight_utc(2024, 3, 3 - 20, 120) == datetime(2024, 2, 11, 22, 0)


# =============================================================================
# Civil Date Tests
# =============================================================================


class TestCivilDateString:
    """Tests for civil_date_string."""

    @pytest.mark.parametrize(
        "instant,offset,expected",
        [
            pytest.param(datetime(2024, 3, 31, 23, 30), 60, "2024-04-01", id="shift_into_next_month"),
            pytest.param(datetime(2024, 3, 31, 23, 30), 0, "2024-03-31", id="utc"),
            pytest.param(datetime(2024, 1, 1, 2, 0), -180, "2023-12-31", id="shift_into_previous_year"),
            pytest.param(datetime(2024, 2, 28, 20, 0), 840, "2024-02-29", id="leap_day"),
        ],
    )
    def test_civil_date(self, instant: datetime, offset: int, expected: str) -> None:
        assert civil_date_string(instant, offset) == expected


class TestLocalToday:
    """Tests for local_today."""

    def test_shifted_now(self) -> None:
        now = datetime(2024, 3, 3, 23, 30)
        assert local_today(0, now) == date(2024, 3, 3)
        assert local_today(60, now) == date(2024, 3, 4)
        assert local_today(-1440 // 2, now) == date(2024, 3, 3)

    def test_defaults_to_current_time(self) -> None:
        assert local_today(0) == utc_now().date()


class TestUtcDayRange:
    """Tests for utc_day_range."""

    def test_today(self) -> None:
        now = datetime(2024, 5, 10, 15, 45)
        assert utc_day_range(0, now) == (datetime(2024, 5, 10), datetime(2024, 5, 11))

    def test_days_ago_crosses_month(self) -> None:
        now = datetime(2024, 5, 2, 1, 0)
        assert utc_day_range(3, now) == (datetime(2024, 4, 29), datetime(2024, 4, 30))


def test_format_utc_instant() -> None:
    assert format_utc_instant(datetime(2024, 5, 10, 9, 5, 7, 123456)) == "2024-05-10T09:05:07.123Z"


def test_format_utc_instant_normalizes_aware_values() -> None:
    plus_two = timezone(timedelta(hours=2))
    assert format_utc_instant(datetime(2024, 5, 10, 11, 5, 7, tzinfo=plus_two)) == "2024-05-10T09:05:07.000Z"


def test_utc_now_is_naive() -> None:
    assert utc_now().tzinfo is None
