"""Unit tests for CalendarFields and CalendarConverter."""

from __future__ import annotations

import time

import pytest

from src.civiltime.core.civil import CalendarConverter, CalendarFields
from src.civiltime.core.common import Zone
from src.civiltime.core.zone import CivilTuple, FixedOffsetZone, SystemLocalZone
from src.civiltime.exceptions import ArgumentError, InvalidInstantError

# =============================================================================
# Test Constants
# =============================================================================

TEST_EPOCH = 0  # 1970-01-01T00:00:00Z, Thursday
TEST_BEFORE_EPOCH = -1  # 1969-12-31T23:59:59Z, Wednesday
TEST_Y2K = 946684800  # 2000-01-01T00:00:00Z, Saturday
TEST_LEAP_DAY = 951782400  # 2000-02-29T00:00:00Z, Tuesday
TEST_LAST_DAY_2000 = 978220800  # 2000-12-31T00:00:00Z, Sunday
TEST_UNREPRESENTABLE = 10**30


class _FailingZone:
    """Local zone whose platform primitives always fail."""

    def localtime(self, seconds: int) -> time.struct_time:
        raise OverflowError("timestamp out of range for platform time_t")

    def mktime(self, fields: CivilTuple) -> float:
        raise OverflowError("mktime argument out of range")


# =============================================================================
# CalendarFields Tests
# =============================================================================


class TestCalendarFieldsFromStructTime:
    """Tests for CalendarFields.from_struct_time."""

    def test_weekday_shifted_to_sunday_zero(self) -> None:
        """struct_time Monday=0 becomes Sunday=0 numbering."""
        fields = CalendarFields.from_struct_time(time.gmtime(TEST_EPOCH))
        assert fields.weekday == 4  # Thursday

    def test_sunday_maps_to_zero(self) -> None:
        fields = CalendarFields.from_struct_time(time.gmtime(TEST_LAST_DAY_2000))
        assert fields.weekday == 0

    def test_yearday_is_zero_based(self) -> None:
        fields = CalendarFields.from_struct_time(time.gmtime(TEST_Y2K))
        assert fields.yearday == 0

    def test_dst_flag(self) -> None:
        value = time.struct_time((2000, 7, 1, 12, 0, 0, 5, 183, 1))
        assert CalendarFields.from_struct_time(value).is_dst is True

    def test_unknown_dst_is_false(self) -> None:
        value = time.struct_time((2000, 7, 1, 12, 0, 0, 5, 183, -1))
        assert CalendarFields.from_struct_time(value).is_dst is False


# =============================================================================
# CalendarConverter.convert Tests
# =============================================================================


class TestConvertUTC:
    """Tests for CalendarConverter.convert with Zone.UTC."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (TEST_EPOCH, CalendarFields(1970, 1, 1, 0, 0, 0, 4, 0, False)),
            (TEST_BEFORE_EPOCH, CalendarFields(1969, 12, 31, 23, 59, 59, 3, 364, False)),
            (TEST_Y2K, CalendarFields(2000, 1, 1, 0, 0, 0, 6, 0, False)),
            (TEST_LEAP_DAY, CalendarFields(2000, 2, 29, 0, 0, 0, 2, 59, False)),
            (TEST_LAST_DAY_2000, CalendarFields(2000, 12, 31, 0, 0, 0, 0, 365, False)),
            (TEST_Y2K + 45296, CalendarFields(2000, 1, 1, 12, 34, 56, 6, 0, False)),
        ],
        ids=[
            "epoch",
            "one_second_before_epoch",
            "y2k",
            "leap_day",
            "last_day_of_leap_year",
            "time_of_day",
        ],
    )
    def test_convert_utc(self, seconds: int, expected: CalendarFields) -> None:
        """Test UTC breakdown of known instants."""
        converter = CalendarConverter(FixedOffsetZone(3600))
        assert converter.convert(seconds, Zone.UTC) == expected

    def test_utc_ignores_local_zone(self) -> None:
        """UTC fields are the same whatever local zone is configured."""
        east = CalendarConverter(FixedOffsetZone(5 * 3600, is_dst=True))
        west = CalendarConverter(FixedOffsetZone(-8 * 3600))
        assert east.convert(TEST_Y2K, Zone.UTC) == west.convert(TEST_Y2K, Zone.UTC)

    def test_unrepresentable_seconds_raise(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(0))
        with pytest.raises(InvalidInstantError):
            converter.convert(TEST_UNREPRESENTABLE, Zone.UTC)


class TestConvertLocal:
    """Tests for CalendarConverter.convert with Zone.LOCAL."""

    def test_positive_offset(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(3600))
        fields = converter.convert(TEST_EPOCH, Zone.LOCAL)
        assert (fields.year, fields.month, fields.day, fields.hour) == (1970, 1, 1, 1)

    def test_negative_offset_crosses_year(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(-5 * 3600))
        fields = converter.convert(TEST_Y2K, Zone.LOCAL)
        assert fields == CalendarFields(1999, 12, 31, 19, 0, 0, 5, 364, False)

    def test_dst_flag_comes_from_local_rule(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(7200, is_dst=True))
        assert converter.convert(TEST_Y2K, Zone.LOCAL).is_dst is True
        assert converter.convert(TEST_Y2K, Zone.UTC).is_dst is False

    def test_platform_failure_raises_invalid_instant(self) -> None:
        converter = CalendarConverter(_FailingZone())
        with pytest.raises(InvalidInstantError, match="Cannot represent"):
            converter.convert(TEST_Y2K, Zone.LOCAL)

    def test_platform_failure_is_chained(self) -> None:
        converter = CalendarConverter(_FailingZone())
        with pytest.raises(InvalidInstantError) as exc_info:
            converter.convert(TEST_Y2K, Zone.LOCAL)
        assert isinstance(exc_info.value.__cause__, OverflowError)

    def test_none_zone_rejected(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(0))
        with pytest.raises(ArgumentError):
            converter.convert(TEST_Y2K, Zone.NONE)


class TestConverterDefaults:
    """Tests for CalendarConverter construction."""

    def test_default_local_zone_is_system(self) -> None:
        assert isinstance(CalendarConverter().local_zone, SystemLocalZone)

    def test_repr(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(60))
        assert repr(converter) == "CalendarConverter(local_zone=FixedOffsetZone(offset_seconds=60, is_dst=False))"


# =============================================================================
# CalendarConverter.to_epoch Tests
# =============================================================================


class TestToEpoch:
    """Tests for CalendarConverter.to_epoch (local civil fields to epoch seconds)."""

    @pytest.mark.parametrize(
        ("offset", "components", "expected"),
        [
            (0, (1970,), 0),
            (0, (2000, 1, 1, 0, 0, 0), TEST_Y2K),
            (0, (2000, 2, 29), TEST_LEAP_DAY),
            (3600, (2000, 1, 1), TEST_Y2K - 3600),
            (-3600, (1970, 1, 1), 3600),
            (0, (1969, 12, 31, 23, 59, 59), -1),
        ],
        ids=[
            "epoch_year_only",
            "y2k",
            "leap_day",
            "y2k_east_of_utc",
            "epoch_west_of_utc",
            "before_epoch",
        ],
    )
    def test_to_epoch(self, offset: int, components: tuple[int, ...], expected: int) -> None:
        converter = CalendarConverter(FixedOffsetZone(offset))
        assert converter.to_epoch(*components) == expected

    def test_components_are_floored(self) -> None:
        converter = CalendarConverter(FixedOffsetZone(0))
        assert converter.to_epoch(2000.9, 1.9, 1.5, 0.2, 0.9, 0.99) == TEST_Y2K

    def test_overflowing_components_are_normalized(self) -> None:
        """Day 32 of January is February 1st."""
        converter = CalendarConverter(FixedOffsetZone(0))
        assert converter.to_epoch(2000, 1, 32) == TEST_Y2K + 31 * 86400

    @pytest.mark.parametrize(
        ("month", "expected"),
        [
            (13, 978307200),  # 2001-01-01
            (0, 944006400),  # 1999-12-01
        ],
        ids=["month_13_is_next_january", "month_0_is_previous_december"],
    )
    def test_overflowing_months_are_normalized(self, month: int, expected: int) -> None:
        converter = CalendarConverter(FixedOffsetZone(0))
        assert converter.to_epoch(2000, month, 1) == expected

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")], ids=["nan", "inf", "-inf"])
    def test_non_finite_components_rejected(self, bad: float) -> None:
        converter = CalendarConverter(FixedOffsetZone(0))
        with pytest.raises(ArgumentError):
            converter.to_epoch(2000, 1, 1, bad)

    def test_platform_failure_raises_invalid_instant(self) -> None:
        converter = CalendarConverter(_FailingZone())
        with pytest.raises(InvalidInstantError, match="Not a valid time"):
            converter.to_epoch(2000)
