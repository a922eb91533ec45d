"""
Rate Tests
==========

Tests for Rate construction, the catalog and rate name lookup.
"""

import logging

import pytest

from smpte_timecode import (
    R24,
    R25,
    R30,
    R50,
    R60,
    R120,
    R240,
    R2398,
    R2997,
    R2997DF,
    R5994,
    R5994DF,
    STANDARD_RATES,
    InvalidRateError,
    ParseError,
    Rate,
    TimecodeError,
    rate_from_name,
)


class TestNewRate:
    """Tests for Rate()."""

    def test_non_drop(self):
        rate = Rate(30, False)
        assert rate.fps == 30.0
        assert rate.drop_frame is False
        assert rate.time_base == 30

    def test_drop_frame(self):
        rate = Rate(30, True)
        assert rate.fps == 30.0
        assert rate.drop_frame is True

    def test_rounds_to_two_decimals(self):
        rate = Rate(30000 / 1001)
        assert rate.fps == 29.97
        assert rate.time_base == 30

    @pytest.mark.parametrize("fps", [0, -100, 0.5, 0.994, float("nan"), float("inf")])
    def test_invalid(self, fps):
        with pytest.raises(InvalidRateError):
            Rate(fps)

    def test_invalid_rate_is_value_error(self):
        with pytest.raises(ValueError):
            Rate(0)
        with pytest.raises(TimecodeError):
            Rate(0)

    def test_rounding_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="smpte_timecode.rate")
        Rate(24000 / 1001)
        assert "Rounded frame rate" in caplog.text

    def test_drop_frames(self):
        assert R2997.drop_frames == 0
        assert R2997DF.drop_frames == 2
        assert R5994DF.drop_frames == 4

    def test_with_drop_frame(self):
        assert R2997.with_drop_frame(True) == R2997DF
        assert R2997DF.with_drop_frame(False) == R2997


class TestCatalog:
    """Tests for the standard rate constants."""

    @pytest.mark.parametrize(
        "rate, fps, time_base, drop_frame",
        [
            (R2997, 29.97, 30, False),
            (R2997DF, 29.97, 30, True),
            (R30, 30.0, 30, False),
            (R5994, 59.94, 60, False),
            (R5994DF, 59.94, 60, True),
            (R60, 60.0, 60, False),
            (R25, 25.0, 25, False),
            (R50, 50.0, 50, False),
            (R2398, 23.98, 24, False),
            (R24, 24.0, 24, False),
            (R120, 120.0, 120, False),
            (R240, 240.0, 240, False),
        ],
    )
    def test_standard_rates(self, rate, fps, time_base, drop_frame):
        assert rate.fps == fps
        assert rate.time_base == time_base
        assert rate.drop_frame is drop_frame

    def test_standard_rate_names(self):
        assert STANDARD_RATES["29.97DF"] is R2997DF
        assert STANDARD_RATES["23.98"] is R2398
        assert STANDARD_RATES["240"] is R240
        assert len(STANDARD_RATES) == 12


class TestParseRate:
    """Tests for Rate.parse()."""

    @pytest.mark.parametrize(
        "text, fps",
        [
            ("30000/1001", 29.97),
            ("24000/1001", 23.98),
            ("60000/1001", 59.94),
            ("30/1", 30.0),
            ("50/2", 25.0),
        ],
    )
    def test_parse(self, text, fps):
        assert Rate.parse(text).fps == fps

    def test_parse_sets_time_base(self):
        rate = Rate.parse("30000/1001", True)
        assert rate.time_base == 30
        assert rate == R2997DF

    @pytest.mark.parametrize(
        "text",
        ["30/0", "invalid", "", "30/", "/1", "-30/1", "30.5/1", " 30/1", "٣٠/1"],
    )
    def test_parse_error(self, text):
        with pytest.raises(ParseError):
            Rate.parse(text)

    def test_numerator_too_large(self):
        with pytest.raises(ParseError):
            Rate.parse("1" + "0" * 400 + "/1")

    def test_below_one_fps(self):
        with pytest.raises(InvalidRateError):
            Rate.parse("1/2")


class TestRateValue:
    """Tests for Rate equality and representations."""

    def test_equality(self):
        assert Rate(29.97, True) == R2997DF
        assert Rate(29.97) != R2997DF
        assert Rate(30000 / 1001) == R2997
        assert R30 != 30

    def test_hash(self):
        assert len({Rate(25), R25, Rate(25.001)}) == 1

    def test_str(self):
        assert str(R2997DF) == "29.97DF"
        assert str(R30) == "30"
        assert str(R2398) == "23.98"

    def test_repr(self):
        assert repr(R2997DF) == "Rate(29.97, drop_frame=True)"


class TestRateFromName:
    """Tests for rate_from_name()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("29.97DF", R2997DF),
            ("29.97df", R2997DF),
            (" 25 ", R25),
            ("59.94", R5994),
            ("30000/1001", R2997),
            ("30000/1001 DF", R2997DF),
            ("48", Rate(48)),
            ("47.952DF", Rate(47.95, True)),
        ],
    )
    def test_lookup(self, name, expected):
        assert rate_from_name(name) == expected

    @pytest.mark.parametrize("name", ["fast", "", "DF", "30/0"])
    def test_parse_error(self, name):
        with pytest.raises(ParseError):
            rate_from_name(name)

    def test_invalid_rate(self):
        with pytest.raises(InvalidRateError):
            rate_from_name("0.5")
