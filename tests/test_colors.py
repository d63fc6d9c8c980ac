"""Tests for hex color parsing and the predefined palette."""

import pytest

from blinkt_strip.colors import BLUE, GREEN, OFF, RED, WHITE, parse_color
from blinkt_strip.errors import BlinktError, InvalidColorFormat


class TestPalette:

    @pytest.mark.parametrize("color,expected", [
        (WHITE, (255, 255, 255)),
        (RED, (255, 0, 0)),
        (GREEN, (0, 255, 0)),
        (BLUE, (0, 0, 255)),
        (OFF, (0, 0, 0)),
    ])
    def test_constants_parse(self, color, expected):
        assert parse_color(color) == expected


class TestParseColor:

    def test_most_significant_pair_is_red(self):
        assert parse_color("102030") == (0x10, 0x20, 0x30)

    def test_lowercase_accepted(self):
        assert parse_color("ff8000") == (255, 128, 0)

    @pytest.mark.parametrize("bad", [
        "GGGGGG",
        "FFF",
        "FFFFFFF",
        "",
        "#FFFFF",
        "0xFFFF",
        " FFFFF",
        "FF FF0",
        "+1FFFF",
        "FF-0FF",
    ])
    def test_rejects_malformed(self, bad):
        with pytest.raises(InvalidColorFormat) as exc_info:
            parse_color(bad)
        assert exc_info.value.color == bad

    def test_rejects_non_string(self):
        with pytest.raises(InvalidColorFormat):
            parse_color(0xFFFFFF)

    def test_error_is_value_error_and_blinkt_error(self):
        with pytest.raises(ValueError):
            parse_color("nothex")
        with pytest.raises(BlinktError):
            parse_color("nothex")
