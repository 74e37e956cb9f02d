# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""Tests for number and notation rendering."""

import pytest

from huecast.convert.formatting import (
    format_compact,
    format_hex_byte,
    format_hsla,
    format_integer,
    format_lab,
    format_number,
    format_rgb,
    format_rgba,
    format_rgba_float,
    round_half_up,
)


class TestFormatNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1"),
            (0.0, "0"),
            (255, "255"),
            (128 / 255, "0.502"),
            (0.5, "0.500"),
            (0.25, "0.250"),
            (0.0005, "0.001"),
            (0.0004, "0"),
            (0.9996, "1"),
            (-0.0001, "0"),
            (-0.25, "-0.250"),
        ],
    )
    def test_three_places(self, value, expected):
        assert format_number(value) == expected

    def test_custom_places(self):
        assert format_number(1 / 3, places=4) == "0.3333"

    def test_half_up_not_bankers(self):
        assert str(round_half_up(0.125, 2)) == "0.13"
        assert str(round_half_up(2.5, 0)) == "3"


class TestFormatCompact:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (53.2408, "53.24"),
            (80.0925, "80.09"),
            (67.2032, "67.2"),
            (100.0000039, "100"),
            (-0.0000167, "0"),
            (-12.345, "-12.35"),
        ],
    )
    def test_two_places(self, value, expected):
        assert format_compact(value) == expected


class TestFormatInteger:

    def test_half_up(self):
        assert format_integer(50.5) == "51"
        assert format_integer(49.5) == "50"
        assert format_integer(50.196) == "50"


class TestHexByte:

    def test_zero_padded_lowercase(self):
        assert format_hex_byte(0) == "00"
        assert format_hex_byte(10) == "0a"
        assert format_hex_byte(255) == "ff"


class TestFunctionalForms:

    def test_rgb(self):
        assert format_rgb(255, 0, 0) == "rgb(255, 0, 0)"

    def test_rgba(self):
        assert format_rgba(255, 0, 0, 1.0) == "rgba(255, 0, 0, 1)"
        assert format_rgba(255, 0, 0, 0.5) == "rgba(255, 0, 0, 0.500)"

    def test_rgba_float(self):
        assert format_rgba_float(1.0, 0.0, 0.0, 1.0) == "rgba(1, 0, 0, 1)"
        assert format_rgba_float(128 / 255, 0.25, 1.0, 1.0) == "rgba(0.502, 0.250, 1, 1)"

    def test_hsla(self):
        assert format_hsla(0.0, 100.0, 50.0, 1.0) == "hsla(0, 100%, 50%, 1)"

    def test_hsla_hue_wraps(self):
        assert format_hsla(359.6, 50.0, 50.0, 1.0) == "hsla(0, 50%, 50%, 1)"

    def test_lab(self):
        assert format_lab(53.2408, 80.0925, 67.2032, 1.0) == "lab(53.24% 80.09 67.2 / 1)"

    def test_lab_alpha(self):
        assert format_lab(0.0, 0.0, 0.0, 0.5) == "lab(0% 0 0 / 0.500)"
