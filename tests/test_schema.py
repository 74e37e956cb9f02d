# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""Tests for schema types and validation errors."""

import json
import math

import pytest

from huecast.schema import (
    Color,
    ColorValidationError,
    ErrorKind,
    Notation,
    ValidationError,
)


class TestColor:

    def test_valid_color(self):
        c = Color(R=0.5, G=0.25, B=1.0)
        assert c.rgb == (0.5, 0.25, 1.0)
        assert c.A == 1.0
        assert c.is_opaque

    def test_bounds_inclusive(self):
        Color(0.0, 0.0, 0.0, 0.0)
        Color(1.0, 1.0, 1.0, 1.0)

    @pytest.mark.parametrize("field", ["R", "G", "B", "A"])
    def test_out_of_range_rejected(self, field):
        values = {"R": 0.5, "G": 0.5, "B": 0.5, "A": 0.5}
        values[field] = 1.5
        with pytest.raises(ColorValidationError) as exc:
            Color(**values)
        err = exc.value.error
        assert err.kind is ErrorKind.OUT_OF_RANGE
        assert err.field == field
        assert err.range == (0.0, 1.0)

    def test_negative_rejected_not_clamped(self):
        with pytest.raises(ColorValidationError, match="A must be between 0 and 1"):
            Color(0.0, 0.0, 0.0, -0.1)

    def test_nan_rejected(self):
        with pytest.raises(ColorValidationError):
            Color(math.nan, 0.0, 0.0)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Color(2.0, 0.0, 0.0)

    def test_to_dict_roundtrip(self):
        c = Color(0.1, 0.2, 0.3, 0.4)
        assert Color.from_dict(c.to_dict()) == c

    def test_frozen(self):
        c = Color(0.1, 0.2, 0.3)
        with pytest.raises(AttributeError):
            c.R = 0.6


class TestNotation:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("hex", Notation.HEX),
            ("#", Notation.HEX),
            ("RGB", Notation.RGB),
            ("rgba", Notation.RGB),
            ("rgb_float", Notation.RGB_FLOAT),
            ("float", Notation.RGB_FLOAT),
            ("rgb-float", Notation.RGB_FLOAT),
            ("hsla", Notation.HSL),
            (" lab ", Notation.LAB),
            (Notation.LAB, Notation.LAB),
        ],
    )
    def test_from_name(self, name, expected):
        assert Notation.from_name(name) is expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown notation"):
            Notation.from_name("xyz")


class TestValidationError:

    def test_not_ok(self):
        err = ValidationError(ErrorKind.INVALID_FORMAT, "bad")
        assert not err.ok

    def test_to_dict_minimal(self):
        err = ValidationError(ErrorKind.INVALID_FORMAT, "bad")
        assert err.to_dict() == {"kind": "invalid_format", "message": "bad"}

    def test_to_dict_with_field(self):
        err = ColorValidationError.out_of_range("R", 256, 0, 255).error
        d = err.to_dict()
        assert d["kind"] == "out_of_range"
        assert d["field"] == "R"
        assert d["range"] == [0, 255]
        assert d["message"] == "R must be between 0 and 255, got 256"
        json.dumps(d)
