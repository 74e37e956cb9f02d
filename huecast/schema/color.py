# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Color records and conversion results.

Design principles:
- Immutable: All types are frozen dataclasses
- Canonical: Every notation pivots through one float RGBA record
- Derived, not stored: HSL and LAB are regenerated from the Color on demand
- Structured errors: validation failures are values, not display strings

Color:
- R, G, B: normalized intensity, 0.0-1.0
- A: normalized opacity, 0.0-1.0 (default 1.0)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Notations
# =============================================================================


class Notation(Enum):
    """Textual color encodings accepted as input."""
    HEX = "hex"
    RGB = "rgb"
    RGB_FLOAT = "rgb_float"
    HSL = "hsl"
    LAB = "lab"

    @classmethod
    def from_name(cls, name: Union[str, Notation]) -> Notation:
        """
        Resolve a notation from its value or a common alias.

        Accepts the enum itself, its value ("rgb_float"), its member name
        ("RGB_FLOAT") or an alias such as "rgba", "float" or "hsla".
        """
        if isinstance(name, Notation):
            return name
        key = str(name).strip().lower().replace("-", "_")
        key = _NOTATION_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(n.value for n in cls)
            raise ValueError(
                f"Unknown notation '{name}', expected one of: {valid}"
            ) from None


_NOTATION_ALIASES = {
    "#": "hex",
    "hex6": "hex",
    "hex8": "hex",
    "rgba": "rgb",
    "float": "rgb_float",
    "rgbfloat": "rgb_float",
    "rgba_float": "rgb_float",
    "hsla": "hsl",
    "laba": "lab",
}


# =============================================================================
# Validation Errors
# =============================================================================


class ErrorKind(Enum):
    """The two ways an input can fail validation."""
    INVALID_FORMAT = "invalid_format"  # text matches no grammar
    OUT_OF_RANGE = "out_of_range"      # parses, but a field is outside its domain


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    A failed conversion, reported as a value.

    Attributes:
        kind: INVALID_FORMAT or OUT_OF_RANGE
        message: Human-readable description (no display styling)
        field: Offending field name ("R", "A", "L", ...), when one applies
        range: Legal (low, high) range of that field, when one applies
    """
    kind: ErrorKind
    message: str
    field: Optional[str] = None
    range: Optional[tuple[float, float]] = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"kind": self.kind.value, "message": self.message}
        if self.field is not None:
            d["field"] = self.field
        if self.range is not None:
            d["range"] = list(self.range)
        return d


class ColorValidationError(ValueError):
    """
    Raised by parsers and record constructors on invalid input.

    The conversion boundary catches it and hands back ``.error``.
    """

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error

    @classmethod
    def invalid_format(
        cls, message: str, field: Optional[str] = None
    ) -> ColorValidationError:
        return cls(ValidationError(ErrorKind.INVALID_FORMAT, message, field))

    @classmethod
    def out_of_range(
        cls, field: str, value: float, low: float, high: float
    ) -> ColorValidationError:
        return cls(ValidationError(
            ErrorKind.OUT_OF_RANGE,
            f"{field} must be between {_fmt_bound(low)} and {_fmt_bound(high)}, "
            f"got {_fmt_bound(value)}",
            field,
            (low, high),
        ))


def _fmt_bound(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:g}"


def check_range(field: str, value: float, low: float, high: float) -> None:
    """Raise OUT_OF_RANGE unless low <= value <= high (NaN always fails)."""
    if math.isnan(value) or not low <= value <= high:
        raise ColorValidationError.out_of_range(field, value, low, high)


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    The canonical color record every notation converts through.

    Construction rejects out-of-domain components instead of clamping
    them, so any Color that exists is valid.

    Attributes:
        R: Red intensity (0.0-1.0)
        G: Green intensity (0.0-1.0)
        B: Blue intensity (0.0-1.0)
        A: Opacity (0.0 = transparent, 1.0 = opaque)
    """
    R: float
    G: float
    B: float
    A: float = 1.0

    def __post_init__(self) -> None:
        """Validate all four components are within 0-1."""
        for name in ("R", "G", "B", "A"):
            check_range(name, getattr(self, name), 0.0, 1.0)

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.R, self.G, self.B)

    @property
    def is_opaque(self) -> bool:
        return self.A == 1.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"R": self.R, "G": self.G, "B": self.B, "A": self.A}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(R=data["R"], G=data["G"], B=data["B"], A=data.get("A", 1.0))


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    HSL view of a Color at full precision.

    Rounding to whole degrees and percents happens only when formatting,
    so chained conversions do not compound rounding error.

    Attributes:
        H: Hue in degrees (0-360)
        S: Saturation in percent (0-100)
        L: Lightness in percent (0-100)
        A: Opacity (0-1)
    """
    H: float
    S: float
    L: float
    A: float = 1.0

    def to_dict(self) -> dict:
        return {"H": self.H, "S": self.S, "L": self.L, "A": self.A}


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    CIE LAB (D65) view of a Color at full precision.

    Attributes:
        L: Lightness (0-100)
        a: Green-red axis (nominally -128 to 127)
        b: Blue-yellow axis (nominally -128 to 127)
        A: Opacity (0-1)
    """
    L: float
    a: float
    b: float
    A: float = 1.0

    def to_dict(self) -> dict:
        return {"L": self.L, "a": self.a, "b": self.b, "A": self.A}


# =============================================================================
# Conversion Output
# =============================================================================


@dataclass(frozen=True, slots=True)
class ConversionOutput:
    """
    Every representation of one submitted color.

    Built in one step from a single Color, so the strings always agree
    with each other.

    Attributes:
        color: The canonical Color
        hsl: Full-precision HSL view
        lab: Full-precision LAB view
        hex: hex6 when opaque, hex8 otherwise ("#ff0000", "#ff000080")
        hex6: Always 6 digits ("#ff0000")
        hex8: Always 8 digits ("#ff0000ff")
        rgb: Integer RGB without alpha ("rgb(255, 0, 0)")
        rgba: Integer RGB with alpha ("rgba(255, 0, 0, 1)")
        rgba_float: Normalized RGB with alpha ("rgba(1, 0, 0, 1)")
        hsla: HSL with alpha ("hsla(0, 100%, 50%, 1)")
        lab_text: LAB with alpha ("lab(53.24% 80.09 67.2 / 1)")
        brightness: W3C perceived brightness (0-255)
    """
    color: Color
    hsl: HSLColor
    lab: LabColor
    hex: str
    hex6: str
    hex8: str
    rgb: str
    rgba: str
    rgba_float: str
    hsla: str
    lab_text: str
    brightness: int

    @property
    def ok(self) -> bool:
        return True

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        """The five primary strings: hex, rgba, rgba-float, hsla, lab."""
        return (self.hex, self.rgba, self.rgba_float, self.hsla, self.lab_text)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "hex6": self.hex6,
            "hex8": self.hex8,
            "rgb": self.rgb,
            "rgba": self.rgba,
            "rgba_float": self.rgba_float,
            "hsla": self.hsla,
            "lab": self.lab_text,
            "brightness": self.brightness,
            "color": self.color.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


ConversionResult = Union[ConversionOutput, ValidationError]
