# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Huecast -- Color notation converter.

Parses a color written as hex, RGB(A), float RGB(A), HSL(A) or CIE LAB,
validates it, and renders it in every other notation.

Quick start::

    from huecast import convert, Notation

    out = convert(Notation.HEX, "#FF0000")
    out.rgba        # 'rgba(255, 0, 0, 1)'
    out.hsla        # 'hsla(0, 100%, 50%, 1)'
    out.lab_text    # 'lab(53.24% 80.09 67.2 / 1)'

    err = convert(Notation.RGB, "256, 0, 0")
    err.ok, err.field   # (False, 'R')
"""

from __future__ import annotations

__version__ = "1.0.0"

from huecast.convert import (
    Converter,
    ConverterConfig,
    ConverterState,
    convert,
    convert_color,
    parse,
    reset,
    try_parse,
)
from huecast.schema import (
    Color,
    ColorValidationError,
    ConversionOutput,
    ErrorKind,
    HSLColor,
    LabColor,
    Notation,
    ValidationError,
)

__all__ = [
    # Core API
    "convert",
    "convert_color",
    "reset",
    "parse",
    "try_parse",
    "Converter",
    "ConverterConfig",
    "ConverterState",
    # Types (commonly needed)
    "Color",
    "HSLColor",
    "LabColor",
    "Notation",
    "ConversionOutput",
    "ValidationError",
    "ErrorKind",
    "ColorValidationError",
    # Version
    "__version__",
]
