# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and conversion results.

All types in this module are immutable (frozen dataclasses).
"""

from huecast.schema.color import (
    Color,
    ColorValidationError,
    ConversionOutput,
    ConversionResult,
    ErrorKind,
    HSLColor,
    LabColor,
    Notation,
    ValidationError,
    check_range,
)

__all__ = [
    # Core types
    "Color",
    "HSLColor",
    "LabColor",
    "Notation",
    # Results
    "ConversionOutput",
    "ConversionResult",
    # Errors
    "ErrorKind",
    "ValidationError",
    "ColorValidationError",
    "check_range",
]
