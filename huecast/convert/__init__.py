# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Conversion core for Huecast.

Parsing, color space math and formatting. All operations are pure and
deterministic: the same text always yields the same strings.
"""

from huecast.convert.engine import (
    Converter,
    ConverterConfig,
    ConverterState,
    convert,
    convert_color,
    reset,
)
from huecast.convert.parsers import parse, try_parse

__all__ = [
    "convert",
    "convert_color",
    "reset",
    "parse",
    "try_parse",
    "Converter",
    "ConverterConfig",
    "ConverterState",
]
