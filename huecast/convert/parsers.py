# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Input grammars, one per notation.

Each ``parse_*`` function turns raw text into a valid Color or raises
ColorValidationError. Parsing runs in two passes: first every field must
be a well-formed number (INVALID_FORMAT otherwise), then every field must
lie in its domain (OUT_OF_RANGE otherwise). Values are never clamped.

Accepted shapes:

    hex        #ff8000  ff8000  #FF800080
    rgb        rgb(255, 128, 0)  rgba(255, 128, 0, 0.5)  255, 128, 0
    rgb_float  rgb(1, 0.5, 0)  rgba(1, 0.5, 0, 0.5)  1, 0.5, 0, 1
    hsl        hsl(30, 100%, 50%)  hsla(30deg, 100%, 50%, 0.5)  30, 100, 50
    lab        lab(67% 43 74)  lab(67% 43 74 / 0.5)  67, 43, 74, 0.5
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from huecast.convert.colorspace import (
    hex_to_color,
    hsl_to_color,
    lab_to_color,
    rgb_bytes_to_color,
)
from huecast.schema import (
    Color,
    ColorValidationError,
    Notation,
    ValidationError,
    check_range,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Lexical rules
# =============================================================================

_NUMBER = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNCTION_RE = re.compile(r"^([A-Za-z]+)\s*\((.*)\)$", re.DOTALL | re.ASCII)
_LAB_SPLIT_RE = re.compile(r"\s*,\s*|\s+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Field:
    """A named numeric field with its legal range."""
    name: str
    low: float
    high: float
    suffix: Optional[str] = None   # unit accepted after the number ("%", "deg")
    suffix_scale: float = 1.0      # multiplier applied when the unit is present
    integer: bool = False          # require an integer literal


RGB_FIELDS = (
    Field("R", 0, 255, integer=True),
    Field("G", 0, 255, integer=True),
    Field("B", 0, 255, integer=True),
)
RGB_FLOAT_FIELDS = (
    Field("R", 0.0, 1.0),
    Field("G", 0.0, 1.0),
    Field("B", 0.0, 1.0),
)
HSL_FIELDS = (
    Field("H", 0, 360, suffix="deg"),
    Field("S", 0, 100, suffix="%"),
    Field("L", 0, 100, suffix="%"),
)
LAB_FIELDS = (
    Field("L", 0, 100, suffix="%"),
    Field("a", -128, 127),
    Field("b", -128, 127),
)
ALPHA_FIELD = Field("A", 0.0, 1.0, suffix="%", suffix_scale=0.01)


def _read_number(token: str, field: Field) -> float:
    """Lex one field value; INVALID_FORMAT if it is not a number."""
    text = token.strip()
    scale = 1.0
    if field.suffix and text.lower().endswith(field.suffix):
        text = text[: -len(field.suffix)].rstrip()
        scale = field.suffix_scale
    if not text:
        raise ColorValidationError.invalid_format(
            f"{field.name} is missing", field.name
        )
    if field.integer:
        if not _INTEGER_RE.match(text):
            raise ColorValidationError.invalid_format(
                f"{field.name} must be an integer, got '{token.strip()}'", field.name
            )
        # float() has no digit limit; oversized literals become inf and fail the range check
        return float(text)
    if not _NUMBER_RE.match(text):
        raise ColorValidationError.invalid_format(
            f"{field.name} is not a number: '{token.strip()}'", field.name
        )
    return float(text) * scale


def _read_fields(tokens: list[str], fields: tuple[Field, ...]) -> list[float]:
    """
    Read channel fields plus an optional trailing alpha.

    Format is checked for every token before any range check, so a
    malformed field is reported ahead of an out-of-range one.
    """
    all_fields = fields + (ALPHA_FIELD,)
    values = [_read_number(tok, f) for tok, f in zip(tokens, all_fields)]
    for value, f in zip(values, all_fields):
        check_range(f.name, value, f.low, f.high)
    if len(values) == len(fields):
        values.append(1.0)
    return values


# =============================================================================
# Shape rules
# =============================================================================


def _unwrap(text: str, names: tuple[str, ...]) -> str:
    """
    Strip a functional wrapper like ``rgba( ... )`` if present.

    Returns the argument text, or the input itself for a bare list.
    """
    m = _FUNCTION_RE.match(text)
    if m:
        name = m.group(1).lower()
        if name not in names:
            expected = " or ".join(f"{n}(...)" for n in names)
            raise ColorValidationError.invalid_format(
                f"Expected {expected}, got {name}(...)"
            )
        inner = m.group(2)
        if "(" in inner or ")" in inner:
            raise ColorValidationError.invalid_format("Unbalanced parentheses")
        return inner
    if "(" in text or ")" in text:
        raise ColorValidationError.invalid_format(
            "Malformed functional notation"
        )
    return text


def _split_commas(text: str, arity: int) -> list[str]:
    """Split on commas and require ``arity`` or ``arity + 1`` fields."""
    tokens = [t.strip() for t in text.split(",")]
    if len(tokens) not in (arity, arity + 1):
        raise ColorValidationError.invalid_format(
            f"Expected {arity} or {arity + 1} comma-separated values, got {len(tokens)}"
        )
    return tokens


def _prepare(text: str) -> str:
    text = text.strip()
    if not text:
        raise ColorValidationError.invalid_format("Input is empty")
    return text


# =============================================================================
# Parsers
# =============================================================================


def parse_hex(text: str) -> Color:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional)."""
    text = _prepare(text)
    if not _HEX_RE.match(text):
        raise ColorValidationError.invalid_format(
            "Hex color must be 6 or 8 hexadecimal digits, optionally prefixed with '#'"
        )
    return hex_to_color(text)


def parse_rgb(text: str) -> Color:
    """Parse integer RGB(A): channels 0-255, alpha 0-1."""
    inner = _unwrap(_prepare(text), ("rgb", "rgba"))
    r, g, b, a = _read_fields(_split_commas(inner, 3), RGB_FIELDS)
    return rgb_bytes_to_color(int(r), int(g), int(b), a)


def parse_rgb_float(text: str) -> Color:
    """Parse normalized RGB(A): channels 0-1, alpha 0-1."""
    inner = _unwrap(_prepare(text), ("rgb", "rgba"))
    r, g, b, a = _read_fields(_split_commas(inner, 3), RGB_FLOAT_FIELDS)
    return Color(R=r, G=g, B=b, A=a)


def parse_hsl(text: str) -> Color:
    """Parse HSL(A): H 0-360 degrees, S and L 0-100 percent, alpha 0-1."""
    inner = _unwrap(_prepare(text), ("hsl", "hsla"))
    h, s, l, a = _read_fields(_split_commas(inner, 3), HSL_FIELDS)
    return hsl_to_color(h, s, l, a)


def parse_lab(text: str) -> Color:
    """
    Parse CIE LAB: L 0-100, a and b -128 to 127, alpha 0-1.

    Fields may be separated by spaces or commas; alpha may follow a ``/``.
    Colors outside the sRGB gamut are clipped, not rejected.
    """
    inner = _unwrap(_prepare(text), ("lab",)).strip()

    alpha_token: Optional[str] = None
    if "/" in inner:
        channels, _, alpha_token = inner.partition("/")
        if "/" in alpha_token:
            raise ColorValidationError.invalid_format("Only one '/' is allowed")
        alpha_token = alpha_token.strip()
        if not alpha_token or len(alpha_token.split()) != 1:
            raise ColorValidationError.invalid_format(
                "Expected a single alpha value after '/'", ALPHA_FIELD.name
            )
    else:
        channels = inner

    channels = channels.strip()
    tokens = _LAB_SPLIT_RE.split(channels) if channels else []
    if alpha_token is not None:
        if len(tokens) != 3:
            raise ColorValidationError.invalid_format(
                f"Expected 3 values before '/', got {len(tokens)}"
            )
        tokens.append(alpha_token)
    elif len(tokens) not in (3, 4):
        raise ColorValidationError.invalid_format(
            f"Expected 3 or 4 values, got {len(tokens)}"
        )

    L, a, b, alpha = _read_fields(tokens, LAB_FIELDS)
    return lab_to_color(L, a, b, alpha)


PARSERS: dict[Notation, Callable[[str], Color]] = {
    Notation.HEX: parse_hex,
    Notation.RGB: parse_rgb,
    Notation.RGB_FLOAT: parse_rgb_float,
    Notation.HSL: parse_hsl,
    Notation.LAB: parse_lab,
}


def parse(notation: Union[Notation, str], text: str) -> Color:
    """
    Parse text in the given notation.

    Raises:
        ColorValidationError: the text is malformed or out of range
        ValueError: the notation name is unknown
    """
    return PARSERS[Notation.from_name(notation)](text)


def try_parse(notation: Union[Notation, str], text: str) -> Union[Color, ValidationError]:
    """Parse text, returning the ValidationError instead of raising it."""
    try:
        return parse(notation, text)
    except ColorValidationError as e:
        logger.debug("Rejected %s input %r: %s", notation, text, e.error.message)
        return e.error
