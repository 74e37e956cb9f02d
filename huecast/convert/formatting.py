# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Deterministic text rendering for numbers and color notations.

Precision policy:
- Integral values render without a decimal point ("1", "255")
- Everything else renders with exactly ``places`` decimals, rounded half up
- LAB components use a compact form with trailing zeros stripped
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_PLACES = 3
LAB_PLACES = 2


def round_half_up(value: float, places: int = DEFAULT_PLACES) -> Decimal:
    """
    Round to ``places`` decimals, ties away from zero.

    Works on the shortest decimal repr of the float, so 0.0005 rounds to
    0.001 instead of being dragged down by binary representation error.
    """
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)


def _is_integral(d: Decimal) -> bool:
    return d == d.to_integral_value()


def format_number(value: float, places: int = DEFAULT_PLACES) -> str:
    """
    Render a number: integers bare, everything else with fixed decimals.

    >>> format_number(1.0), format_number(128 / 255), format_number(0.5)
    ('1', '0.502', '0.500')
    """
    d = round_half_up(value, places)
    if _is_integral(d):
        # int() also folds -0 into 0
        return str(int(d))
    return f"{d:.{places}f}"


def format_compact(value: float, places: int = LAB_PLACES) -> str:
    """
    Render a number rounded to ``places`` with trailing zeros stripped.

    >>> format_compact(67.2032), format_compact(53.2408), format_compact(-0.0001)
    ('67.2', '53.24', '0')
    """
    d = round_half_up(value, places)
    if _is_integral(d):
        return str(int(d))
    return f"{d:.{places}f}".rstrip("0")


def format_integer(value: float) -> str:
    """Round half up to a whole number."""
    return str(int(round_half_up(value, 0)))


def format_hex_byte(byte: int) -> str:
    """Lowercase, zero-padded two-digit hex."""
    return f"{byte:02x}"


# =============================================================================
# Functional forms
# =============================================================================


def format_rgb(r: int, g: int, b: int) -> str:
    """``rgb(255, 0, 0)``"""
    return f"rgb({r}, {g}, {b})"


def format_rgba(r: int, g: int, b: int, alpha: float, places: int = DEFAULT_PLACES) -> str:
    """``rgba(255, 0, 0, 1)``"""
    return f"rgba({r}, {g}, {b}, {format_number(alpha, places)})"


def format_rgba_float(
    r: float, g: float, b: float, alpha: float, places: int = DEFAULT_PLACES
) -> str:
    """``rgba(1, 0.502, 0, 1)``"""
    parts = ", ".join(format_number(v, places) for v in (r, g, b, alpha))
    return f"rgba({parts})"


def format_hsla(h: float, s: float, l: float, alpha: float, places: int = DEFAULT_PLACES) -> str:
    """
    ``hsla(210, 50%, 40%, 1)``

    Hue, saturation and lightness are shown as whole numbers; a hue that
    rounds up to 360 is shown as 0.
    """
    hue = int(round_half_up(h, 0)) % 360
    return (
        f"hsla({hue}, {format_integer(s)}%, {format_integer(l)}%, "
        f"{format_number(alpha, places)})"
    )


def format_lab(
    L: float,
    a: float,
    b: float,
    alpha: float,
    places: int = LAB_PLACES,
    alpha_places: int = DEFAULT_PLACES,
) -> str:
    """
    ``lab(53.24% 80.09 67.2 / 1)``

    The ``/ alpha`` part is always written, even for an opaque color.
    """
    return (
        f"lab({format_compact(L, places)}% {format_compact(a, places)} "
        f"{format_compact(b, places)} / {format_number(alpha, alpha_places)})"
    )
