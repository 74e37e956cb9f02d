# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Conversion orchestrator.

This is the primary entry point for Huecast: raw text in one notation goes
in, every representation of the color (or a ValidationError) comes out.

    text → parse (validate) → Color → HSL / LAB views → formatted strings

Nothing here holds shared mutable state. ``convert`` is a pure function;
``Converter`` wraps it for hosts that want "last good result" semantics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from huecast.convert import formatting as fmt
from huecast.convert.colorspace import (
    brightness,
    color_to_hex,
    color_to_hsl,
    color_to_lab,
    color_to_rgb_bytes,
)
from huecast.convert.parsers import parse, parse_hex
from huecast.schema import (
    Color,
    ColorValidationError,
    ConversionOutput,
    ConversionResult,
    Notation,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for formatting conversion results."""

    # Shown when the submitted text is empty (initial preview state)
    default_color: str = "#808080"

    # Decimal places for non-integral values (alpha, float RGB)
    places: int = fmt.DEFAULT_PLACES

    # Decimal places for L, a, b; trailing zeros are stripped
    lab_places: int = fmt.LAB_PLACES


def convert_color(
    color: Color,
    *,
    config: Optional[ConverterConfig] = None,
) -> ConversionOutput:
    """
    Derive every representation of a Color.

    Args:
        color: The canonical color
        config: Formatting settings (uses defaults if None)

    Returns:
        ConversionOutput with all strings derived from ``color``
    """
    cfg = config or ConverterConfig()

    r, g, b = color_to_rgb_bytes(color)
    hsl = color_to_hsl(color)
    lab = color_to_lab(color)
    hex6 = color_to_hex(color)
    hex8 = color_to_hex(color, with_alpha=True)

    return ConversionOutput(
        color=color,
        hsl=hsl,
        lab=lab,
        hex=hex6 if color.is_opaque else hex8,
        hex6=hex6,
        hex8=hex8,
        rgb=fmt.format_rgb(r, g, b),
        rgba=fmt.format_rgba(r, g, b, color.A, cfg.places),
        rgba_float=fmt.format_rgba_float(color.R, color.G, color.B, color.A, cfg.places),
        hsla=fmt.format_hsla(hsl.H, hsl.S, hsl.L, color.A, cfg.places),
        lab_text=fmt.format_lab(lab.L, lab.a, lab.b, color.A, cfg.lab_places, cfg.places),
        brightness=brightness(color),
    )


def convert(
    notation: Union[Notation, str],
    text: str,
    *,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """
    Convert raw text in one notation to every supported notation.

    This never raises for bad input: validation failures come back as a
    ValidationError value. Empty (or whitespace-only) text is replaced by
    ``config.default_color``.

    Args:
        notation: Input notation (Notation member or name such as "hsl")
        text: Raw user text
        config: Formatting settings (uses defaults if None)

    Returns:
        ConversionOutput on success, ValidationError otherwise.
        Check ``result.ok`` to tell them apart.

    Raises:
        ValueError: ``notation`` names no known notation

    Example:
        >>> convert(Notation.HEX, "#FF0000").rgba
        'rgba(255, 0, 0, 1)'
        >>> convert(Notation.RGB, "256, 0, 0").field
        'R'
    """
    cfg = config or ConverterConfig()
    notation = Notation.from_name(notation)

    try:
        if not text or not text.strip():
            logger.debug("Empty %s input, using default %s", notation.value, cfg.default_color)
            color = parse_hex(cfg.default_color)
        else:
            color = parse(notation, text)
    except ColorValidationError as e:
        logger.debug("Rejected %s input %r: %s", notation.value, text, e.error.message)
        return e.error

    result = convert_color(color, config=cfg)
    logger.debug("Converted %s %r -> %s", notation.value, text, result.hex8)
    return result


def reset(*, config: Optional[ConverterConfig] = None) -> ConversionOutput:
    """Return the default preview state (the configured default color)."""
    cfg = config or ConverterConfig()
    return convert_color(parse_hex(cfg.default_color), config=cfg)


# =============================================================================
# Stateful wrapper
# =============================================================================


class ConverterState(Enum):
    """Lifecycle of a Converter."""
    IDLE = "idle"            # nothing converted yet, or just reset
    CONVERTED = "converted"  # last successful submission is held in ``last``


class Converter:
    """
    Holds the last successful conversion for an interactive host.

    A failed submission never replaces ``last`` and never changes state;
    the error is available as ``last_error`` until the next submission.

    Usage:
        conv = Converter()
        result = conv.submit(Notation.HSL, "hsl(210, 50%, 40%)")
        if result.ok:
            show(result.as_tuple())
        else:
            show_error(result.field, result.message)
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()
        self.state = ConverterState.IDLE
        self.last: Optional[ConversionOutput] = None
        self.last_error: Optional[ValidationError] = None

    def submit(self, notation: Union[Notation, str], text: str) -> ConversionResult:
        """Convert text; on success remember it and move to CONVERTED."""
        result = convert(notation, text, config=self.config)
        if result.ok:
            self.last = result
            self.last_error = None
            self.state = ConverterState.CONVERTED
        else:
            self.last_error = result
        return result

    def reset(self) -> ConversionOutput:
        """Forget everything, return to IDLE and hand back the default preview."""
        self.state = ConverterState.IDLE
        self.last = None
        self.last_error = None
        return reset(config=self.config)

    @property
    def preview(self) -> ConversionOutput:
        """The last good result, or the default color while IDLE."""
        if self.last is not None:
            return self.last
        return reset(config=self.config)
