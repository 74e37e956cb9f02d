# Copyright (c) 2026 Huecast
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    hex ↔ 8-bit RGB ↔ sRGB [0,1]
    sRGB ↔ HSL
    sRGB → Linear RGB → CIE XYZ (D65) → CIE LAB

References:
- sRGB: IEC 61966-2-1
- CIE LAB: CIE 15:2004, with the exact ε = 216/24389 and κ = 24389/27

Array functions take shape (..., 3) and are pure NumPy. The scalar helpers
at the bottom of the module work on Color records.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from huecast.convert.formatting import format_hex_byte
from huecast.schema import Color, ColorValidationError, HSLColor, LabColor

logger = logging.getLogger(__name__)


# =============================================================================
# 8-bit quantization
# =============================================================================


def to_byte(component: float) -> int:
    """
    Quantize a normalized component to 0-255.

    Rounds half up (127.5 → 128) and clamps, so decoding with /255 and
    re-encoding returns the same byte.
    """
    return max(0, min(255, int(math.floor(component * 255.0 + 0.5))))


def rgb_bytes_to_color(r: int, g: int, b: int, a: float = 1.0) -> Color:
    """Build a Color from 8-bit channels and a float alpha."""
    return Color(R=r / 255.0, G=g / 255.0, B=b / 255.0, A=a)


def color_to_rgb_bytes(color: Color) -> tuple[int, int, int]:
    """Quantize the RGB channels of a Color to 8 bits."""
    return to_byte(color.R), to_byte(color.G), to_byte(color.B)


# =============================================================================
# Hex
# =============================================================================


def hex_to_color(hex_color: str) -> Color:
    """
    Decode a 6- or 8-digit hex string to a Color.

    Args:
        hex_color: Hex string like "#3941C8", "3941c8" or "#3941C880"

    Returns:
        Color; the fourth byte, when present, is alpha (byte/255)
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) not in (6, 8):
        raise ColorValidationError.invalid_format(
            f"Hex color must have 6 or 8 digits, got {len(digits)}"
        )
    try:
        values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError:
        raise ColorValidationError.invalid_format(
            f"Invalid hex digits in '{hex_color}'"
        ) from None
    alpha = values[3] / 255.0 if len(values) == 4 else 1.0
    return rgb_bytes_to_color(values[0], values[1], values[2], alpha)


def color_to_hex(color: Color, with_alpha: bool = False) -> str:
    """
    Encode a Color as lowercase hex.

    Args:
        color: Color to encode
        with_alpha: If True, append the alpha byte (hex8)

    Returns:
        Hex string like "#3941c8" or "#3941c880"
    """
    channels = list(color_to_rgb_bytes(color))
    if with_alpha:
        channels.append(to_byte(color.A))
    return "#" + "".join(format_hex_byte(c) for c in channels)


def brightness(color: Color) -> int:
    """
    W3C perceived brightness (0-255) of the 8-bit RGB channels.

    ((R × 299) + (G × 587) + (B × 114)) / 1000, rounded half up.
    """
    r, g, b = color_to_rgb_bytes(color)
    return int(math.floor((r * 299 + g * 587 + b * 114) / 1000 + 0.5))


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Args:
        srgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with (H degrees [0, 360), S %, L %).
        When max == min the color is achromatic and H = S = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    cmax = np.max(srgb, axis=-1)
    cmin = np.min(srgb, axis=-1)
    delta = cmax - cmin
    L = (cmax + cmin) / 2.0

    chromatic = delta > 0.0
    # Placeholder divisors for achromatic entries; their results are masked
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1.0 - np.abs(2.0 * L - 1.0)
    safe_denom = np.where(denom > 0.0, denom, 1.0)

    S = np.where(chromatic, np.clip(delta / safe_denom, 0.0, 1.0), 0.0)

    sector = np.where(
        cmax == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            cmax == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    H = np.where(chromatic, (sector * 60.0) % 360.0, 0.0)

    return np.stack([H, S * 100.0, L * 100.0], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Args:
        hsl: Array of shape (..., 3) with (H degrees, S %, L %).
            H = 360 wraps to 0.

    Returns:
        Array of shape (..., 3) with sRGB values, clipped to [0, 1]
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0] % 360.0
    S = hsl[..., 1] / 100.0
    L = hsl[..., 2] / 100.0

    C = (1.0 - np.abs(2.0 * L - 1.0)) * S
    hp = H / 60.0
    X = C * (1.0 - np.abs(hp % 2.0 - 1.0))
    m = L - C / 2.0
    zero = np.zeros_like(C)

    sector = np.floor(hp).astype(np.int64) % 6
    r1 = np.choose(sector, [C, X, zero, zero, X, C])
    g1 = np.choose(sector, [X, C, C, X, zero, zero])
    b1 = np.choose(sector, [zero, zero, X, C, C, X])

    srgb = np.stack([r1 + m, g1 + m, b1 + m], axis=-1)
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB.

    Inverse of srgb_to_linear. Not clipped: callers decide how to handle
    values outside [0, 1].
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    return np.where(
        linear_safe <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Linear RGB ↔ CIE XYZ (D65)
# =============================================================================

# Linear sRGB to XYZ, IEC 61966-2-1
_M_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_M_XYZ_TO_RGB = np.linalg.inv(_M_RGB_TO_XYZ)

# D65 reference white, 2° observer, Y normalized to 1
D65_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB (..., 3) to CIE XYZ (..., 3), Y of white = 1."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _M_RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (..., 3) to linear RGB (..., 3). May leave [0, 1]."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _M_XYZ_TO_RGB)


# =============================================================================
# CIE XYZ ↔ CIE LAB
# =============================================================================

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cube root above ε, linear segment near black."""
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE LAB relative to D65.

    Args:
        xyz: Array of shape (..., 3), white has Y = 1

    Returns:
        Array of shape (..., 3) with (L [0, 100], a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE LAB (D65) to CIE XYZ.

    Inverse of xyz_to_lab, using the same ε/κ split.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = np.where(fx3 > LAB_EPSILON, fx3, (116.0 * fx - 16.0) / LAB_KAPPA)
    yr = np.where(L > LAB_KAPPA * LAB_EPSILON, fy ** 3, L / LAB_KAPPA)
    zr = np.where(fz3 > LAB_EPSILON, fz3, (116.0 * fz - 16.0) / LAB_KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * D65_WHITE


# =============================================================================
# Convenience: sRGB ↔ LAB (full chain)
# =============================================================================


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIE LAB.

    Full chain: sRGB → Linear RGB → XYZ → LAB
    """
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb_unclipped(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """LAB → XYZ → Linear RGB → sRGB without gamut clipping."""
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE LAB to sRGB [0,1].

    Full chain: LAB → XYZ → Linear RGB → sRGB

    LAB describes colors outside the sRGB gamut. Those are clipped to
    [0, 1] per channel rather than rejected.
    """
    return np.clip(lab_to_srgb_unclipped(lab), 0.0, 1.0)


# =============================================================================
# Color record helpers
# =============================================================================


def color_to_hsl(color: Color) -> HSLColor:
    """Full-precision HSL view of a Color."""
    H, S, L = (float(v) for v in srgb_to_hsl(np.array(color.rgb)))
    return HSLColor(H=H, S=S, L=L, A=color.A)


def hsl_to_color(h: float, s: float, l: float, a: float = 1.0) -> Color:
    """Build a Color from HSL (H degrees, S and L in percent)."""
    r, g, b = (float(v) for v in hsl_to_srgb(np.array([h, s, l])))
    return Color(R=r, G=g, B=b, A=a)


def color_to_lab(color: Color) -> LabColor:
    """Full-precision CIE LAB view of a Color."""
    L, a, b = (float(v) for v in srgb_to_lab(np.array(color.rgb)))
    return LabColor(L=L, a=a, b=b, A=color.A)


def lab_to_color(L: float, a: float, b: float, alpha: float = 1.0) -> Color:
    """
    Build a Color from CIE LAB.

    Out-of-gamut results are clipped into [0, 1]; this never fails.
    """
    raw = lab_to_srgb_unclipped(np.array([L, a, b]))
    clipped = np.clip(raw, 0.0, 1.0)
    # Tolerate float noise at the gamut boundary (e.g. white at 1.0000001)
    if np.any(np.abs(raw - clipped) > 1e-6):
        logger.debug(
            "lab(%s, %s, %s) is outside sRGB gamut, clipped %s -> %s",
            L, a, b, raw.tolist(), clipped.tolist(),
        )
    red, green, blue = (float(v) for v in clipped)
    return Color(R=red, G=green, B=blue, A=alpha)
