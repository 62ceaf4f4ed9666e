# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    hex → sRGB [0,1] → HSV / HSL
    hex → sRGB [0,1] → Linear RGB → XYZ (D65) → CIE Lab → HCL

HCL is the cylindrical form of CIE Lab: hue = atan2(b, a) in [0, 360),
chroma = sqrt(a² + b²), lightness = L.

Every function is total: malformed hex degrades to black instead of
raising. Full floating precision is kept; rounding is the caller's choice
(get_color_properties rounds for display).

Matrix stages are pure NumPy and accept arrays of shape (..., 3).
"""

from __future__ import annotations

import math
import re

import numpy as np
from loguru import logger
from numpy.typing import ArrayLike, NDArray

from chromaseason.measure.numeric import round_half_up
from chromaseason.schema import ColorProperties


RGB = tuple[float, float, float]

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


# =============================================================================
# Hex ↔ sRGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color string into sRGB components in [0, 1].

    Accepts "#C68E6F" or "c68e6f". Anything else (short form, wrong
    length, non-hex digits, non-string) returns black (0, 0, 0).
    """
    match = _HEX_RE.match(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        logger.debug(f"Malformed hex {hex_color!r}, using black")
        return 0.0, 0.0, 0.0
    return tuple(int(group, 16) / 255 for group in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format sRGB components in [0, 1] as a hex string like "#C68E6F".

    Components outside [0, 1] are clipped.
    """
    def channel(value: float) -> int:
        return min(255, max(0, round_half_up(value * 255)))

    return f"#{channel(r):02X}{channel(g):02X}{channel(b):02X}"


# =============================================================================
# sRGB ↔ HSV / HSL
# =============================================================================


def _hue_degrees(r: float, g: float, b: float, high: float, delta: float) -> float:
    """Hexcone hue in degrees [0, 360) shared by HSV and HSL."""
    if delta == 0:
        return 0.0
    if high == r:
        h = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif high == g:
        h = ((b - r) / delta + 2) / 6
    else:
        h = ((r - g) / delta + 4) / 6
    return h * 360


def rgb_to_hsv(r: float, g: float, b: float) -> RGB:
    """
    Convert sRGB [0,1] to HSV.

    Returns:
        (h, s, v) with h in degrees [0, 360) and s, v in percent [0, 100]
    """
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    s = 0.0 if high == 0 else delta / high
    h = _hue_degrees(r, g, b, high, delta)
    return h, s * 100, high * 100


def rgb_to_hsl(r: float, g: float, b: float) -> RGB:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        (h, s, l) with h in degrees [0, 360) and s, l in percent [0, 100]
    """
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    l = (high + low) / 2

    if delta == 0:
        return 0.0, 0.0, l * 100

    s = delta / (2 - high - low) if l > 0.5 else delta / (high + low)
    h = _hue_degrees(r, g, b, high, delta)
    return h, s * 100, l * 100


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV (h in degrees, s and v in percent) to sRGB [0,1].
    """
    s_norm = s / 100
    v_norm = v / 100
    sector = h / 360 * 6

    i = math.floor(sector)
    f = sector - i
    p = v_norm * (1 - s_norm)
    q = v_norm * (1 - f * s_norm)
    t = v_norm * (1 - (1 - f) * s_norm)

    return [
        (v_norm, t, p),
        (q, v_norm, p),
        (p, v_norm, t),
        (p, q, v_norm),
        (t, p, v_norm),
        (v_norm, p, q),
    ][i % 6]


def hsv_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_hsv(hex_color: str) -> RGB:
    """Precise (unrounded) HSV of a hex color."""
    return rgb_to_hsv(*hex_to_rgb(hex_color))


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
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
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Output is clipped to the sRGB gamut.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ ↔ Lab (D65)
# =============================================================================

# sRGB primaries, D65 white point
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)

_D65_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

# CIE constants
_EPSILON = 0.008856
_KAPPA = 903.3


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """Linear RGB (..., 3) → CIE XYZ (..., 3)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """CIE XYZ (..., 3) → linear RGB (..., 3), unclipped."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE Lab relative to the D65 white point.

    Returns:
        Array of shape (..., 3) with (L, a, b); L in [0, 100]
    """
    ratios = np.asarray(xyz, dtype=np.float64) / _D65_WHITE

    f = np.where(
        ratios > _EPSILON,
        np.cbrt(ratios),
        (_KAPPA * ratios + 16) / 116,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: ArrayLike) -> NDArray[np.float64]:
    """Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = np.where(fx ** 3 > _EPSILON, fx ** 3, (116 * fx - 16) / _KAPPA)
    yr = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    zr = np.where(fz ** 3 > _EPSILON, fz ** 3, (116 * fz - 16) / _KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * _D65_WHITE


def rgb_to_lab(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB [0,1] to CIE Lab.

    Full chain: sRGB → Linear RGB → XYZ → Lab

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """CIE Lab → sRGB [0,1], clipped to gamut."""
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


# =============================================================================
# Lab ↔ HCL
# =============================================================================


def lab_to_hcl(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE Lab to HCL (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with (L, a, b)

    Returns:
        Array of shape (..., 3) with (H, C, L); H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    C = np.sqrt(a ** 2 + b ** 2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    return np.stack([H, C, L], axis=-1)


def hcl_to_lab(hcl: ArrayLike) -> NDArray[np.float64]:
    """Convert HCL (H in degrees) to CIE Lab (L, a, b)."""
    hcl = np.asarray(hcl, dtype=np.float64)
    H_rad = np.radians(hcl[..., 0])
    C = hcl[..., 1]
    L = hcl[..., 2]
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def hex_to_hcl(hex_color: str) -> RGB:
    """
    Precise (unrounded) HCL of a hex color.

    Returns:
        (h, c, l) as Python floats
    """
    hcl = lab_to_hcl(rgb_to_lab(hex_to_rgb(hex_color)))
    return float(hcl[0]), float(hcl[1]), float(hcl[2])


def hcl_to_hex(h: float, c: float, l: float) -> str:
    """HCL → hex, gamut-clipped."""
    srgb = lab_to_rgb(hcl_to_lab([h, c, l]))
    return rgb_to_hex(*(float(v) for v in srgb))


# =============================================================================
# Scales
# =============================================================================


def generate_hue_scale(chroma: float, lightness: float, steps: int = 12) -> list[str]:
    """Hex colors around the hue circle at fixed chroma and lightness."""
    return [hcl_to_hex(i / steps * 360, chroma, lightness) for i in range(steps)]


def generate_chroma_scale(
    hue: float,
    lightness: float,
    max_chroma: float = 100,
    steps: int = 10,
) -> list[str]:
    """Hex colors from gray (chroma 0) to max_chroma, inclusive, at fixed hue."""
    return [hcl_to_hex(hue, i / steps * max_chroma, lightness) for i in range(steps + 1)]


# =============================================================================
# Display properties
# =============================================================================


def get_color_properties(hex_color: str) -> ColorProperties:
    """
    Rounded perceptual properties of a hex color for display.

    Hue, chroma and lightness come from HCL; saturation and value from HSV.
    """
    r, g, b = hex_to_rgb(hex_color)
    _, s, v = rgb_to_hsv(r, g, b)
    h, c, l = (float(x) for x in lab_to_hcl(rgb_to_lab((r, g, b))))

    return ColorProperties(
        hue=round_half_up(h) % 360,
        saturation=round_half_up(s),
        value=round_half_up(v),
        chroma=round_half_up(c),
        lightness=round_half_up(l),
    )
