# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Hub: gamma-encoded sRGB ↔ linear RGB, with every other space reached from
linear RGB (OKLab, CIE XYZ/Lab, Display P3) or from sRGB directly (HSL, HWB).

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CIE Lab: D65 white, ε = 216/24389, κ = 24389/27
- Display P3: P3 primaries with the sRGB transfer curve

All functions take and return arrays of shape (..., 3) and are pure NumPy.
Angles are in degrees.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


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
    # Negative inputs take the linear branch, so the power never sees them
    safe = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((safe + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Output is clamped to [0, 1].
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
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Published inverses (not np.linalg.inv) so outputs match the reference
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (real-valued for out-of-gamut negatives)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values (not clamped)
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cube-rooted)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Linear RGB ↔ CIE XYZ ↔ CIE Lab (D65)
# =============================================================================

_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_SRGB = np.array([
    [3.24096994, -1.53738318, -0.49861076],
    [-0.96924364, 1.87596750, 0.04155506],
    [0.05563008, -0.20397696, 1.05697151],
], dtype=np.float64)

D65_WHITE = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to CIE XYZ (D65)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65) to linear sRGB."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_SRGB)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE Lab.

    Uses the CIE piecewise cube root: values above ε take the cube root,
    values below use the linear segment (κ·t + 16) / 116.
    """
    ratios = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        ratios > LAB_EPSILON,
        np.cbrt(ratios),
        (LAB_KAPPA * ratios + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE Lab to CIE XYZ. Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3

    xr = np.where(fx3 > LAB_EPSILON, fx3, (116.0 * fx - 16.0) / LAB_KAPPA)
    yr = np.where(L > LAB_KAPPA * LAB_EPSILON, fy ** 3, L / LAB_KAPPA)
    zr = np.where(fz3 > LAB_EPSILON, fz3, (116.0 * fz - 16.0) / LAB_KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * D65_WHITE


def linear_rgb_to_lab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to CIE Lab (L in 0-100)."""
    return xyz_to_lab(linear_rgb_to_xyz(rgb))


def lab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE Lab to linear sRGB (not clamped)."""
    return xyz_to_linear_rgb(lab_to_xyz(lab))


# =============================================================================
# Cartesian ↔ Polar (OKLab ↔ OKLCH, Lab ↔ LCH)
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert Lab-family coordinates to their cylindrical form.

    Works for both OKLab → OKLCH and CIE Lab → LCH.

    Returns:
        Array of shape (..., 3) with (L, C, H); H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert cylindrical (L, C, H) coordinates back to (L, a, b).

    Works for both OKLCH → OKLab and LCH → CIE Lab. H is in degrees.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ HSL / HWB
# =============================================================================


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Args:
        hsl: Array of shape (..., 3) with (H degrees, S [0,1], L [0,1])

    Returns:
        Array of shape (..., 3) with sRGB values, clamped to [0, 1]
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    h = np.mod(hsl[..., 0], 360.0)
    s = hsl[..., 1]
    l = hsl[..., 2]

    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0
    zero = np.zeros_like(c)

    # Six hue sectors of 60 degrees each
    sectors = [h < 60.0, h < 120.0, h < 180.0, h < 240.0, h < 300.0]
    r = np.select(sectors, [c, x, zero, zero, x], default=c)
    g = np.select(sectors, [x, c, c, x, zero], default=zero)
    b = np.select(sectors, [zero, zero, x, c, c], default=x)

    return np.clip(np.stack([r + m, g + m, b + m], axis=-1), 0.0, 1.0)


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with (H degrees [0, 360), S, L).
        Achromatic colors get H = 0 and S = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    cmax = np.max(srgb, axis=-1)
    cmin = np.min(srgb, axis=-1)
    delta = cmax - cmin
    l = (cmax + cmin) / 2.0

    chromatic = delta != 0
    delta_safe = np.where(chromatic, delta, 1.0)
    denom = 1.0 - np.abs(2.0 * l - 1.0)
    denom_safe = np.where(chromatic & (denom != 0), denom, 1.0)
    s = np.where(chromatic, delta / denom_safe, 0.0)

    h = np.select(
        [cmax == r, cmax == g],
        [np.mod((g - b) / delta_safe, 6.0), (b - r) / delta_safe + 2.0],
        default=(r - g) / delta_safe + 4.0,
    ) * 60.0
    h = np.where(chromatic, np.mod(h, 360.0), 0.0)

    return np.stack([h, s, l], axis=-1)


def hwb_to_srgb(hwb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HWB to sRGB [0,1].

    When whiteness + blackness >= 1 the result is the gray w / (w + b).
    """
    hwb = np.asarray(hwb, dtype=np.float64)
    h = np.asarray(hwb[..., 0])
    w = np.asarray(hwb[..., 1])
    bk = np.asarray(hwb[..., 2])

    total = w + bk
    gray = w / np.where(total > 0, total, 1.0)

    pure = hsl_to_srgb(np.stack([h, np.ones_like(h), np.full_like(h, 0.5)], axis=-1))
    tinted = pure * (1.0 - w - bk)[..., np.newaxis] + w[..., np.newaxis]

    rgb = np.where((total >= 1.0)[..., np.newaxis], gray[..., np.newaxis], tinted)
    return np.clip(rgb, 0.0, 1.0)


def srgb_to_hwb(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB [0,1] to HWB (H degrees, whiteness, blackness)."""
    srgb = np.asarray(srgb, dtype=np.float64)
    h = srgb_to_hsl(srgb)[..., 0]
    w = np.min(srgb, axis=-1)
    bk = 1.0 - np.max(srgb, axis=-1)
    return np.stack([h, w, bk], axis=-1)


# =============================================================================
# Display P3 ↔ Linear sRGB (via CIE XYZ)
# =============================================================================

_P3_TO_XYZ = np.array([
    [0.48657095, 0.26566769, 0.19821729],
    [0.22897456, 0.69173852, 0.07928691],
    [0.00000000, 0.04511338, 1.04394437],
], dtype=np.float64)

_XYZ_TO_P3 = np.array([
    [2.493496911941425, -0.931383617919124, -0.402710784450717],
    [-0.829488969561574, 1.762664060318346, 0.023624685841943],
    [0.035845830243784, -0.076172389268041, 0.956884524007687],
], dtype=np.float64)


def display_p3_to_linear_rgb(p3: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded Display P3 [0,1] to linear sRGB.

    P3 shares the sRGB transfer curve; only the primaries differ.
    """
    p3_linear = srgb_to_linear(p3)
    xyz = np.einsum('...j,ij->...i', p3_linear, _P3_TO_XYZ)
    return xyz_to_linear_rgb(xyz)


def linear_rgb_to_display_p3(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to linear Display P3 (not gamma-encoded)."""
    xyz = linear_rgb_to_xyz(rgb)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_P3)


def srgb_to_display_p3(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert sRGB [0,1] to gamma-encoded Display P3 [0,1], clamped."""
    p3_linear = linear_rgb_to_display_p3(srgb_to_linear(srgb))
    return linear_to_srgb(p3_linear)


# =============================================================================
# Convenience: sRGB ↔ OKLCH / LCH (full chain)
# =============================================================================


def srgb_to_oklab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Full chain: sRGB → Linear RGB → OKLab."""
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB, clipped to [0, 1].
    """
    return linear_to_srgb(oklab_to_linear_rgb(lch_to_lab(lch)))


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Full chain: sRGB → Linear RGB → XYZ → CIE Lab."""
    return linear_rgb_to_lab(srgb_to_linear(srgb))
