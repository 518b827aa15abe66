# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Per-channel normalization rules.

Free-form color text mixes modern fractional syntax (``0.7``) with legacy
0-100 and 0-255 scales written without a unit (``70``, ``200``). Each rule
maps one token into the canonical numeric domain of its channel.

Rules by channel:
    hue               deg/unitless as-is, rad ×180/π, turn ×360, % ×3.6
    OKLab/OKLCH L     %/100; unitless > 1 → /100
    OKLab a,b / C     %/100; otherwise as-is
    CIE Lab/LCH L     % as-is (0-100 scale); unitless <= 1 → ×100
    RGB / P3 channel  %/100; unitless > 1 → /255; clamped to [0, 1]
    HSL/HWB S,L,W,B   %/100; unitless > 1 → /100; clamped to [0, 1]
    alpha             %/100; unitless in (1, 100] → /100; clamped; absent → 1
"""

from __future__ import annotations

import math
from typing import Optional

from okshade.schema import Token, Unit, clamp01


def to_degrees(token: Token) -> float:
    """Hue in degrees."""
    if token.unit is Unit.RAD:
        return token.value * 180.0 / math.pi
    if token.unit is Unit.TURN:
        return token.value * 360.0
    if token.unit is Unit.PERCENT:
        return token.value * 3.6
    return token.value


def normalize_oklab_lightness(token: Token) -> float:
    """OKLab / OKLCH lightness in [0, 1] scale (not clamped)."""
    if token.is_percent or token.value > 1:
        return token.value / 100.0
    return token.value


def normalize_oklab_axis(token: Token) -> float:
    """OKLab a/b and OKLCH chroma. No implicit rescale of bare numbers."""
    if token.is_percent:
        return token.value / 100.0
    return token.value


def normalize_lab_lightness(token: Token) -> float:
    """CIE Lab / LCH lightness in 0-100 scale (not clamped)."""
    if token.is_percent:
        return token.value
    if token.value <= 1:
        return token.value * 100.0
    return token.value


def normalize_rgb_channel(token: Token) -> float:
    """sRGB or Display P3 channel in [0, 1]."""
    if token.is_percent:
        return clamp01(token.value / 100.0)
    if token.value > 1:
        return clamp01(token.value / 255.0)
    return clamp01(token.value)


def normalize_fraction(token: Token) -> float:
    """HSL saturation/lightness or HWB whiteness/blackness in [0, 1]."""
    if token.is_percent or token.value > 1:
        return clamp01(token.value / 100.0)
    return clamp01(token.value)


def normalize_alpha(token: Optional[Token]) -> float:
    """Alpha in [0, 1]. A missing token means fully opaque."""
    if token is None:
        return 1.0
    if token.is_percent or 1 < token.value <= 100:
        return clamp01(token.value / 100.0)
    return clamp01(token.value)
