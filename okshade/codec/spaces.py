# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Color space registry.

A closed dispatch from SpaceId to a ``ParsedValue -> Rgba`` conversion,
composed from the channel normalizers and the conversion math. Every Rgba
returned here is clamped into [0, 1].
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from okshade.codec import colorspace as cs
from okshade.codec.normalize import (
    normalize_alpha,
    normalize_fraction,
    normalize_lab_lightness,
    normalize_oklab_axis,
    normalize_oklab_lightness,
    normalize_rgb_channel,
    to_degrees,
)
from okshade.schema import ParsedValue, Rgba, SpaceId, Token


SPACE_IDS: tuple[SpaceId, ...] = tuple(SpaceId)


def is_space_id(text: str) -> bool:
    """True if ``text`` is exactly one of the space identifiers."""
    return any(space.value == text for space in SPACE_IDS)


def normalize_space_hint(hint: Optional[str]) -> Optional[SpaceId]:
    """
    Map a free-form space hint to a SpaceId.

    ``p3`` and ``displayp3`` mean ``display-p3``; anything else is lower-cased
    and looked up. Unknown hints give None.
    """
    if not hint:
        return None
    lowered = hint.lower()
    if lowered in ("p3", "displayp3"):
        return SpaceId.DISPLAY_P3
    if is_space_id(lowered):
        return SpaceId(lowered)
    return None


def _channels_to_srgb(space: SpaceId, t1: Token, t2: Token, t3: Token) -> np.ndarray:
    """Normalize three channel tokens and convert them to sRGB."""
    if space == SpaceId.OKLCH:
        lch = np.array([normalize_oklab_lightness(t1), normalize_oklab_axis(t2), to_degrees(t3)])
        return cs.oklch_to_srgb(lch)
    elif space == SpaceId.OKLAB:
        lab = np.array([normalize_oklab_lightness(t1), normalize_oklab_axis(t2), normalize_oklab_axis(t3)])
        return cs.linear_to_srgb(cs.oklab_to_linear_rgb(lab))
    elif space == SpaceId.LCH:
        # LCH chroma is read as-is, with or without %
        lch = np.array([normalize_lab_lightness(t1), t2.value, to_degrees(t3)])
        return cs.linear_to_srgb(cs.lab_to_linear_rgb(cs.lch_to_lab(lch)))
    elif space == SpaceId.LAB:
        lab = np.array([normalize_lab_lightness(t1), t2.value, t3.value])
        return cs.linear_to_srgb(cs.lab_to_linear_rgb(lab))
    elif space == SpaceId.RGB:
        return np.array([normalize_rgb_channel(t) for t in (t1, t2, t3)])
    elif space == SpaceId.HSL:
        return cs.hsl_to_srgb(np.array([to_degrees(t1), normalize_fraction(t2), normalize_fraction(t3)]))
    elif space == SpaceId.HWB:
        return cs.hwb_to_srgb(np.array([to_degrees(t1), normalize_fraction(t2), normalize_fraction(t3)]))
    elif space == SpaceId.DISPLAY_P3:
        p3 = np.array([normalize_rgb_channel(t) for t in (t1, t2, t3)])
        return cs.linear_to_srgb(cs.display_p3_to_linear_rgb(p3))
    raise ValueError(f"Unknown color space: {space!r}")


def to_rgba(space: SpaceId, parsed: ParsedValue) -> Optional[Rgba]:
    """
    Convert parsed channels read in ``space`` to a canonical Rgba.

    Args:
        space: The space the channels are expressed in
        parsed: Parser output

    Returns:
        Clamped Rgba, or None when fewer than three channels are present.

    Raises:
        ValueError: If ``space`` is not a SpaceId (a caller error).
    """
    if not isinstance(space, SpaceId):
        raise ValueError(f"Unknown color space: {space!r}")
    if len(parsed.channels) < 3:
        return None

    t1, t2, t3 = parsed.channels[:3]
    rgb = _channels_to_srgb(space, t1, t2, t3)
    return Rgba.from_array(rgb, alpha=normalize_alpha(parsed.alpha))
