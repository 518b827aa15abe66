# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Space inference for bare numeric triplets.

Used only when text has three bare channels and nothing names the space.
The same triplet can be valid in several spaces, so the procedure is
conservative: it answers only when the value ranges and units point one way,
and returns None otherwise.

Decision procedure (first match wins):
1. Any negative channel → OKLab if every |value| <= 1 and L is a bare
   fraction, else Lab.
2. Hue first with two percentages, or hue first with two bare fractions →
   the caller's HSL/HWB preference. The two are indistinguishable from
   numbers alone; no further guess is made.
3. Hue last: % L with bare C → OKLCH; bare fractional L and C → OKLCH;
   bare C > 1 → LCH.
4. RGB-looking values (a % or a bare value in (1, 255], no angles) → RGB.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from okshade.config import AMBIGUOUS_HUE_SPACES, VariableRule
from okshade.schema import ParsedValue, SpaceId, Token


logger = logging.getLogger(__name__)

# Bare numbers at or below this are read as fractions, never as a hue
HUE_MIN_MAGNITUDE = 1.5


def resolve_space_from_rules(
    property_name: str,
    rules: Iterable[VariableRule],
) -> Optional[SpaceId]:
    """Space of the first rule whose pattern matches ``property_name``."""
    for rule in rules:
        if rule.matches(property_name):
            return rule.space
    return None


def looks_like_hue(token: Token) -> bool:
    """True for angle units, or a bare number in [0, 360] with magnitude > 1.5."""
    if token.is_angle:
        return True
    if token.is_percent:
        return False
    return 0 <= token.value <= 360 and abs(token.value) > HUE_MIN_MAGNITUDE


def looks_like_rgb(tokens: Iterable[Token]) -> bool:
    tokens = tuple(tokens)
    if any(t.is_angle for t in tokens):
        return False
    if any(t.is_percent for t in tokens):
        return True
    return any(1 < t.value <= 255 for t in tokens)


def detect_space(
    parsed: ParsedValue,
    ambiguous_hue_space: SpaceId = SpaceId.HSL,
) -> Optional[SpaceId]:
    """
    Infer the space of a bare triplet.

    Args:
        parsed: Parser output
        ambiguous_hue_space: SpaceId.HSL or SpaceId.HWB, returned for
            hue-first triplets that fit both

    Returns:
        The inferred SpaceId, or None when undetermined.

    Raises:
        ValueError: If ``ambiguous_hue_space`` is neither HSL nor HWB.
    """
    if ambiguous_hue_space not in AMBIGUOUS_HUE_SPACES:
        raise ValueError(f"ambiguous_hue_space must be hsl or hwb, got {ambiguous_hue_space!r}")
    if len(parsed.channels) < 3:
        return None

    t1, t2, t3 = parsed.channels[:3]
    channels = (t1, t2, t3)

    if any(t.value < 0 for t in channels):
        small_range = all(abs(t.value) <= 1 for t in channels)
        if small_range and not t1.is_percent and t1.value <= 1:
            return SpaceId.OKLAB
        return SpaceId.LAB

    hue_first = looks_like_hue(t1)
    hue_last = looks_like_hue(t3)

    if hue_first and t2.is_percent and t3.is_percent:
        return ambiguous_hue_space
    if hue_first and not t2.is_percent and not t3.is_percent and t2.value <= 1 and t3.value <= 1:
        return ambiguous_hue_space

    if hue_last and t1.is_percent and not t2.is_percent:
        return SpaceId.OKLCH
    if hue_last and not t1.is_percent and t1.value <= 1 and t2.value <= 1:
        return SpaceId.OKLCH
    if hue_last and not t2.is_percent and t2.value > 1:
        return SpaceId.LCH

    if looks_like_rgb(channels):
        return SpaceId.RGB

    logger.debug("No space inferred for %s", " ".join(t.raw for t in channels))
    return None
