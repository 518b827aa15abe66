# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Numeric token parsing for color channel lists.

Turns text such as ``"70% 0.15 250 / 50%"`` or ``"255, 128, 0, 0.5"`` into a
ParsedValue. Knows nothing about color semantics: units are recorded, never
interpreted.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from okshade.schema import ParsedValue, Token, Unit


_TOKEN_RE = re.compile(r"^([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+))(%|deg|rad|turn)?$", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[\s,]+")


def _split(text: str) -> list[str]:
    """Split on runs of whitespace and/or commas, dropping empties."""
    return [part for part in _SEPARATOR_RE.split(text.strip()) if part]


def parse_token(raw: str) -> Optional[Token]:
    """
    Parse a single channel token.

    Args:
        raw: Text like "50%", "-0.1", ".5turn" or "120deg"

    Returns:
        Token, or None when the text is not a number with an optional unit
    """
    m = _TOKEN_RE.match(raw.strip())
    if not m:
        return None
    value = float(m.group(1))
    # Overlong digit strings overflow to inf
    if not math.isfinite(value):
        return None
    unit = Unit(m.group(2).lower()) if m.group(2) else None
    return Token(raw=raw, value=value, unit=unit)


def parse_raw_value(text: str) -> Optional[ParsedValue]:
    """
    Parse a channel list with optional alpha.

    Accepted shapes:
        "c1 c2 c3", "c1, c2, c3", "c1 c2 c3 / a", "c1, c2, c3, a"

    Returns:
        ParsedValue with exactly three channels, or None when the text has
        more than one "/", a malformed token, the wrong channel count, or an
        alpha segment that is not exactly one token.
    """
    parts = text.split("/")
    if len(parts) > 2:
        return None

    channels: list[Token] = []
    for raw in _split(parts[0]):
        token = parse_token(raw)
        if token is None:
            return None
        channels.append(token)

    if len(channels) < 3:
        return None

    alpha: Optional[Token] = None
    has_slash_alpha = False

    if len(parts) == 2:
        has_slash_alpha = True
        alpha_raw = _split(parts[1])
        if len(alpha_raw) != 1:
            return None
        alpha = parse_token(alpha_raw[0])
        if alpha is None:
            return None
    elif len(channels) == 4:
        # Legacy comma/space form: a fourth bare channel is alpha
        alpha = channels.pop()

    if len(channels) != 3:
        return None

    return ParsedValue(
        channels=tuple(channels),
        alpha=alpha,
        has_slash_alpha=has_slash_alpha,
    )
