# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Decoders for the explicit textual color encodings.

- Hex: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
- Functions: ``oklch(...)``, ``oklab(...)``, ``lch(...)``, ``lab(...)``,
  ``rgb(...)``, ``hsl(...)``, ``hwb(...)`` and ``color(display-p3 ...)``

Decoders return None on anything they do not recognize so callers can fall
through to raw-triplet handling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from okshade.codec.tokens import parse_raw_value
from okshade.schema import ParsedValue, Rgba, SpaceId


_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,8})$")
_FUNCTION_RE = re.compile(r"^(oklch|oklab|lch|lab|rgb|hsl|hwb)\((.+)\)$", re.IGNORECASE | re.DOTALL)
_DISPLAY_P3_RE = re.compile(r"^color\(\s*display-p3\s+(.+)\)$", re.IGNORECASE | re.DOTALL)
_SPACE_HINT_RE = re.compile(r"@space\s+([a-z0-9-]+)\b", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class FunctionColor:
    """A recognized ``space(...)`` expression and its parsed body."""

    space: SpaceId
    parsed: ParsedValue


def parse_hex_color(text: str) -> Optional[Rgba]:
    """
    Decode a hex color.

    Short forms are nibble-doubled (``#f80`` → ``#ff8800``). Bytes map
    directly to sRGB channel values; no transfer curve is applied.

    Returns:
        Rgba, or None for anything other than 3, 4, 6 or 8 hex digits.
    """
    m = _HEX_RE.match(text.strip())
    if not m:
        return None
    digits = m.group(1)

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    elif len(digits) not in (6, 8):
        return None

    values = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    if len(values) == 3:
        values.append(1.0)
    r, g, b, a = values
    return Rgba(r=r, g=g, b=b, a=a)


def _parse_simple_function(text: str) -> Optional[FunctionColor]:
    m = _FUNCTION_RE.match(text)
    if not m:
        return None
    body = m.group(2).strip()
    if not body:
        return None
    parsed = parse_raw_value(body)
    if parsed is None:
        return None
    return FunctionColor(space=SpaceId(m.group(1).lower()), parsed=parsed)


def _parse_display_p3(text: str) -> Optional[FunctionColor]:
    m = _DISPLAY_P3_RE.match(text)
    if not m:
        return None
    body = m.group(1).strip()
    if not body:
        return None
    parsed = parse_raw_value(body)
    if parsed is None:
        return None
    return FunctionColor(space=SpaceId.DISPLAY_P3, parsed=parsed)


def parse_color_function(text: str) -> Optional[FunctionColor]:
    """
    Decode a CSS color function.

    Function names and the ``display-p3`` keyword are case-insensitive.

    Returns:
        FunctionColor, or None for unknown names and unparsable bodies.
    """
    trimmed = text.strip()
    return _parse_simple_function(trimmed) or _parse_display_p3(trimmed)


def extract_space_hint(line: str) -> Optional[str]:
    """
    Read an ``@space <name>`` annotation from a line of text.

    The name is lower-cased but not validated; pass it through
    ``normalize_space_hint`` to get a SpaceId.
    """
    m = _SPACE_HINT_RE.search(line)
    return m.group(1).lower() if m else None
