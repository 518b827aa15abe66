# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Okshade -- CSS color-space codec.

Parses loosely formatted color text (hex, CSS color functions, bare numeric
triplets), converts between OKLCH, OKLab, LCH, Lab, sRGB, HSL, HWB and
Display P3, and serializes colors back to stable text.

Quick start::

    from okshade import resolve_color, format_color, FormatId

    c = resolve_color("oklch(70% 0.15 250)")
    format_color(c.rgba, FormatId.HEX6)    # "#rrggbb"
    format_color(c.rgba, FormatId.HSL)     # "h s% l%" body, no function syntax
"""

from __future__ import annotations

__version__ = "1.0.0"

from okshade.schema import (
    ColorSource,
    FormatId,
    FormatOption,
    ResolvedColor,
    Rgba,
    SpaceId,
)
from okshade.config import ResolverConfig, VariableRule
from okshade.codec import convert_color, resolve_color
from okshade.format import format_color, get_format_options, wrap_css_function

__all__ = [
    # Core API
    "resolve_color",
    "convert_color",
    "format_color",
    "get_format_options",
    "wrap_css_function",
    # Configuration
    "ResolverConfig",
    "VariableRule",
    # Types (commonly needed)
    "Rgba",
    "SpaceId",
    "FormatId",
    "FormatOption",
    "ColorSource",
    "ResolvedColor",
    # Version
    "__version__",
]
