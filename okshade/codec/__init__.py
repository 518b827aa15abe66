# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Codec core for okshade.

Text → tokens → space conversion → canonical Rgba. All operations are pure
functions and safe to call from any number of threads.
"""

from okshade.codec.decode import (
    FunctionColor,
    extract_space_hint,
    parse_color_function,
    parse_hex_color,
)
from okshade.codec.detect import detect_space, resolve_space_from_rules
from okshade.codec.spaces import is_space_id, normalize_space_hint, to_rgba
from okshade.codec.tokens import parse_raw_value, parse_token
from okshade.codec.variables import CustomProperty, ResolvedValue, resolve_var
from okshade.codec.resolve import conversion_options, convert_color, resolve_color

__all__ = [
    # Parsing
    "parse_token",
    "parse_raw_value",
    "parse_hex_color",
    "parse_color_function",
    "FunctionColor",
    "extract_space_hint",
    # Spaces
    "to_rgba",
    "is_space_id",
    "normalize_space_hint",
    "detect_space",
    "resolve_space_from_rules",
    # Custom properties
    "CustomProperty",
    "ResolvedValue",
    "resolve_var",
    # Resolution
    "resolve_color",
    "convert_color",
    "conversion_options",
]
