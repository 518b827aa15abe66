# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Serialization of canonical colors to CSS-style text.

Formatting never modifies the color; it only chooses precision and notation.
"""

from okshade.format.css import (
    ALPHA_VISIBLE_BELOW,
    format_color,
    format_function_label,
    format_number,
    get_format_options,
    wrap_css_function,
)

__all__ = [
    "format_color",
    "format_number",
    "get_format_options",
    "wrap_css_function",
    "format_function_label",
    "ALPHA_VISIBLE_BELOW",
]
