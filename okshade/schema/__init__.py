# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color codec.

All types in this module are immutable (frozen dataclasses or enums).
They are created per call and never shared between calls.
"""

from okshade.schema.color import (
    ColorSource,
    FormatId,
    FormatOption,
    ParsedValue,
    ResolvedColor,
    Rgba,
    SpaceId,
    Token,
    Unit,
    clamp01,
)

__all__ = [
    # Parser output
    "Unit",
    "Token",
    "ParsedValue",
    # Canonical color
    "Rgba",
    "clamp01",
    # Identifiers
    "SpaceId",
    "FormatId",
    "ColorSource",
    # Results
    "FormatOption",
    "ResolvedColor",
]
