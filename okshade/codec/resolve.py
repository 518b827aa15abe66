# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Color resolution: text value in, canonical color out.

Pipeline for one value:
    var() substitution → hex → color function → raw triplet

A raw triplet's space is the first of: explicit space hint, first matching
property-name rule, heuristic detection (when enabled), configured default.

Nothing here raises on malformed text; unrecognized values give None.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from okshade.codec.decode import parse_color_function, parse_hex_color
from okshade.codec.detect import detect_space, resolve_space_from_rules
from okshade.codec.spaces import normalize_space_hint, to_rgba
from okshade.codec.tokens import parse_raw_value
from okshade.codec.variables import (
    DEFAULT_VAR_RESOLUTION_DEPTH,
    CustomProperty,
    resolve_var,
)
from okshade.config import ResolverConfig
from okshade.format.css import (
    format_color,
    format_function_label,
    get_format_options,
    wrap_css_function,
)
from okshade.schema import ColorSource, FormatId, FormatOption, ResolvedColor


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ResolverConfig()


def resolve_color(
    text: str,
    config: Optional[ResolverConfig] = None,
    *,
    property_name: str = "",
    space_hint: Optional[str] = None,
    custom_properties: Optional[Mapping[str, CustomProperty]] = None,
) -> Optional[ResolvedColor]:
    """
    Recognize a color in a text value.

    Args:
        text: The value text (e.g. "#ff8800", "oklch(70% 0.15 250)", "120 50% 50%")
        config: Resolution settings; defaults to ResolverConfig()
        property_name: Property the value belongs to, for variable rules
        space_hint: Explicit space hint such as "p3" or "oklch"
        custom_properties: Custom properties available to var()

    Returns:
        ResolvedColor, or None when the text is not a color.
    """
    config = config or DEFAULT_CONFIG

    resolved = resolve_var(
        text,
        custom_properties or {},
        property_name=property_name,
        space_hint=space_hint,
        max_depth=DEFAULT_VAR_RESOLUTION_DEPTH,
    )
    if resolved is None:
        return None
    value = resolved.value_text
    if resolved.via_var:
        logger.debug("var() substitution: %r -> %r", text, value)

    hex_color = parse_hex_color(value)
    if hex_color is not None:
        return ResolvedColor(rgba=hex_color, source=ColorSource.HEX, via_var=resolved.via_var)

    function_color = parse_color_function(value)
    if function_color is not None:
        rgba = to_rgba(function_color.space, function_color.parsed)
        if rgba is None:
            return None
        return ResolvedColor(
            rgba=rgba,
            source=ColorSource.FUNCTION,
            space=function_color.space,
            via_var=resolved.via_var,
        )

    parsed = parse_raw_value(value)
    if parsed is None:
        return None

    space = normalize_space_hint(resolved.space_hint)
    if space is None:
        space = resolve_space_from_rules(resolved.property_name, config.variable_rules)
    if space is None and config.enable_heuristics:
        space = detect_space(parsed, config.ambiguous_hue_space)
    if space is None:
        logger.debug("Falling back to default space %s for %r", config.default_space.value, value)
        space = config.default_space

    rgba = to_rgba(space, parsed)
    if rgba is None:
        return None
    return ResolvedColor(rgba=rgba, source=ColorSource.RAW, space=space, via_var=resolved.via_var)


def convert_color(
    text: str,
    target: FormatId,
    config: Optional[ResolverConfig] = None,
    **context,
) -> Optional[str]:
    """
    Resolve a value and re-serialize it in ``target`` format.

    Function input gives function output (``hsl(...)`` → ``oklch(...)``);
    hex and raw input give bare output.

    Args:
        text: The value text
        target: Output format
        config: Resolution settings
        **context: property_name, space_hint, custom_properties (see resolve_color)

    Returns:
        The converted text, or None when the input is not a color.
    """
    resolved = resolve_color(text, config, **context)
    if resolved is None:
        return None
    value = format_color(resolved.rgba, target)
    if resolved.source is ColorSource.FUNCTION:
        return wrap_css_function(target, value)
    return value


def conversion_options(resolved: ResolvedColor) -> list[FormatOption]:
    """
    Format choices for a resolved color.

    For function sources, values are wrapped in function syntax and labels
    are marked " (function)".
    """
    options = get_format_options(resolved.rgba)
    if resolved.source is not ColorSource.FUNCTION:
        return options
    return [
        FormatOption(
            id=option.id,
            label=format_function_label(option.label),
            value=wrap_css_function(option.id, option.value),
        )
        for option in options
    ]
