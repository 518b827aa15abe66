# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Canonical text serialization of colors.

Every format produces the body of its CSS notation (``70% 0.15 250``);
``wrap_css_function`` adds the function syntax when wanted. Output is stable:
formatting a value, parsing it back and formatting again gives the same text.

Precision per format:
    rgb           integers 0-255
    rgb-percent   1 decimal percentages
    hsl, hwb      hue 1 decimal, percentages 1 decimal
    oklab         L% 2 decimals, a/b 4 decimals
    oklch         L% 2 decimals, C 4 decimals, hue 1 decimal
    lab           L/a/b 2 decimals
    lch           L/C 2 decimals, hue 1 decimal
    display-p3    3 decimals
    hex, hex6, hex8  lower-case bytes

Trailing zeros are trimmed. Alpha is written as `` / 0.5`` only below
ALPHA_VISIBLE_BELOW, so float noise near 1 never prints an alpha term.
"""

from __future__ import annotations

import math

import numpy as np

from okshade.codec import colorspace as cs
from okshade.schema import FormatId, FormatOption, Rgba, clamp01


ALPHA_VISIBLE_BELOW = 0.999

FORMAT_LABELS: dict[FormatId, str] = {
    FormatId.OKLCH: "OKLCH",
    FormatId.OKLAB: "OKLab",
    FormatId.LCH: "LCH",
    FormatId.LAB: "Lab",
    FormatId.RGB: "RGB 0-255",
    FormatId.RGB_PERCENT: "RGB %",
    FormatId.HSL: "HSL",
    FormatId.HWB: "HWB",
    FormatId.DISPLAY_P3: "Display P3",
    FormatId.HEX: "Hex",
    FormatId.HEX6: "Hex #rrggbb",
    FormatId.HEX8: "Hex #rrggbbaa",
}

# Offered choices; the auto hex form is left out since hex6/hex8 cover it
OPTION_FORMATS: tuple[FormatId, ...] = (
    FormatId.OKLCH,
    FormatId.OKLAB,
    FormatId.LCH,
    FormatId.LAB,
    FormatId.RGB,
    FormatId.RGB_PERCENT,
    FormatId.HSL,
    FormatId.HWB,
    FormatId.DISPLAY_P3,
    FormatId.HEX6,
    FormatId.HEX8,
)

FUNCTION_LABEL_SUFFIX = " (function)"


# =============================================================================
# Numbers
# =============================================================================


def _round_half_away(value: float, decimals: int) -> float:
    factor = 10 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def format_number(value: float, decimals: int) -> str:
    """
    Round to ``decimals`` places and trim trailing zeros.

    Examples: (0.5, 3) → "0.5", (120.0, 1) → "120", (-0.00001, 4) → "0"
    """
    rounded = _round_half_away(float(value), decimals)
    if rounded == 0:
        rounded = 0.0  # no "-0"
    text = f"{rounded:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_percent(value: float, decimals: int) -> str:
    return f"{format_number(value, decimals)}%"


def has_alpha(alpha: float) -> bool:
    return alpha < ALPHA_VISIBLE_BELOW


def format_alpha(alpha: float) -> str:
    """The `` / a`` suffix, or an empty string for (near-)opaque colors."""
    if not has_alpha(alpha):
        return ""
    return f" / {format_number(clamp01(alpha), 3)}"


def _to_byte(value: float) -> int:
    return int(min(255.0, max(0.0, _round_half_away(value * 255.0, 0))))


# =============================================================================
# Per-format Serializers
# =============================================================================


def _format_hex(rgba: Rgba, include_alpha: bool) -> str:
    channels = [rgba.r, rgba.g, rgba.b] + ([rgba.a] if include_alpha else [])
    return "#" + "".join(f"{_to_byte(v):02x}" for v in channels)


def _format_rgb(rgba: Rgba) -> str:
    r, g, b = (_to_byte(v) for v in (rgba.r, rgba.g, rgba.b))
    return f"{r} {g} {b}{format_alpha(rgba.a)}"


def _format_rgb_percent(rgba: Rgba) -> str:
    r, g, b = (format_percent(clamp01(v) * 100.0, 1) for v in (rgba.r, rgba.g, rgba.b))
    return f"{r} {g} {b}{format_alpha(rgba.a)}"


def _format_hue_triplet(hxx: np.ndarray, alpha: float) -> str:
    h, x1, x2 = (float(v) for v in hxx)
    return (
        f"{format_number(h, 1)} {format_percent(x1 * 100.0, 1)} "
        f"{format_percent(x2 * 100.0, 1)}{format_alpha(alpha)}"
    )


def _format_oklab(rgba: Rgba) -> str:
    L, a, b = (float(v) for v in cs.srgb_to_oklab(rgba.as_array()))
    return (
        f"{format_percent(L * 100.0, 2)} {format_number(a, 4)} "
        f"{format_number(b, 4)}{format_alpha(rgba.a)}"
    )


def _format_oklch(rgba: Rgba) -> str:
    L, C, H = (float(v) for v in cs.lab_to_lch(cs.srgb_to_oklab(rgba.as_array())))
    return (
        f"{format_percent(L * 100.0, 2)} {format_number(C, 4)} "
        f"{format_number(H, 1)}{format_alpha(rgba.a)}"
    )


def _format_lab(rgba: Rgba) -> str:
    L, a, b = (float(v) for v in cs.srgb_to_lab(rgba.as_array()))
    return f"{format_number(L, 2)} {format_number(a, 2)} {format_number(b, 2)}{format_alpha(rgba.a)}"


def _format_lch(rgba: Rgba) -> str:
    L, C, H = (float(v) for v in cs.lab_to_lch(cs.srgb_to_lab(rgba.as_array())))
    return f"{format_number(L, 2)} {format_number(C, 2)} {format_number(H, 1)}{format_alpha(rgba.a)}"


def _format_display_p3(rgba: Rgba) -> str:
    r, g, b = (float(v) for v in cs.srgb_to_display_p3(rgba.as_array()))
    return f"{format_number(r, 3)} {format_number(g, 3)} {format_number(b, 3)}{format_alpha(rgba.a)}"


def format_color(rgba: Rgba, fmt: FormatId) -> str:
    """
    Serialize a color.

    Args:
        rgba: Color to serialize
        fmt: Output format

    Returns:
        The value body (e.g. "70% 0.15 250"), or a complete hex string.

    Raises:
        ValueError: If ``fmt`` is not a FormatId.
    """
    if fmt == FormatId.HEX:
        return _format_hex(rgba, include_alpha=has_alpha(rgba.a))
    elif fmt == FormatId.HEX6:
        return _format_hex(rgba, include_alpha=False)
    elif fmt == FormatId.HEX8:
        return _format_hex(rgba, include_alpha=True)
    elif fmt == FormatId.RGB:
        return _format_rgb(rgba)
    elif fmt == FormatId.RGB_PERCENT:
        return _format_rgb_percent(rgba)
    elif fmt == FormatId.HSL:
        return _format_hue_triplet(cs.srgb_to_hsl(rgba.as_array()), rgba.a)
    elif fmt == FormatId.HWB:
        return _format_hue_triplet(cs.srgb_to_hwb(rgba.as_array()), rgba.a)
    elif fmt == FormatId.OKLAB:
        return _format_oklab(rgba)
    elif fmt == FormatId.OKLCH:
        return _format_oklch(rgba)
    elif fmt == FormatId.LAB:
        return _format_lab(rgba)
    elif fmt == FormatId.LCH:
        return _format_lch(rgba)
    elif fmt == FormatId.DISPLAY_P3:
        return _format_display_p3(rgba)
    raise ValueError(f"Unknown format: {fmt!r}")


# =============================================================================
# CSS Function Syntax and Options
# =============================================================================


def wrap_css_function(fmt: FormatId, value: str) -> str:
    """
    Wrap a value body in its CSS function syntax.

    Hex formats are returned unchanged.
    """
    if fmt.is_hex:
        return value
    if fmt == FormatId.DISPLAY_P3:
        return f"color(display-p3 {value})"
    if fmt == FormatId.RGB_PERCENT:
        return f"rgb({value})"
    return f"{fmt.value}({value})"


def format_function_label(label: str) -> str:
    """Mark a label as the function form, once."""
    if FUNCTION_LABEL_SUFFIX.strip() in label:
        return label
    return f"{label}{FUNCTION_LABEL_SUFFIX}"


def get_format_options(rgba: Rgba) -> list[FormatOption]:
    """All offered serializations of a color, in presentation order."""
    return [
        FormatOption(id=fmt, label=FORMAT_LABELS[fmt], value=format_color(rgba, fmt))
        for fmt in OPTION_FORMATS
    ]
