# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Value types for the okshade color codec.

Design principles:
- Immutable: All types are frozen dataclasses or enums
- Disposable: Every value is created fresh per parse/format call
- Closed: Color spaces and output formats are fixed enumerations

Canonical color:
    Every recognized color is reduced to an ``Rgba`` in gamma-encoded sRGB.
    r, g, b and alpha all live in [0, 1]; conversion code clamps before
    constructing one, so an out-of-range ``Rgba`` is a programmer error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Tokens
# =============================================================================


class Unit(Enum):
    """Unit suffix of a numeric channel token. Absence is ``None``."""

    PERCENT = "%"
    DEG = "deg"
    RAD = "rad"
    TURN = "turn"

    @property
    def is_angle(self) -> bool:
        """True for deg, rad and turn."""
        return self in (Unit.DEG, Unit.RAD, Unit.TURN)


@dataclass(frozen=True, slots=True)
class Token:
    """
    One parsed numeric channel.

    Attributes:
        raw: Source text of the token (e.g. "50%")
        value: Numeric value without the unit (e.g. 50.0)
        unit: Unit suffix, or None for a bare number
    """
    raw: str
    value: float
    unit: Optional[Unit] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"Token value must be finite, got {self.value}")

    @property
    def is_percent(self) -> bool:
        return self.unit is Unit.PERCENT

    @property
    def is_angle(self) -> bool:
        return self.unit is not None and self.unit.is_angle


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """
    The channel body of a color expression.

    The parser only ever produces three channels. The count is not enforced
    here so that conversion code can check it on its own terms.

    Attributes:
        channels: Channel tokens in source order
        alpha: Alpha token, either after "/" or as a fourth bare channel
        has_slash_alpha: True when alpha was written after "/"
    """
    channels: tuple[Token, ...]
    alpha: Optional[Token] = None
    has_slash_alpha: bool = False


# =============================================================================
# Canonical Color
# =============================================================================


def clamp01(value: float) -> float:
    """Clamp into [0, 1]; NaN maps to 0."""
    if value != value:
        return 0.0
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True, slots=True)
class Rgba:
    """
    Canonical in-memory color.

    Attributes:
        r, g, b: Gamma-encoded sRGB channels in [0, 1]
        a: Alpha in [0, 1]
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate all channels are within [0, 1]."""
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {name} must be 0-1, got {value}")

    @classmethod
    def from_array(cls, rgb: NDArray[np.float64], alpha: float = 1.0) -> Rgba:
        """Build from an sRGB 3-vector, clamping every channel into [0, 1]."""
        r, g, b = (float(v) for v in np.asarray(rgb, dtype=np.float64).reshape(3))
        return cls(r=clamp01(r), g=clamp01(g), b=clamp01(b), a=clamp01(alpha))

    def as_array(self) -> NDArray[np.float64]:
        """The r, g, b channels as a NumPy 3-vector (alpha excluded)."""
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> Rgba:
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


# =============================================================================
# Identifiers
# =============================================================================


class SpaceId(Enum):
    """
    The fixed set of input color spaces.

    Values are the CSS function names (``display-p3`` is the ``color()``
    keyword).
    """
    OKLCH = "oklch"
    OKLAB = "oklab"
    LCH = "lch"
    LAB = "lab"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    DISPLAY_P3 = "display-p3"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional[SpaceId]:
        """Exact (case-insensitive) lookup by value. Never raises."""
        if not isinstance(text, str):
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class FormatId(Enum):
    """
    Output encodings.

    One per color space, an RGB percentage variant, and three hex forms.
    Hex forms are output-only.
    """
    OKLCH = "oklch"
    OKLAB = "oklab"
    LCH = "lch"
    LAB = "lab"
    RGB = "rgb"
    RGB_PERCENT = "rgb-percent"
    HSL = "hsl"
    HWB = "hwb"
    DISPLAY_P3 = "display-p3"
    HEX = "hex"
    HEX6 = "hex6"
    HEX8 = "hex8"

    @property
    def is_hex(self) -> bool:
        return self in (FormatId.HEX, FormatId.HEX6, FormatId.HEX8)

    @classmethod
    def for_space(cls, space: SpaceId) -> FormatId:
        """The native output format of a color space."""
        return cls(space.value)


class ColorSource(Enum):
    """How a color was recognized in text."""

    HEX = "hex"
    FUNCTION = "function"
    RAW = "raw"


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class FormatOption:
    """
    One serialization choice for a color.

    Attributes:
        id: Output format
        label: Human-readable name of the format
        value: The color serialized in that format
    """
    id: FormatId
    label: str
    value: str

    def to_dict(self) -> dict:
        return {"id": self.id.value, "label": self.label, "value": self.value}


@dataclass(frozen=True, slots=True)
class ResolvedColor:
    """
    A color recognized in a text value.

    Attributes:
        rgba: The canonical color
        source: Which encoding was recognized (hex, function or raw triplet)
        space: Space the channels were read in; None for hex
        via_var: True when the text was reached through var() substitution
    """
    rgba: Rgba
    source: ColorSource
    space: Optional[SpaceId] = None
    via_var: bool = False

    def __post_init__(self) -> None:
        if self.source is not ColorSource.HEX and self.space is None:
            raise ValueError(f"{self.source.value} colors must carry a space")

    def to_dict(self) -> dict:
        return {
            "rgba": self.rgba.to_dict(),
            "source": self.source.value,
            "space": self.space.value if self.space is not None else None,
            "via_var": self.via_var,
        }
