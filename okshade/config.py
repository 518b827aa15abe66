# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
Resolver configuration.

Configuration is an immutable value passed into every resolution call; the
codec has no process-wide settings. ``ResolverConfig.from_dict`` reads the
same keys as the editor settings it was designed for (camelCase) as well as
their snake_case spellings, and is lenient about bad entries.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from okshade.schema import SpaceId


logger = logging.getLogger(__name__)


# =============================================================================
# Variable Rules
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariableRule:
    """
    Forces a color space for properties whose name matches a pattern.

    The pattern is compiled once, case-insensitively, at construction.
    Matching is a regex *search* against the property name.

    Attributes:
        pattern: Regular expression text
        space: Space to read matching values in

    Raises:
        ValueError: If ``pattern`` is not a valid regular expression.
    """
    pattern: str
    space: SpaceId
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.space, SpaceId):
            raise ValueError(f"Rule space must be a SpaceId, got {self.space!r}")
        try:
            regex = re.compile(self.pattern, re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"Invalid rule pattern {self.pattern!r}: {exc}") from exc
        object.__setattr__(self, "_regex", regex)

    def matches(self, property_name: str) -> bool:
        return self._regex.search(property_name) is not None

    def to_dict(self) -> dict:
        return {"match": self.pattern, "space": self.space.value}


DEFAULT_VARIABLE_RULES: tuple[VariableRule, ...] = (
    VariableRule("oklch", SpaceId.OKLCH),
    VariableRule("oklab", SpaceId.OKLAB),
    VariableRule("lch", SpaceId.LCH),
    VariableRule("lab", SpaceId.LAB),
    VariableRule("rgb", SpaceId.RGB),
    VariableRule("hsl", SpaceId.HSL),
    VariableRule("hwb", SpaceId.HWB),
    VariableRule("p3", SpaceId.DISPLAY_P3),
)


# =============================================================================
# Resolver Config
# =============================================================================

AMBIGUOUS_HUE_SPACES = (SpaceId.HSL, SpaceId.HWB)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """
    Settings that steer raw-triplet resolution.

    Attributes:
        default_space: Space used when no hint, rule or heuristic applies
        enable_heuristics: Run the space detector on bare triplets
        ambiguous_hue_space: HSL or HWB, used for hue-first triplets that
            fit both
        variable_rules: Ordered property-name rules; first match wins
    """
    default_space: SpaceId = SpaceId.OKLCH
    enable_heuristics: bool = True
    ambiguous_hue_space: SpaceId = SpaceId.HSL
    variable_rules: tuple[VariableRule, ...] = DEFAULT_VARIABLE_RULES

    def __post_init__(self) -> None:
        if not isinstance(self.default_space, SpaceId):
            raise ValueError(f"default_space must be a SpaceId, got {self.default_space!r}")
        if self.ambiguous_hue_space not in AMBIGUOUS_HUE_SPACES:
            raise ValueError(
                f"ambiguous_hue_space must be hsl or hwb, got {self.ambiguous_hue_space!r}"
            )
        if not isinstance(self.enable_heuristics, bool):
            raise ValueError(f"enable_heuristics must be a bool, got {self.enable_heuristics!r}")
        if not isinstance(self.variable_rules, tuple):
            object.__setattr__(self, "variable_rules", tuple(self.variable_rules))
        for rule in self.variable_rules:
            if not isinstance(rule, VariableRule):
                raise ValueError(f"variable_rules entries must be VariableRule, got {rule!r}")

    def to_dict(self) -> dict:
        return {
            "defaultSpace": self.default_space.value,
            "enableHeuristics": self.enable_heuristics,
            "ambiguousHueSpace": self.ambiguous_hue_space.value,
            "variableRules": [rule.to_dict() for rule in self.variable_rules],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ResolverConfig:
        """
        Build a config from settings data.

        Bad values fall back to defaults instead of raising:
        - unknown default space → oklch
        - ambiguous hue space other than "hwb" → hsl
        - rules without a string "match" are dropped
        - unknown rule spaces → oklch
        - rules with invalid regex are logged and dropped
        """
        default_space = SpaceId.parse(_get(data, "defaultSpace", "default_space")) or SpaceId.OKLCH

        enable_heuristics = _get(data, "enableHeuristics", "enable_heuristics")
        if not isinstance(enable_heuristics, bool):
            enable_heuristics = True

        ambiguous = _get(data, "ambiguousHueSpace", "ambiguous_hue_space")
        ambiguous_hue_space = SpaceId.HWB if ambiguous == "hwb" else SpaceId.HSL

        rules_raw = _get(data, "variableRules", "variable_rules")
        if isinstance(rules_raw, list):
            variable_rules = _parse_rules(rules_raw)
        else:
            variable_rules = DEFAULT_VARIABLE_RULES

        return cls(
            default_space=default_space,
            enable_heuristics=enable_heuristics,
            ambiguous_hue_space=ambiguous_hue_space,
            variable_rules=variable_rules,
        )

    @classmethod
    def from_json(cls, json_str: str) -> ResolverConfig:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


def _get(data: dict, camel: str, snake: str):
    if camel in data:
        return data[camel]
    return data.get(snake)


def _parse_rules(rules_raw: list) -> tuple[VariableRule, ...]:
    rules = []
    for entry in rules_raw:
        if not isinstance(entry, dict) or not isinstance(entry.get("match"), str):
            logger.warning("Ignoring variable rule without a string 'match': %r", entry)
            continue
        space = SpaceId.parse(entry.get("space")) or SpaceId.OKLCH
        try:
            rules.append(VariableRule(entry["match"], space))
        except ValueError as exc:
            logger.warning("Ignoring variable rule: %s", exc)
    return tuple(rules)
