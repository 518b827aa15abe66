# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""
CSS custom property substitution.

Resolves a value of the form ``var(--name)`` or ``var(--name, fallback)``
against a caller-supplied mapping of custom properties. How that mapping is
collected from a document is the caller's business.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

DEFAULT_VAR_RESOLUTION_DEPTH = 5

_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)
_VAR_START_RE = re.compile(r"^var\s*\(", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class CustomProperty:
    """
    A declared custom property.

    Attributes:
        value: Declared value text
        property_name: Declaring property (e.g. "--brand-oklch")
        space_hint: Space hint attached to the declaration, if any
    """
    value: str
    property_name: str = ""
    space_hint: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ResolvedValue:
    """
    A value after var() substitution.

    ``property_name`` and ``space_hint`` come from the declaration that
    supplied the final text, so rules and hints follow the variable.
    """
    value_text: str
    property_name: str
    space_hint: Optional[str]
    via_var: bool


@dataclass(frozen=True, slots=True)
class _VarExpression:
    name: str
    fallback: Optional[str] = None


def strip_important(value_text: str) -> str:
    return _IMPORTANT_RE.sub("", value_text).strip()


def _matching_paren(text: str, start: int) -> int:
    """Index of the ")" closing the "(" at ``start``, or -1."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _top_level_comma(text: str) -> int:
    depth = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            return i
    return -1


def parse_var_expression(value_text: str) -> Optional[_VarExpression]:
    """Split ``var(--name, fallback)`` into name and fallback, or None."""
    trimmed = strip_important(value_text)
    if not _VAR_START_RE.match(trimmed):
        return None

    start = trimmed.index("(")
    end = _matching_paren(trimmed, start)
    # The var() call must span the whole value
    if end == -1 or end != len(trimmed) - 1:
        return None

    inner = trimmed[start + 1 : end].strip()
    if not inner:
        return None

    split = _top_level_comma(inner)
    name = (inner if split == -1 else inner[:split]).strip()
    if not name.startswith("--"):
        return None

    fallback = inner[split + 1 :].strip() if split != -1 else ""
    return _VarExpression(name=name, fallback=fallback or None)


def resolve_var(
    value_text: str,
    custom_properties: Mapping[str, CustomProperty],
    *,
    property_name: str = "",
    space_hint: Optional[str] = None,
    max_depth: int = DEFAULT_VAR_RESOLUTION_DEPTH,
) -> Optional[ResolvedValue]:
    """
    Substitute var() references until a concrete value remains.

    A referenced property that is missing, cyclic or too deep falls back to
    the var() fallback text when there is one.

    Args:
        value_text: Value to resolve (``!important`` is ignored)
        custom_properties: Declared custom properties by name
        property_name: Property the value belongs to
        space_hint: Space hint attached to the value
        max_depth: Maximum number of var() hops

    Returns:
        ResolvedValue, or None when the reference cannot be resolved.
    """
    visited: set[str] = set()

    def _resolve(
        text: str, prop: str, hint: Optional[str], depth: int, via_var: bool
    ) -> Optional[ResolvedValue]:
        normalized = strip_important(text)
        expr = parse_var_expression(normalized)
        if expr is None:
            return ResolvedValue(
                value_text=normalized,
                property_name=prop,
                space_hint=hint,
                via_var=via_var,
            )

        if depth <= 0:
            logger.debug("var() depth limit reached at %s", expr.name)
            return None
        if expr.name in visited:
            logger.debug("var() cycle through %s", expr.name)
            return None

        visited.add(expr.name)
        try:
            target = custom_properties.get(expr.name)
            if target is not None:
                resolved = _resolve(
                    target.value, target.property_name, target.space_hint, depth - 1, True
                )
                if resolved is not None:
                    return resolved

            if expr.fallback is not None:
                return _resolve(expr.fallback, prop, hint, depth - 1, True)
            return None
        finally:
            visited.discard(expr.name)

    return _resolve(value_text, property_name, space_hint, max_depth, False)
