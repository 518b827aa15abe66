# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""Tests for numeric token parsing."""

import pytest

from okshade.codec.resolve import resolve_color
from okshade.codec.tokens import parse_raw_value, parse_token
from okshade.schema import Unit


class TestParseToken:

    @pytest.mark.parametrize(
        "raw, value, unit",
        [
            ("1", 1.0, None),
            ("+3", 3.0, None),
            ("-0.25", -0.25, None),
            (".5", 0.5, None),
            ("5.", 5.0, None),
            ("50%", 50.0, Unit.PERCENT),
            ("120deg", 120.0, Unit.DEG),
            ("120DEG", 120.0, Unit.DEG),
            ("-1.5rad", -1.5, Unit.RAD),
            (".5turn", 0.5, Unit.TURN),
        ],
    )
    def test_valid(self, raw, value, unit):
        token = parse_token(raw)
        assert token is not None
        assert token.value == pytest.approx(value)
        assert token.unit is unit
        assert token.raw == raw

    @pytest.mark.parametrize("raw", ["", "abc", "1e3", "1px", "50 %", "--1", "1.2.3", "%", "deg"])
    def test_invalid(self, raw):
        assert parse_token(raw) is None

    def test_overflow_rejected(self):
        assert parse_token("9" * 400) is None

    @pytest.mark.parametrize("raw", ["\u0665\u0660%", "\uff15\uff10", "\u0661.\u0665", "1\u0662deg"])
    def test_non_ascii_digits_rejected(self, raw):
        """Only ASCII 0-9 are digits."""
        assert parse_token(raw) is None

    def test_non_ascii_triplet_is_not_a_color(self):
        assert parse_raw_value("\uff12\uff15\uff15 0 0") is None
        assert resolve_color("\uff12\uff15\uff15 0 0") is None


class TestParseRawValue:

    def test_space_separated(self):
        parsed = parse_raw_value("70% 0.15 250")
        assert parsed is not None
        assert [t.value for t in parsed.channels] == [70.0, 0.15, 250.0]
        assert parsed.channels[0].unit is Unit.PERCENT
        assert parsed.alpha is None
        assert not parsed.has_slash_alpha

    def test_comma_separated(self):
        parsed = parse_raw_value("255, 128,0")
        assert parsed is not None
        assert [t.value for t in parsed.channels] == [255.0, 128.0, 0.0]

    def test_surrounding_whitespace(self):
        parsed = parse_raw_value("  1 2 3  ")
        assert parsed is not None
        assert len(parsed.channels) == 3

    def test_slash_alpha(self):
        parsed = parse_raw_value("1 2 3 / 50%")
        assert parsed is not None
        assert parsed.has_slash_alpha
        assert parsed.alpha.value == 50.0
        assert parsed.alpha.unit is Unit.PERCENT

    def test_slash_alpha_without_spaces(self):
        parsed = parse_raw_value("1 2 3/0.5")
        assert parsed is not None
        assert parsed.alpha.value == 0.5

    def test_fourth_channel_is_alpha(self):
        parsed = parse_raw_value("255, 0, 0, 0.5")
        assert parsed is not None
        assert len(parsed.channels) == 3
        assert parsed.alpha.value == 0.5
        assert not parsed.has_slash_alpha

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1 2",
            "1 2 / 3",
            "1 2 3 / 4 / 5",
            "1 2 3 4 5",
            "1 2 3 4 / 5",
            "1 2 3 /",
            "1 2 3 / 0.5 0.6",
            "1 2 3 / x",
            "a b c",
            "1 2 red",
            "#ff0000",
            "oklch(70% 0.1 200)",
        ],
    )
    def test_invalid(self, text):
        assert parse_raw_value(text) is None
