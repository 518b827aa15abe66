# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""Tests for hex and CSS function decoders."""

import pytest

from okshade.codec.decode import extract_space_hint, parse_color_function, parse_hex_color
from okshade.schema import SpaceId, Unit


class TestHexDecoder:

    def test_short_form_nibble_doubled(self):
        rgba = parse_hex_color("#f80")
        assert (rgba.r, rgba.g, rgba.b, rgba.a) == pytest.approx((1.0, 0x88 / 255, 0.0, 1.0))

    def test_short_form_with_alpha(self):
        rgba = parse_hex_color("#0f08")
        assert rgba.g == 1.0
        assert rgba.a == pytest.approx(0x88 / 255)

    def test_long_form_case_insensitive(self):
        assert parse_hex_color("#FF8800") == parse_hex_color("#ff8800")

    def test_long_form_with_alpha(self):
        rgba = parse_hex_color("#ff880080")
        assert rgba.a == pytest.approx(128 / 255)

    def test_no_gamma_step(self):
        """Bytes map straight to sRGB channel values."""
        rgba = parse_hex_color("#808080")
        assert rgba.r == pytest.approx(128 / 255)

    def test_surrounding_whitespace(self):
        assert parse_hex_color("  #abc ") is not None

    @pytest.mark.parametrize(
        "text",
        ["fff", "#", "#ff", "#12345", "#1234567", "#123456789", "#ggg", "#ff 00 00", "red"],
    )
    def test_invalid(self, text):
        assert parse_hex_color(text) is None


class TestFunctionDecoder:

    def test_oklch(self):
        fc = parse_color_function("oklch(70% 0.15 250)")
        assert fc.space is SpaceId.OKLCH
        assert [t.value for t in fc.parsed.channels] == [70.0, 0.15, 250.0]

    @pytest.mark.parametrize(
        "text, space",
        [
            ("oklab(0.5 0.1 -0.1)", SpaceId.OKLAB),
            ("lch(50 20 180)", SpaceId.LCH),
            ("lab(50 20 -30)", SpaceId.LAB),
            ("RGB(255 0 0)", SpaceId.RGB),
            ("hsl(120, 50%, 50%)", SpaceId.HSL),
            ("Hwb(120 10% 10%)", SpaceId.HWB),
            ("color(display-p3 1 0 0)", SpaceId.DISPLAY_P3),
            ("COLOR( Display-P3 1 0 0 )", SpaceId.DISPLAY_P3),
            ("  oklch(0.7 0.1 200)  ", SpaceId.OKLCH),
        ],
    )
    def test_spaces(self, text, space):
        fc = parse_color_function(text)
        assert fc is not None
        assert fc.space is space

    def test_alpha(self):
        fc = parse_color_function("lab(50 20 -30 / 0.5)")
        assert fc.parsed.alpha.value == 0.5
        assert fc.parsed.has_slash_alpha

    def test_hue_units_kept(self):
        fc = parse_color_function("hsl(0.25turn 50% 50%)")
        assert fc.parsed.channels[0].unit is Unit.TURN

    @pytest.mark.parametrize(
        "text",
        [
            "rgba(1 2 3)",
            "hsl()",
            "oklch(1 2)",
            "oklch(70% 0.15 250",
            "color(srgb 1 0 0)",
            "color(display-p3)",
            "oklch(a b c)",
            "var(--x)",
            "#ff0000",
            "1 2 3",
        ],
    )
    def test_invalid(self, text):
        assert parse_color_function(text) is None


class TestSpaceHintDirective:

    def test_block_comment(self):
        assert extract_space_hint("/* @space p3 */") == "p3"

    def test_lower_cased(self):
        assert extract_space_hint("--x: 1 2 3; // @space OKLCH") == "oklch"

    def test_absent(self):
        assert extract_space_hint("--x: 1 2 3;") is None
