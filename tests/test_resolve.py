# Copyright (c) 2026 Okshade
# SPDX-License-Identifier: MIT

"""End-to-end tests: text in, resolved color and conversions out."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from okshade import ResolverConfig, VariableRule, convert_color, resolve_color
from okshade.codec import CustomProperty, conversion_options
from okshade.format import format_color
from okshade.schema import ColorSource, FormatId, SpaceId


def rgb_of(resolved):
    return (resolved.rgba.r, resolved.rgba.g, resolved.rgba.b)


class TestResolveColor:

    def test_oklch_function(self):
        resolved = resolve_color("oklch(70% 0.15 250)")
        assert resolved.source is ColorSource.FUNCTION
        assert resolved.space is SpaceId.OKLCH
        assert rgb_of(resolved) == pytest.approx((0.295, 0.639, 0.970), abs=0.01)
        assert resolved.rgba.a == 1.0

    def test_oklch_function_reformats_to_itself(self):
        assert convert_color("oklch(70% 0.15 250)", FormatId.OKLCH) == "oklch(70% 0.15 250)"

    def test_hex(self):
        resolved = resolve_color("#ff8800")
        assert resolved.source is ColorSource.HEX
        assert resolved.space is None
        assert not resolved.via_var

    def test_hex_wins_over_everything(self):
        config = ResolverConfig(default_space=SpaceId.LAB)
        resolved = resolve_color("#fff", config, property_name="--x-lab", space_hint="lab")
        assert resolved.source is ColorSource.HEX

    def test_function_ignores_hint_and_rules(self):
        resolved = resolve_color("hsl(120 50% 50%)", property_name="--x-lab", space_hint="oklch")
        assert resolved.space is SpaceId.HSL

    def test_raw_uses_heuristic(self):
        resolved = resolve_color("255 128 0")
        assert resolved.source is ColorSource.RAW
        assert resolved.space is SpaceId.RGB
        assert rgb_of(resolved) == pytest.approx((1.0, 128 / 255, 0.0))

    def test_hint_beats_rule(self):
        resolved = resolve_color("1 0 0", property_name="--brand-lab", space_hint="p3")
        assert resolved.space is SpaceId.DISPLAY_P3

    def test_rule_beats_heuristic(self):
        resolved = resolve_color("50 20 -30", property_name="--brand-hsl")
        assert resolved.space is SpaceId.HSL

    def test_unknown_hint_ignored(self):
        resolved = resolve_color("255 128 0", space_hint="srgb")
        assert resolved.space is SpaceId.RGB

    def test_custom_rules(self):
        config = ResolverConfig(variable_rules=(VariableRule("^--brand", SpaceId.LCH),))
        assert resolve_color("70 20 180", config, property_name="--brand-1").space is SpaceId.LCH
        assert resolve_color("255 128 0", config, property_name="--brand-oklch").space is SpaceId.LCH

    @pytest.mark.parametrize("ambiguous", [SpaceId.HSL, SpaceId.HWB])
    def test_ambiguous_hue_preference(self, ambiguous):
        config = ResolverConfig(ambiguous_hue_space=ambiguous)
        assert resolve_color("120 50% 50%", config).space is ambiguous

    def test_heuristics_disabled_uses_default(self):
        config = ResolverConfig(enable_heuristics=False)
        assert resolve_color("255 128 0", config).space is SpaceId.OKLCH

    def test_undetermined_uses_default(self, caplog):
        config = ResolverConfig(default_space=SpaceId.LAB)
        with caplog.at_level(logging.DEBUG, logger="okshade.codec.resolve"):
            resolved = resolve_color("0.5 0.5 0.5", config)
        assert resolved.space is SpaceId.LAB
        assert "default space lab" in caplog.text

    def test_alpha(self):
        assert resolve_color("rgb(255 0 0 / 50%)").rgba.a == pytest.approx(0.5)
        assert resolve_color("255, 0, 0, 0.25").rgba.a == pytest.approx(0.25)

    def test_out_of_range_is_clamped(self):
        resolved = resolve_color("lab(1000 1000 1000)")
        for value in (*rgb_of(resolved), resolved.rgba.a):
            assert 0.0 <= value <= 1.0

    def test_important(self):
        assert resolve_color("#fff !important").source is ColorSource.HEX
        assert resolve_color("oklch(70% 0.1 200) !IMPORTANT").space is SpaceId.OKLCH

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "red", "#ggg", "#12345", "oklch(1 2)", "rgba(1 2 3)", "1 2", "1 2 3 4 5", "var(--missing)"],
    )
    def test_not_a_color(self, text):
        assert resolve_color(text) is None


class TestResolveThroughVariables:

    def test_rule_follows_declaring_property(self):
        custom = {"--brand-hwb": CustomProperty("120 10% 10%", "--brand-hwb")}
        resolved = resolve_color("var(--brand-hwb)", property_name="color", custom_properties=custom)
        assert resolved.space is SpaceId.HWB
        assert resolved.via_var

    def test_hint_follows_declaration(self):
        custom = {"--accent": CustomProperty("1 0 0", "--accent", "p3")}
        resolved = resolve_color("var(--accent)", custom_properties=custom)
        assert resolved.space is SpaceId.DISPLAY_P3

    def test_function_value(self):
        custom = {"--c": CustomProperty("hsl(120 50% 50%)", "--c")}
        resolved = resolve_color("var(--c)", custom_properties=custom)
        assert resolved.source is ColorSource.FUNCTION
        assert resolved.via_var

    def test_fallback(self):
        resolved = resolve_color("var(--missing, #00ff00)", custom_properties={})
        assert resolved.source is ColorSource.HEX
        assert rgb_of(resolved) == (0.0, 1.0, 0.0)
        assert resolved.via_var

    def test_cycle_is_not_a_color(self):
        custom = {
            "--a": CustomProperty("var(--b)", "--a"),
            "--b": CustomProperty("var(--a)", "--b"),
        }
        assert resolve_color("var(--a)", custom_properties=custom) is None


class TestConvertColor:

    def test_function_stays_function(self):
        assert convert_color("hsl(0 100% 50%)", FormatId.RGB) == "rgb(255 0 0)"
        assert convert_color("rgb(255 0 0)", FormatId.HSL) == "hsl(0 100% 50%)"

    def test_function_to_hex_unwrapped(self):
        assert convert_color("hsl(0 100% 50%)", FormatId.HEX6) == "#ff0000"

    def test_function_to_p3(self):
        assert convert_color("rgb(255 255 255)", FormatId.DISPLAY_P3) == "color(display-p3 1 1 1)"

    def test_raw_stays_raw(self):
        assert convert_color("120 100% 50%", FormatId.RGB) == "0 255 0"

    def test_hex_to_body(self):
        assert convert_color("#ff0000", FormatId.HSL) == "0 100% 50%"

    def test_context_passed_through(self):
        text = convert_color("1 0 0", FormatId.HEX6, space_hint="rgb")
        assert text == "#ff0000"

    def test_not_a_color(self):
        assert convert_color("nope", FormatId.RGB) is None

    def test_hex_roundtrip_stable(self):
        first = convert_color("oklch(70% 0.15 250)", FormatId.HEX6)
        assert convert_color(first, FormatId.HEX6) == first


class TestConversionOptions:

    def test_function_source_wrapped(self):
        options = conversion_options(resolve_color("hsl(0 100% 50%)"))
        assert len(options) == 11
        by_id = {o.id: o for o in options}
        assert by_id[FormatId.RGB].value == "rgb(255 0 0)"
        assert by_id[FormatId.RGB_PERCENT].value == "rgb(100% 0% 0%)"
        assert by_id[FormatId.DISPLAY_P3].value.startswith("color(display-p3 ")
        assert by_id[FormatId.HEX6].value == "#ff0000"
        assert all(o.label.endswith(" (function)") for o in options)

    def test_raw_source_bare(self):
        resolved = resolve_color("255 0 0")
        options = conversion_options(resolved)
        by_id = {o.id: o for o in options}
        assert by_id[FormatId.HSL].value == "0 100% 50%"
        assert by_id[FormatId.HSL].label == "HSL"
        assert by_id[FormatId.HEX8].value == format_color(resolved.rgba, FormatId.HEX8)


class TestConcurrency:

    def test_parallel_calls_match_serial(self):
        inputs = [
            "oklch(70% 0.15 250)",
            "#ff8800",
            "120 50% 50%",
            "50 20 -30",
            "color(display-p3 1 0 0 / 0.5)",
            "nope",
        ] * 20
        serial = [resolve_color(text) for text in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(resolve_color, inputs))
        assert parallel == serial
