"""
Unit tests for palette building and random palette synthesis.
"""

import numpy as np
import pytest
from pydantic import ValidationError

from palette_studio.schemas import ColorRecord
from palette_studio.services.colors.conversions import (
    MalformedColorError, hex_to_rgb, rgb_to_hsl
)
from palette_studio.services.colors.naming import GRAYSCALE_NAMES
from palette_studio.services.colors.palette import (
    HUE_STEP_DEGREES, PALETTE_SIZE, build_material_palette, build_palette,
    build_tailwind_palette, describe_color, rotate_hue, synthesize_palette,
    synthesize_palette_hsl
)


def hue_distance(a, b):
    """Shortest distance between two hues on the color wheel."""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestDescribeColor:
    """Test single color descriptions."""

    def test_reference_color(self):
        record = describe_color("#2563EB")

        assert record.hex == "#2563eb"
        assert record.rgb == (37, 99, 235)
        assert record.hsl == (221, 83, 53)
        assert record.name == "Royal Blue"
        assert record.class_label is None
        assert record.rgb_string == "rgb(37, 99, 235)"
        assert record.hsl_string == "hsl(221, 83%, 53%)"

    def test_with_classification(self):
        record = describe_color("#dc2626", with_classification=True)
        assert record.hsl == (0, 72, 51)
        assert record.name == "Deep Red"
        assert record.class_label == "bg-red-500"

    def test_malformed_lenient(self):
        record = describe_color("not-a-color")
        assert record.hex == "#000000"
        assert record.rgb == (0, 0, 0)
        assert record.name == "Deep Black"

    def test_malformed_strict(self):
        with pytest.raises(MalformedColorError):
            describe_color("not-a-color", strict=True)

    def test_record_is_immutable(self):
        record = describe_color("#2563eb")
        with pytest.raises(ValidationError):
            record.name = "Something Else"

    def test_record_validation(self):
        with pytest.raises(ValidationError):
            ColorRecord(hex="#2563EB", rgb=(37, 99, 235), hsl=(221, 83, 53), name="Royal Blue")
        with pytest.raises(ValidationError):
            ColorRecord(hex="#2563eb", rgb=(37, 99, 235), hsl=(360, 83, 53), name="Royal Blue")
        with pytest.raises(ValidationError):
            ColorRecord(hex="#2563eb", rgb=(37, 99, 256), hsl=(221, 83, 53), name="Royal Blue")


class TestBuildPalette:
    """Test building palettes from hex lists."""

    def test_preserves_order_and_length(self):
        hex_list = ["#2563eb", "#dc2626", "#16a34a", "#ca8a04", "#9333ea"]
        records = build_palette(hex_list)

        assert [r.hex for r in records] == hex_list
        assert all(r.class_label is None for r in records)

    def test_empty_list(self):
        assert build_palette([]) == []

    def test_accepts_any_iterable(self):
        records = build_palette(iter(["#2563eb", "#dc2626"]))
        assert len(records) == 2

    def test_lenient_degrades_single_entry(self):
        records = build_palette(["#2563eb", "#12", "#dc2626"])

        assert [r.hex for r in records] == ["#2563eb", "#000000", "#dc2626"]
        assert records[1].name == "Deep Black"

    def test_strict_raises_on_first_malformed(self):
        with pytest.raises(MalformedColorError) as exc_info:
            build_palette(["#2563eb", "#12", "nope"], strict=True)
        assert exc_info.value.value == "#12"

    def test_flavours(self):
        hex_list = ["#2563eb", "#dc2626"]
        material = build_material_palette(hex_list)
        tailwind = build_tailwind_palette(hex_list)

        assert [r.class_label for r in material] == [None, None]
        assert [r.class_label for r in tailwind] == ["bg-blue-500", "bg-red-500"]
        for m, t in zip(material, tailwind):
            assert (m.hex, m.rgb, m.hsl, m.name) == (t.hex, t.rgb, t.hsl, t.name)


class TestHueRotation:

    @pytest.mark.parametrize("h,degrees,expected", [
        (0, 72, 72),
        (300, 72, 12),
        (10, -30, 340),
        (0, 360, 0),
    ])
    def test_rotate_hue(self, h, degrees, expected):
        assert rotate_hue(h, degrees) == expected


class TestSynthesis:
    """Test random palette synthesis."""

    def test_seed_ranges_and_spacing(self, seeded_rng):
        seeds = synthesize_palette_hsl(seeded_rng)

        assert len(seeds) == PALETTE_SIZE
        base_hue = seeds[0][0]
        for i, (h, s, l) in enumerate(seeds):
            assert isinstance(h, int)
            assert h == (base_hue + i * HUE_STEP_DEGREES) % 360
            assert 60 <= s < 100
            assert 40 <= l < 80

    def test_hues_are_distinct(self):
        for seed in range(20):
            hues = [h for h, _, _ in synthesize_palette_hsl(seed)]
            assert len(set(hues)) == PALETTE_SIZE

    def test_output_format(self, seeded_rng):
        palette = synthesize_palette(seeded_rng)

        assert len(palette) == PALETTE_SIZE
        for hex_color in palette:
            assert hex_color == hex_color.lower()
            assert len(hex_color) == 7 and hex_color.startswith("#")
            int(hex_color[1:], 16)

    def test_deterministic_with_seed(self):
        assert synthesize_palette(7) == synthesize_palette(7)
        assert synthesize_palette(np.random.default_rng(7)) == synthesize_palette(7)

    def test_different_seeds_differ(self):
        assert synthesize_palette(1) != synthesize_palette(2)

    def test_unseeded_calls_work(self):
        assert len(synthesize_palette()) == PALETTE_SIZE

    def test_colors_are_vivid_and_follow_seed_hues(self):
        for seed in range(25):
            seeds = synthesize_palette_hsl(seed)
            palette = synthesize_palette(seed)

            for (seed_h, _, _), hex_color in zip(seeds, palette):
                h, s, l = rgb_to_hsl(*hex_to_rgb(hex_color))
                assert hue_distance(h, seed_h) <= 3
                assert describe_color(hex_color).name not in GRAYSCALE_NAMES
                assert 10 <= l <= 95
