"""
Palette Building and Synthesis

Turns raw hex colors into described color records and synthesizes vivid,
mid-toned palettes by rotating a random base hue around the color wheel.
"""

from typing import Iterable, List, Tuple, Union

import numpy as np
from loguru import logger

from palette_studio.schemas import ColorRecord
from .conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from .naming import name_color
from .swatches import nearest_swatch

PALETTE_SIZE = 5
HUE_STEP_DEGREES = 360 // PALETTE_SIZE  # 72
SATURATION_RANGE = (60.0, 100.0)
LIGHTNESS_RANGE = (40.0, 80.0)

RandomSource = Union[None, int, np.random.Generator]


def describe_color(hex_color: str, with_classification: bool = False,
                   strict: bool = False) -> ColorRecord:
    """
    Build the full description of one color.

    Args:
        hex_color: Input color, ``#rrggbb`` or ``rrggbb``
        with_classification: Also attach the nearest swatch class label
        strict: Raise MalformedColorError instead of describing black

    Returns:
        ColorRecord for the color
    """
    rgb = hex_to_rgb(hex_color, strict=strict)
    hsl = rgb_to_hsl(*rgb)
    canonical = rgb_to_hex(*rgb)

    return ColorRecord(
        hex=canonical,
        rgb=rgb,
        hsl=hsl,
        name=name_color(*hsl),
        class_label=nearest_swatch(canonical) if with_classification else None,
    )


def build_palette(hex_list: Iterable[str], with_classification: bool = False,
                  strict: bool = False) -> List[ColorRecord]:
    """
    Describe every color of a palette, preserving input order.

    In lenient mode a malformed entry only degrades its own record.

    Args:
        hex_list: Raw hex colors
        with_classification: Attach swatch class labels
        strict: Raise on the first malformed entry

    Returns:
        One ColorRecord per input color
    """
    records = [
        describe_color(hex_color, with_classification=with_classification, strict=strict)
        for hex_color in hex_list
    ]
    logger.debug(f"Built palette of {len(records)} colors (classified={with_classification})")
    return records


def build_material_palette(hex_list: Iterable[str], strict: bool = False) -> List[ColorRecord]:
    """Palette flavour without swatch classes."""
    return build_palette(hex_list, with_classification=False, strict=strict)


def build_tailwind_palette(hex_list: Iterable[str], strict: bool = False) -> List[ColorRecord]:
    """Palette flavour with Tailwind swatch classes."""
    return build_palette(hex_list, with_classification=True, strict=strict)


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return (h + degrees) % 360


def synthesize_palette_hsl(rng: RandomSource = None) -> List[Tuple[int, float, float]]:
    """
    Generate the HSL seeds of a synthesized palette.

    The base hue is a uniform integer in [0, 360); the five hues are spaced
    72 degrees apart. Each hue draws a saturation in [60, 100) and then a
    lightness in [40, 80).

    Args:
        rng: numpy Generator, integer seed, or None for fresh entropy

    Returns:
        Five (h, s, l) tuples, h in degrees and s, l in percent
    """
    generator = np.random.default_rng(rng)
    base_hue = int(generator.integers(0, 360))

    seeds = []
    for i in range(PALETTE_SIZE):
        hue = int(rotate_hue(base_hue, i * HUE_STEP_DEGREES))
        saturation = float(generator.uniform(*SATURATION_RANGE))
        lightness = float(generator.uniform(*LIGHTNESS_RANGE))
        seeds.append((hue, saturation, lightness))

    logger.debug(f"Synthesized palette seeds from base hue {base_hue}")
    return seeds


def synthesize_palette(rng: RandomSource = None) -> List[str]:
    """
    Synthesize a balanced five-color palette.

    Args:
        rng: numpy Generator, integer seed, or None for fresh entropy

    Returns:
        Five lowercase ``#rrggbb`` strings
    """
    return [rgb_to_hex(*hsl_to_rgb(h, s, l)) for h, s, l in synthesize_palette_hsl(rng)]

