"""
Color Naming

Maps an HSL triple to a human-readable name with a fixed decision table:
extreme lightness first, then low-saturation grays, then eight hue bands
that each split into a lighter and a deeper variant.
"""

from dataclasses import dataclass
from typing import List, Tuple

# Lightness/saturation thresholds (percent)
BLACK_L_BELOW = 10
WHITE_L_ABOVE = 95
GRAY_S_BELOW = 10
CHARCOAL_L_BELOW = 30
GRAY_L_BELOW = 70
LIGHT_VARIANT_L_ABOVE = 60


@dataclass(frozen=True)
class HueBand:
    """A half-open hue interval [start, end) with its two variant names."""
    start: int
    end: int
    light_name: str
    deep_name: str


# Ordered, contiguous cover of [0, 360)
HUE_BANDS: Tuple[HueBand, ...] = (
    HueBand(0, 30, "Light Red", "Deep Red"),
    HueBand(30, 60, "Golden", "Brown"),
    HueBand(60, 90, "Light Green", "Forest Green"),
    HueBand(90, 150, "Mint", "Emerald"),
    HueBand(150, 210, "Sky Blue", "Ocean Blue"),
    HueBand(210, 270, "Lavender", "Royal Blue"),
    HueBand(270, 330, "Pink", "Purple"),
    HueBand(330, 360, "Rose", "Crimson"),
)

GRAYSCALE_NAMES = ("Deep Black", "Pure White", "Charcoal", "Gray", "Light Gray")


def _vocabulary() -> List[str]:
    names = list(GRAYSCALE_NAMES)
    for band in HUE_BANDS:
        names.extend([band.light_name, band.deep_name])
    return names


COLOR_NAMES: Tuple[str, ...] = tuple(_vocabulary())


def find_hue_band(h: float) -> HueBand:
    """Return the band containing hue ``h`` (degrees, normalized modulo 360)."""
    h = h % 360
    for band in HUE_BANDS:
        if band.start <= h < band.end:
            return band
    # Float modulo can land on 360.0 for tiny negative inputs
    return HUE_BANDS[0]


def name_color(h: float, s: float, l: float) -> str:
    """
    Name a color from its HSL components.

    Args:
        h: Hue in degrees
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        One of ``COLOR_NAMES``
    """
    if l < BLACK_L_BELOW:
        return "Deep Black"
    if l > WHITE_L_ABOVE:
        return "Pure White"

    if s < GRAY_S_BELOW:
        if l < CHARCOAL_L_BELOW:
            return "Charcoal"
        if l < GRAY_L_BELOW:
            return "Gray"
        return "Light Gray"

    band = find_hue_band(h)
    return band.light_name if l > LIGHT_VARIANT_L_ABOVE else band.deep_name
