"""
Swatch Classification Module

Classifies a color against a fixed reference set of Tailwind CSS swatches
(the 500 weight of each hue family plus three darker grays) by Euclidean
distance in RGB space.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .conversions import RGB, hex_to_rgb


@dataclass(frozen=True)
class Swatch:
    """A reference swatch with its class label."""
    hex: str
    label: str
    rgb: RGB = field(init=False)

    def __post_init__(self):
        # Frozen dataclass, so bypass __setattr__ for the derived field
        object.__setattr__(self, "rgb", hex_to_rgb(self.hex, strict=True))


# Table order is the tie-break order: the first minimum wins
SWATCH_TABLE: Tuple[Swatch, ...] = (
    Swatch("#ef4444", "bg-red-500"),
    Swatch("#f97316", "bg-orange-500"),
    Swatch("#eab308", "bg-yellow-500"),
    Swatch("#84cc16", "bg-lime-500"),
    Swatch("#22c55e", "bg-green-500"),
    Swatch("#10b981", "bg-emerald-500"),
    Swatch("#14b8a6", "bg-teal-500"),
    Swatch("#06b6d4", "bg-cyan-500"),
    Swatch("#3b82f6", "bg-blue-500"),
    Swatch("#6366f1", "bg-indigo-500"),
    Swatch("#8b5cf6", "bg-violet-500"),
    Swatch("#a855f7", "bg-purple-500"),
    Swatch("#d946ef", "bg-fuchsia-500"),
    Swatch("#ec4899", "bg-pink-500"),
    Swatch("#f43f5e", "bg-rose-500"),
    Swatch("#6b7280", "bg-gray-500"),
    Swatch("#374151", "bg-gray-700"),
    Swatch("#1f2937", "bg-gray-800"),
    Swatch("#111827", "bg-gray-900"),
)

SWATCH_LABELS: Tuple[str, ...] = tuple(swatch.label for swatch in SWATCH_TABLE)


def swatch_distance(rgb_a: RGB, rgb_b: RGB) -> float:
    """Euclidean distance between two RGB colors."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb_a, rgb_b)))


def nearest_swatch(hex_color: str, strict: bool = False) -> str:
    """
    Return the class label of the reference swatch closest to ``hex_color``.

    Args:
        hex_color: Color to classify
        strict: Raise on malformed input instead of classifying black

    Returns:
        Swatch label such as ``"bg-red-500"``
    """
    rgb = hex_to_rgb(hex_color, strict=strict)

    best_label = SWATCH_TABLE[0].label
    min_distance = math.inf
    for swatch in SWATCH_TABLE:
        distance = swatch_distance(rgb, swatch.rgb)
        if distance < min_distance:
            min_distance = distance
            best_label = swatch.label

    return best_label


def rank_swatches(hex_color: str, limit: Optional[int] = None,
                  strict: bool = False) -> List[Tuple[Swatch, float]]:
    """
    Rank reference swatches by distance to ``hex_color``.

    Ties keep table order, so the first entry always agrees with
    ``nearest_swatch``.

    Args:
        hex_color: Color to classify
        limit: Maximum number of entries to return (all when None)
        strict: Raise on malformed input instead of ranking black

    Returns:
        List of (swatch, distance) pairs, nearest first
    """
    rgb = hex_to_rgb(hex_color, strict=strict)
    ranked = sorted(
        ((swatch, swatch_distance(rgb, swatch.rgb)) for swatch in SWATCH_TABLE),
        key=lambda pair: pair[1]
    )
    return ranked if limit is None else ranked[:limit]
