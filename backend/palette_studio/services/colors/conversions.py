"""
Color Space Conversions

Bidirectional hex <-> RGB <-> HSL conversions used by the palette builder.
HSL is expressed as hue in degrees [0, 360) and saturation/lightness as
percentages [0, 100]. Default HSL output is rounded to integers for display.
"""

import math
import re
from typing import Tuple, Union

from loguru import logger

RGB = Tuple[int, int, int]
HSL = Tuple[Union[int, float], Union[int, float], Union[int, float]]

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

# Returned by lenient parsing for any malformed input
FALLBACK_RGB: RGB = (0, 0, 0)


class MalformedColorError(ValueError):
    """Raised by strict parsing when a string is not a 6-digit hex color."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() is bankers')."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str, strict: bool = False) -> RGB:
    """
    Convert a hex color string to an RGB tuple.

    Accepts ``RRGGBB`` with an optional ``#`` prefix, case-insensitive.
    Shorthand (``#fff``), alpha channels and bad digits are format errors.

    Args:
        hex_color: Color string to parse
        strict: Raise on malformed input instead of falling back to black

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        MalformedColorError: If strict and the input does not match
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        if strict:
            raise MalformedColorError(hex_color)
        logger.warning(f"Malformed hex color {hex_color!r}, falling back to black")
        return FALLBACK_RGB

    return tuple(int(group, 16) for group in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to a lowercase ``#rrggbb`` string."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel out of range [0, 255]: {channel}")
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def normalize_hex(hex_color: str, strict: bool = False) -> str:
    """Return the canonical ``#rrggbb`` form of a hex color."""
    return rgb_to_hex(*hex_to_rgb(hex_color, strict=strict))


def rgb_to_hsl(r: int, g: int, b: int, precise: bool = False) -> HSL:
    """
    Convert RGB channels to HSL.

    Args:
        r, g, b: Channels in [0, 255]
        precise: Return unrounded floats instead of display integers

    Returns:
        (h, s, l) with h in degrees [0, 360), s and l in percent [0, 100]
    """
    r_n, g_n, b_n = r / 255.0, g / 255.0, b / 255.0

    c_max = max(r_n, g_n, b_n)
    c_min = min(r_n, g_n, b_n)
    lightness = (c_max + c_min) / 2

    if c_max == c_min:
        # achromatic
        hue = 0.0
        saturation = 0.0
    else:
        d = c_max - c_min
        if lightness > 0.5:
            saturation = d / (2 - c_max - c_min)
        else:
            saturation = d / (c_max + c_min)

        if c_max == r_n:
            hue = (g_n - b_n) / d + (6 if g_n < b_n else 0)
        elif c_max == g_n:
            hue = (b_n - r_n) / d + 2
        else:
            hue = (r_n - g_n) / d + 4
        hue /= 6

    if precise:
        return (hue * 360) % 360, saturation * 100, lightness * 100

    # A hue just under 360 rounds up to 360, which is the same angle as 0
    return (
        round_half_up(hue * 360) % 360,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB channels.

    Args:
        h: Hue in degrees, normalized modulo 360
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        RGB tuple (r, g, b) with values 0-255
    """
    h = h % 360
    s /= 100.0
    l /= 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return tuple(
        max(0, min(255, round_half_up((channel + m) * 255)))
        for channel in (r, g, b)
    )


def format_rgb(rgb: RGB) -> str:
    """Format an RGB tuple as ``rgb(r, g, b)``."""
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


def format_hsl(hsl: HSL) -> str:
    """Format an HSL tuple as ``hsl(h, s%, l%)``."""
    h, s, l = hsl
    return f"hsl({h}, {s}%, {l}%)"
