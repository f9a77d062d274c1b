"""
Palette Studio

Turns dominant colors into described palettes (hex, RGB, HSL, a readable
name and an optional swatch class) and synthesizes balanced palettes from a
random hue seed.
"""

__version__ = "1.0.0"
