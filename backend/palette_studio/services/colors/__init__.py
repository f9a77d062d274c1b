"""
Palette Studio Colors Module

Provides color space conversions, color naming, swatch classification,
palette building and synthesis, and dominant color extraction from images.
"""

__version__ = "1.0.0"
