"""
Test configuration and fixtures for Palette Studio tests.
"""
import io
from typing import List, Tuple

import numpy as np
import pytest
from PIL import Image

from palette_studio.utils.logging import configure_logging

Block = Tuple[Tuple[int, ...], int]


@pytest.fixture(autouse=True, scope="session")
def configure_test_logging():
    """Bind the log sink before any test captures stderr."""
    configure_logging("DEBUG")


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_block_png():
    """
    Build a PNG made of vertical color blocks.

    Each block is (color, width); colors with four channels produce an RGBA
    image. Images stay small so no downscaling blends block edges.
    """
    def _make(blocks: List[Block], height: int = 10) -> bytes:
        mode = "RGBA" if any(len(color) == 4 for color, _ in blocks) else "RGB"
        width = sum(block_width for _, block_width in blocks)
        image = Image.new(mode, (width, height))

        x = 0
        for color, block_width in blocks:
            if mode == "RGBA" and len(color) == 3:
                color = tuple(color) + (255,)
            image.paste(tuple(color), (x, 0, x + block_width, height))
            x += block_width
        return encode_png(image)

    return _make


@pytest.fixture
def noisy_two_color_png():
    """100x10 PNG: 60% noisy red around (200, 30, 30), 40% noisy blue around (30, 30, 200)."""
    rng = np.random.default_rng(0)
    pixels = np.zeros((10, 100, 3), dtype=np.int16)
    pixels[:, :60] = (200, 30, 30)
    pixels[:, 60:] = (30, 30, 200)
    pixels += rng.integers(-10, 11, size=pixels.shape, dtype=np.int16)
    image = Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))
    return encode_png(image)


@pytest.fixture
def seeded_rng():
    """Deterministic numpy generator."""
    return np.random.default_rng(1234)
