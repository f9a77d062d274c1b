"""
Palette Studio Imaging Utilities
Handles image decoding, size checks and pixel preparation for color extraction.
"""
import io
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from palette_studio.config import config


def validate_image_bytes(image_bytes: bytes, max_file_mb: Optional[int] = None) -> None:
    """
    Validate raw image bytes before decoding.

    Args:
        image_bytes: Encoded image data
        max_file_mb: Size limit in megabytes (default from config)

    Raises:
        ValueError: For empty or oversized input
    """
    if max_file_mb is None:
        max_file_mb = config.MAX_FILE_MB

    if not image_bytes:
        raise ValueError("Empty image data")

    if len(image_bytes) > max_file_mb * 1024 * 1024:
        raise ValueError(f"File too large. Maximum size: {max_file_mb}MB")


def decode_image(image_bytes: bytes) -> Image.Image:
    """
    Decode image bytes with Pillow.

    Returns:
        RGBA PIL image

    Raises:
        ValueError: If the data is not a readable image
    """
    validate_image_bytes(image_bytes)

    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Failed to decode image: {str(e)}")

    return image.convert("RGBA")


def load_image_pixels(image_bytes: bytes, max_edge: Optional[int] = None,
                      alpha_threshold: Optional[int] = None) -> np.ndarray:
    """
    Decode an image and return its opaque pixels.

    Args:
        image_bytes: Encoded image data
        max_edge: Longest edge after downscaling (default from config)
        alpha_threshold: Pixels with alpha below this are dropped

    Returns:
        RGB pixels array (N, 3) uint8

    Raises:
        ValueError: If the image cannot be decoded or has no opaque pixels
    """
    if max_edge is None:
        max_edge = config.EXTRACT_MAX_EDGE
    if alpha_threshold is None:
        alpha_threshold = config.ALPHA_THRESHOLD

    image = decode_image(image_bytes)

    # thumbnail() keeps aspect ratio and never upscales
    image.thumbnail((max_edge, max_edge), Image.Resampling.LANCZOS)

    rgba = np.asarray(image, dtype=np.uint8).reshape(-1, 4)
    pixels = rgba[rgba[:, 3] >= alpha_threshold, :3]

    if pixels.shape[0] == 0:
        raise ValueError("Image has no opaque pixels")

    return np.ascontiguousarray(pixels)
