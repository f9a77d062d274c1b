"""
Dominant color extraction.

Defines the ColorExtractor capability (image bytes -> hex list) that palette
flows depend on, and a MiniBatchKMeans quantizer implementing it.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Optional, Union

import numpy as np
from loguru import logger
from sklearn.cluster import MiniBatchKMeans

from palette_studio.config import config
from palette_studio.services.imaging import load_image_pixels
from .conversions import rgb_to_hex

PaletteEntry = Dict[str, Union[str, float]]


class ColorExtractor(ABC):
    """Produces the dominant colors of an encoded image."""

    @abstractmethod
    def extract(self, image_bytes: bytes) -> List[str]:
        """Return dominant colors as ``#rrggbb`` strings, most dominant first."""


def sample_pixels(pixels_rgb_u8: np.ndarray, max_samples: int, rng_seed: int = 42) -> np.ndarray:
    """
    Downsample pixels deterministically.

    Args:
        pixels_rgb_u8: RGB pixels (N, 3) uint8
        max_samples: Maximum number of pixels to keep
        rng_seed: Random seed for deterministic sampling

    Returns:
        At most ``max_samples`` pixels
    """
    count = pixels_rgb_u8.shape[0]
    if count <= max_samples:
        return pixels_rgb_u8

    rng = np.random.default_rng(rng_seed)
    indices = rng.choice(count, size=max_samples, replace=False)
    logger.debug(f"Downsampled {count} pixels to {max_samples}")
    return pixels_rgb_u8[indices]


def _count_exact_colors(pixels_rgb_u8: np.ndarray) -> List[PaletteEntry]:
    colors, counts = np.unique(pixels_rgb_u8, axis=0, return_counts=True)
    total = int(counts.sum())
    order = np.argsort(-counts, kind="stable")
    return [
        {"hex": rgb_to_hex(*(int(c) for c in colors[i])), "ratio": float(counts[i] / total)}
        for i in order
    ]


def cluster_palette(pixels_rgb_u8: np.ndarray, k: int = 5, rng_seed: int = 42) -> List[PaletteEntry]:
    """
    Quantize pixels into at most ``k`` dominant colors.

    When the pixels hold ``k`` or fewer distinct colors they are counted
    exactly instead of clustered.

    Args:
        pixels_rgb_u8: RGB pixels (N, 3) uint8
        k: Maximum number of colors
        rng_seed: Random seed for deterministic clustering

    Returns:
        List of {"hex": str, "ratio": float} entries sorted by ratio, descending

    Raises:
        ValueError: If there are no pixels
        RuntimeError: If clustering fails
    """
    if pixels_rgb_u8.shape[0] == 0:
        raise ValueError("No pixels to cluster")

    n_unique = np.unique(pixels_rgb_u8, axis=0).shape[0]
    if n_unique <= k:
        logger.info(f"Image has {n_unique} distinct colors, counting exactly")
        return _count_exact_colors(pixels_rgb_u8)

    logger.info(f"Starting clustering with k={k}, {len(pixels_rgb_u8)} pixels")

    try:
        kmeans = MiniBatchKMeans(
            n_clusters=k,
            random_state=rng_seed,
            batch_size=min(2048, len(pixels_rgb_u8)),
            n_init=3,
            max_iter=100
        )
        labels = kmeans.fit_predict(pixels_rgb_u8.astype(np.float32))
    except Exception as e:
        logger.error(f"Clustering failed: {str(e)}")
        raise RuntimeError(f"K-means clustering failed: {str(e)}")

    label_counts = Counter(labels.tolist())
    total_pixels = len(labels)

    # Centers are recomputed as member means so they are real observed averages
    cluster_stats = []
    for i in range(k):
        count = label_counts.get(i, 0)
        if count == 0:
            continue
        center = np.rint(pixels_rgb_u8[labels == i].mean(axis=0)).astype(np.uint8)
        cluster_stats.append((count / total_pixels, center, i))

    cluster_stats.sort(key=lambda stat: (-stat[0], stat[2]))

    palette = [
        {"hex": rgb_to_hex(*(int(c) for c in center)), "ratio": float(ratio)}
        for ratio, center, _ in cluster_stats
    ]

    ratios_str = [f"{p['ratio']:.3f}" for p in palette]
    logger.info(f"Clustering successful: {ratios_str}")
    return palette


class KMeansColorExtractor(ColorExtractor):
    """Dominant colors by MiniBatchKMeans quantization of the image pixels."""

    def __init__(self, k: Optional[int] = None, max_edge: Optional[int] = None,
                 max_samples: Optional[int] = None, rng_seed: Optional[int] = None):
        self.k = config.EXTRACT_K if k is None else k
        self.max_edge = config.EXTRACT_MAX_EDGE if max_edge is None else max_edge
        self.max_samples = config.EXTRACT_MAX_SAMPLES if max_samples is None else max_samples
        self.rng_seed = config.EXTRACT_SEED if rng_seed is None else rng_seed

        if not config.validate_k(self.k):
            raise ValueError(f"k must be between 1 and 12, got {self.k}")
        if not config.validate_max_edge(self.max_edge):
            raise ValueError(f"max_edge must be between 16 and 4096, got {self.max_edge}")
        if self.max_samples < 1:
            raise ValueError(f"max_samples must be positive, got {self.max_samples}")

    def extract_palette(self, image_bytes: bytes) -> List[PaletteEntry]:
        """
        Extract dominant colors with their dominance ratios.

        Returns:
            List of {"hex": str, "ratio": float} entries, most dominant first
        """
        pixels = load_image_pixels(image_bytes, max_edge=self.max_edge)
        logger.info(f"Extracted {pixels.shape[0]} opaque pixels")

        pixels = sample_pixels(pixels, self.max_samples, rng_seed=self.rng_seed)
        return cluster_palette(pixels, k=self.k, rng_seed=self.rng_seed)

    def extract(self, image_bytes: bytes) -> List[str]:
        return [entry["hex"] for entry in self.extract_palette(image_bytes)]
