"""
Palette Studio Orchestrator
Runs the image-upload and random-generation flows end to end, producing both
palette flavours of the same dominant colors.
"""
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

from palette_studio.config import config
from palette_studio.schemas import ColorRecord, PaletteBundle, PaletteSource
from palette_studio.services.colors.extraction import ColorExtractor, KMeansColorExtractor
from palette_studio.services.colors.palette import (
    RandomSource, build_material_palette, build_tailwind_palette, synthesize_palette
)
from palette_studio.services.export import build_bundle
from palette_studio.utils.ids import generate_request_id
from palette_studio.utils.logging import get_logger


@dataclass
class PaletteResult:
    """Both palette flavours produced by one run."""
    request_id: str
    source: PaletteSource
    dominant_colors: List[str]
    material: List[ColorRecord]
    tailwind: List[ColorRecord]
    timings_ms: dict = field(default_factory=dict)

    def to_bundle(self, generated_at: Optional[datetime] = None) -> PaletteBundle:
        """Export document holding both flavours."""
        return build_bundle(self.material, self.tailwind, self.source, generated_at=generated_at)


class PaletteOrchestrator:
    """Main orchestrator for palette generation flows."""

    def __init__(self, extractor: Optional[ColorExtractor] = None, strict: Optional[bool] = None):
        self.extractor = extractor or KMeansColorExtractor()
        self.strict = config.STRICT_HEX_PARSING if strict is None else strict
        self.log = get_logger()

    def from_hex_list(self, hex_list: List[str],
                      source: Union[PaletteSource, str] = PaletteSource.IMAGE_UPLOAD,
                      request_id: Optional[str] = None) -> PaletteResult:
        """
        Describe already known dominant colors.

        Args:
            hex_list: Dominant colors, most dominant first
            source: Where the colors came from
            request_id: Correlation ID (generated when omitted)

        Returns:
            PaletteResult with material and tailwind records

        Raises:
            MalformedColorError: In strict mode, for the first malformed color
        """
        hex_list = list(hex_list)
        request_id = request_id or generate_request_id("pal")
        start_time = time.time()

        material = build_material_palette(hex_list, strict=self.strict)
        tailwind = build_tailwind_palette(hex_list, strict=self.strict)

        elapsed_ms = (time.time() - start_time) * 1000
        self.log.info("Palettes generated", extra={
            "request_id": request_id,
            "colors": len(material),
            "ms_describe": round(elapsed_ms, 2)
        })

        return PaletteResult(
            request_id=request_id,
            source=PaletteSource(source),
            dominant_colors=list(hex_list),
            material=material,
            tailwind=tailwind,
            timings_ms={"describe": elapsed_ms},
        )

    def from_image(self, image_bytes: bytes) -> PaletteResult:
        """
        Extract dominant colors from an image and describe them.

        Raises:
            ValueError: If the image cannot be decoded
            RuntimeError: If color extraction fails
        """
        request_id = generate_request_id("img")
        self.log.info("Analyzing image colors", extra={
            "request_id": request_id,
            "bytes": len(image_bytes)
        })

        start_time = time.time()
        try:
            dominant_colors = self.extractor.extract(image_bytes)
        except (ValueError, RuntimeError) as e:
            self.log.error(f"Failed to process image: {str(e)}", extra={"request_id": request_id})
            raise
        extract_ms = (time.time() - start_time) * 1000

        result = self.from_hex_list(dominant_colors, PaletteSource.IMAGE_UPLOAD, request_id)
        result.timings_ms["extract"] = extract_ms
        return result

    def random_palette(self, rng: RandomSource = None) -> PaletteResult:
        """
        Synthesize a random balanced palette and describe it.

        Args:
            rng: numpy Generator, integer seed, or None for fresh entropy
        """
        request_id = generate_request_id("rnd")
        self.log.info("Generating random palette", extra={"request_id": request_id})

        dominant_colors = synthesize_palette(rng)
        return self.from_hex_list(dominant_colors, PaletteSource.RANDOM_GENERATION, request_id)
