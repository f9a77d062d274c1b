"""
Palette Studio Configuration
Manages environment variables and defaults for the palette services.
"""
import os

from dotenv import load_dotenv

# Values below are read once at import time
load_dotenv()


class Config:
    """Configuration class for Palette Studio services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTE_STUDIO_LOG_LEVEL", "INFO")

    # Hex parsing policy: 0 falls back to black, 1 raises MalformedColorError
    STRICT_HEX_PARSING: bool = bool(int(os.environ.get("PALETTE_STUDIO_STRICT_HEX", "0")))

    # Image input limits
    MAX_FILE_MB: int = int(os.environ.get("PALETTE_STUDIO_MAX_FILE_MB", "10"))

    # Dominant color extraction defaults
    EXTRACT_K: int = int(os.environ.get("PALETTE_STUDIO_EXTRACT_K", "5"))
    EXTRACT_MAX_EDGE: int = int(os.environ.get("PALETTE_STUDIO_EXTRACT_MAX_EDGE", "256"))
    EXTRACT_MAX_SAMPLES: int = int(os.environ.get("PALETTE_STUDIO_EXTRACT_MAX_SAMPLES", "20000"))
    EXTRACT_SEED: int = int(os.environ.get("PALETTE_STUDIO_EXTRACT_SEED", "42"))

    # Alpha below this counts as a transparent pixel
    ALPHA_THRESHOLD: int = 128

    @classmethod
    def validate_k(cls, k: int) -> bool:
        """Validate number of extracted colors."""
        return 1 <= k <= 12

    @classmethod
    def validate_max_edge(cls, max_edge: int) -> bool:
        """Validate downscale edge size."""
        return 16 <= max_edge <= 4096


# Global config instance
config = Config()
