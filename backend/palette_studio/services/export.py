"""
Palette Export
Builds the JSON documents for a single palette and for the combined bundle.
"""
import json
import re
from datetime import datetime, timezone
from typing import List, Optional, Union

from palette_studio.schemas import (
    DEFAULT_TITLES, ColorRecord, PaletteBundle, PaletteExport, PaletteSection,
    PaletteSource, PaletteStyle
)

BUNDLE_FILENAME = "complete-color-palettes.json"

_WHITESPACE_RE = re.compile(r"\s+")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def build_palette_export(
    colors: List[ColorRecord],
    style: Union[PaletteStyle, str],
    title: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> PaletteExport:
    """
    Build the export document for one palette.

    Args:
        colors: Described colors in display order
        style: "material" or "tailwind"
        title: Palette title (default depends on style)
        generated_at: Export timestamp (default now, UTC)

    Returns:
        PaletteExport document
    """
    style = PaletteStyle(style)
    return PaletteExport(
        title=title or DEFAULT_TITLES[style],
        type=style,
        colors=list(colors),
        generated_at=generated_at or _now(),
    )


def build_bundle(
    material: List[ColorRecord],
    tailwind: List[ColorRecord],
    source: Union[PaletteSource, str],
    generated_at: Optional[datetime] = None
) -> PaletteBundle:
    """
    Build the combined export of both palette flavours.

    Args:
        material: Records without swatch classes
        tailwind: Records with swatch classes
        source: "Image Upload" or "Random Generation"
        generated_at: Export timestamp (default now, UTC)

    Returns:
        PaletteBundle document
    """
    return PaletteBundle(
        material_design=PaletteSection(
            title=DEFAULT_TITLES[PaletteStyle.MATERIAL], colors=list(material)
        ),
        tailwind_css=PaletteSection(
            title=DEFAULT_TITLES[PaletteStyle.TAILWIND], colors=list(tailwind)
        ),
        generated_at=generated_at or _now(),
        source=PaletteSource(source),
    )


def to_json(document: Union[PaletteExport, PaletteBundle]) -> str:
    """Serialize an export document with 2-space indentation."""
    return json.dumps(document.model_dump(mode="json", by_alias=True), indent=2)


def palette_filename(title: str) -> str:
    """Suggested file name for a single palette export."""
    return f"{_WHITESPACE_RE.sub('-', title.lower())}-palette.json"
