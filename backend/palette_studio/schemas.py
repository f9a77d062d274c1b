"""
Palette Studio Schemas
Pydantic models for color records and the palette export documents.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from palette_studio.services.colors.conversions import format_hsl, format_rgb

Channel = Annotated[int, Field(ge=0, le=255)]
Hue = Annotated[int, Field(ge=0, lt=360)]
Percent = Annotated[int, Field(ge=0, le=100)]


class PaletteStyle(str, Enum):
    """Palette flavours: plain descriptions or with swatch classes."""
    MATERIAL = "material"
    TAILWIND = "tailwind"


DEFAULT_TITLES = {
    PaletteStyle.MATERIAL: "Material Design Palette",
    PaletteStyle.TAILWIND: "Tailwind CSS Palette",
}


class PaletteSource(str, Enum):
    """Where the dominant colors of a bundle came from."""
    IMAGE_UPLOAD = "Image Upload"
    RANDOM_GENERATION = "Random Generation"


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ============================================================================
# COLOR RECORD
# ============================================================================

class ColorRecord(BaseModel):
    """A fully described color."""
    model_config = ConfigDict(frozen=True)

    hex: str = Field(
        ...,
        pattern=r"^#[0-9a-f]{6}$",
        description="Canonical lowercase hex code in format #rrggbb"
    )
    rgb: Tuple[Channel, Channel, Channel] = Field(..., description="RGB channels 0-255")
    hsl: Tuple[Hue, Percent, Percent] = Field(
        ...,
        description="Hue in degrees [0, 360), saturation and lightness in percent"
    )
    name: str = Field(..., min_length=1, description="Human-readable color name")
    class_label: Optional[str] = Field(
        None,
        description="Nearest reference swatch class (classification pipelines only)"
    )

    @property
    def rgb_string(self) -> str:
        return format_rgb(self.rgb)

    @property
    def hsl_string(self) -> str:
        return format_hsl(self.hsl)

    def to_export_dict(self) -> Dict[str, Any]:
        """Serialize in the exported document shape."""
        entry = {
            "hex": self.hex,
            "rgb": self.rgb_string,
            "hsl": self.hsl_string,
            "name": self.name,
        }
        if self.class_label is not None:
            entry["tailwindClass"] = self.class_label
        return entry


# ============================================================================
# EXPORT DOCUMENTS
# ============================================================================

class PaletteExport(BaseModel):
    """A single downloadable palette."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="Palette title")
    type: PaletteStyle = Field(..., description="Palette flavour")
    colors: List[ColorRecord] = Field(..., description="Ordered color records")
    generated_at: datetime = Field(..., alias="generatedAt")

    @field_serializer("colors")
    def _serialize_colors(self, colors: List[ColorRecord]) -> List[Dict[str, Any]]:
        return [color.to_export_dict() for color in colors]

    @field_serializer("generated_at")
    def _serialize_generated_at(self, value: datetime) -> str:
        return format_timestamp(value)


class PaletteSection(BaseModel):
    """Titled palette inside a bundle."""
    title: str
    colors: List[ColorRecord]

    @field_serializer("colors")
    def _serialize_colors(self, colors: List[ColorRecord]) -> List[Dict[str, Any]]:
        return [color.to_export_dict() for color in colors]


class PaletteBundle(BaseModel):
    """Both palette flavours of the same colors, exported together."""
    model_config = ConfigDict(populate_by_name=True)

    material_design: PaletteSection = Field(..., alias="materialDesign")
    tailwind_css: PaletteSection = Field(..., alias="tailwindCSS")
    generated_at: datetime = Field(..., alias="generatedAt")
    source: PaletteSource

    @field_serializer("generated_at")
    def _serialize_generated_at(self, value: datetime) -> str:
        return format_timestamp(value)
