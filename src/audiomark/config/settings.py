"""Configuration settings for Audiomark."""

from pathlib import Path

from pydantic import BaseModel, Field


class SymbolConfig(BaseModel):
    """Configuration for symbol rendering."""

    size_pt: float = Field(
        default=10.0,
        gt=0.0,
        le=72.0,
        description="Symbol size in points (bounding box side, or font size for text symbols)",
    )
    step_mm: float = Field(
        default=6.0,
        gt=0.0,
        description="Horizontal distance between symbols in a row",
    )
    stroke_width_pt: float = Field(
        default=0.75,
        ge=0.0,
        le=5.0,
        description="Outline stroke width",
    )
    bold_stroke_factor: float = Field(
        default=2.0,
        ge=1.0,
        le=4.0,
        description="Stroke width multiplier for filled variants drawn as open strokes",
    )
    neutral_stroke_width_pt: float = Field(
        default=0.0,
        ge=0.0,
        description="Stroke width restored after each symbol (0 = thinnest line)",
    )

    @property
    def bold_stroke_width_pt(self) -> float:
        """Stroke width for filled open-stroke symbols."""
        return self.stroke_width_pt * self.bold_stroke_factor


class ShapeConfig(BaseModel):
    """Configuration for form outlines (input boxes)."""

    stroke_width_pt: float = Field(
        default=0.75,
        ge=0.0,
        le=5.0,
        description="Outline stroke width",
    )
    corner_radius_mm: float = Field(
        default=4.0,
        ge=0.0,
        description="Corner radius of rounded rectangles",
    )


class TextConfig(BaseModel):
    """Configuration for captions."""

    font_path: Path | None = Field(
        default=None,
        description="TrueType font for captions (None = standard Helvetica)",
    )
    caption_font: str = Field(
        default="Helvetica",
        description="Standard PDF font used for captions when no font file is given",
    )
    symbol_font: str = Field(
        default="Helvetica",
        description="Font used for text symbols (S, U, A, VT)",
    )
    caption_size_pt: float = Field(
        default=10.0,
        gt=0.0,
        le=72.0,
        description="Caption font size",
    )


class PageConfig(BaseModel):
    """Page geometry (defaults to US Letter)."""

    width_mm: float = Field(default=215.9, gt=0.0)
    height_mm: float = Field(default=279.4, gt=0.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AudiomarkSettings(BaseModel):
    """Main application settings."""

    symbol: SymbolConfig = Field(default_factory=SymbolConfig)
    shape: ShapeConfig = Field(default_factory=ShapeConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AudiomarkSettings:
    """Get default application settings."""
    return AudiomarkSettings()
