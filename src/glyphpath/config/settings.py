"""Configuration settings for glyphpath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Logging level accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoadConfig(BaseModel):
    """Configuration for opening fonts and loading glyphs."""

    face_index: int = Field(
        default=0,
        ge=0,
        description="Face index inside the font file (collections hold several)",
    )


class FormatConfig(BaseModel):
    """Layout of the text a glyph path is rendered to.

    Widths are minimums: values longer than the field are printed in full.
    """

    ordinal_width: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Minimum width of the contour number",
    )
    coordinate_width: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Minimum width of each coordinate value",
    )
    contour_indent: int = Field(
        default=3,
        ge=0,
        le=20,
        description="Spaces before each contour header",
    )
    segment_indent: int = Field(
        default=6,
        ge=0,
        le=20,
        description="Spaces before each segment line",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console (stderr) log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    load: LoadConfig = Field(default_factory=LoadConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
