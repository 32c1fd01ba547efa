"""Configuration settings for bezkit."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class AlignmentMode(str, Enum):
    """How dash lengths are laid out along a path."""

    BASIC = "basic"
    ALIGNED = "aligned"
    INFER = "infer"


class StrokeCap(str, Enum):
    """Stroke line cap."""

    BUTT = "butt"
    ROUND = "round"
    PROJECTING = "projecting"


class StrokeJoin(str, Enum):
    """Stroke line join."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class GeometryConfig(BaseModel):
    """Tolerances for length measurement and corner detection."""

    corner_angle: float = Field(
        default=135.0,
        gt=0.0,
        le=180.0,
        description="Turn angles sharper than this (in degrees) end a section",
    )
    length_tolerance: float = Field(
        default=0.001,
        gt=0.0,
        le=1.0,
        description="Absolute length error accepted by the length-to-parameter search",
    )
    search_iterations: int = Field(
        default=30,
        ge=1,
        le=100,
        description="Maximum bisection steps of the length-to-parameter search",
    )


class DashConfig(BaseModel):
    """Configuration for dash generation."""

    pattern: list[float] = Field(
        default_factory=lambda: [12.0, 6.0],
        min_length=1,
        description="Alternating dash and gap lengths",
    )
    alignment: AlignmentMode = Field(
        default=AlignmentMode.BASIC,
        description="Dash layout: basic, aligned to corners, or inferred from the host",
    )


class StrokeStyle(BaseModel):
    """Stroke presentation passed through to the drawing side unchanged."""

    cap: StrokeCap = Field(default=StrokeCap.BUTT, description="Line cap")
    join: StrokeJoin = Field(default=StrokeJoin.MITER, description="Line join")
    miter_limit: float = Field(default=4.0, ge=1.0, description="Miter limit")
    width: float = Field(default=1.0, gt=0.0, description="Stroke width")
    color: str | None = Field(default=None, description="Stroke color (None = not stroked)")


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


class BezkitSettings(BaseModel):
    """Main application settings."""

    dash: DashConfig = Field(default_factory=DashConfig)
    stroke: StrokeStyle = Field(default_factory=StrokeStyle)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BezkitSettings:
    """Get default application settings."""
    return BezkitSettings()
