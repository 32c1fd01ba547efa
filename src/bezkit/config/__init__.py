"""Configuration management for bezkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DashConfig: Dash pattern and alignment settings
- StrokeStyle: Stroke presentation threaded through to dash paths
- GeometryConfig: Length and corner tolerances
- LoggingConfig: Logging settings
- BezkitSettings: Main application settings
"""

from bezkit.config.settings import (
    AlignmentMode,
    BezkitSettings,
    DashConfig,
    GeometryConfig,
    LoggingConfig,
    StrokeCap,
    StrokeJoin,
    StrokeStyle,
    get_default_settings,
)

__all__ = [
    "AlignmentMode",
    "BezkitSettings",
    "DashConfig",
    "GeometryConfig",
    "LoggingConfig",
    "StrokeCap",
    "StrokeJoin",
    "StrokeStyle",
    "get_default_settings",
]
