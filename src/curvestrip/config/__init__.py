"""Configuration management for curvestrip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TessellationConfig: Curve tessellation settings
- RenderConfig: Rasterization settings
- LoggingConfig: Logging settings
- CurvestripSettings: Main application settings
"""

from curvestrip.config.settings import (
    CurvestripSettings,
    LoggingConfig,
    RenderConfig,
    TessellationConfig,
    get_default_settings,
)

__all__ = [
    "CurvestripSettings",
    "LoggingConfig",
    "RenderConfig",
    "TessellationConfig",
    "get_default_settings",
]
