"""Configuration settings for curvestrip."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TessellationConfig(BaseModel):
    """Configuration for curve tessellation."""

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker processes used to tessellate curves (1 = in-process)",
    )
    samples_override: int | None = Field(
        default=None,
        ge=2,
        description="Replace the sample count of every Bezier and Catmull-Rom curve",
    )


class RenderConfig(BaseModel):
    """Configuration for rasterizing line strips."""

    line_width: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Stroke width in pixels",
    )


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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


class CurvestripSettings(BaseModel):
    """Main application settings."""

    tessellation: TessellationConfig = Field(default_factory=TessellationConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CurvestripSettings:
    """Get default application settings."""
    return CurvestripSettings()
