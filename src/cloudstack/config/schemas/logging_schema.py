"""Logging configuration schema."""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/cloudstack.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: Literal["file", "stdout", "both"] = Field(
        "stdout", description="Where log records are written"
    )
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LEVELS)}")
        return level
