"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .parser_schema import ParserConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    parser: ParserConfig = Field(default_factory=lambda: ParserConfig())
    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a raw dictionary."""
        return cls.model_validate(data)
