"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import AppConfig, LogFileConfig, LoggingConfig, ParserConfig

__all__ = [
    # Main configuration
    "AppConfig",
    # Specific configurations
    "LoggingConfig",
    "LogFileConfig",
    "ParserConfig",
    # Configuration management
    "ConfigurationManager",
]
