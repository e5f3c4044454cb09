"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LogFileConfig, LoggingConfig
from .parser_schema import ParserConfig

__all__ = ["AppConfig", "LoggingConfig", "LogFileConfig", "ParserConfig"]
