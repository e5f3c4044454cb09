"""Configuration management for the library."""
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from cloudstack.config.schemas import AppConfig, LoggingConfig, ParserConfig
from cloudstack.config.utils.env_expansion import expand_config_env_vars
from cloudstack.domain.base.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "CLOUDSTACK_DOMAIN_CONFIG"
LOG_LEVEL_ENV = "CLOUDSTACK_LOG_LEVEL"


class ConfigurationManager:
    """
    Single source of truth for library configuration.

    Configuration is read lazily on first access from, in order of
    precedence:
    - the ``config_file`` argument
    - the file named by ``CLOUDSTACK_DOMAIN_CONFIG``
    - built-in defaults

    String values get environment variable expansion, and
    ``CLOUDSTACK_LOG_LEVEL`` overrides the configured log level.
    """

    _TYPE_MAPPING = {
        "LoggingConfig": "logging",
        "ParserConfig": "parser",
    }

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_config_file_path(self) -> Optional[str]:
        """Path of the configuration file in effect, if any."""
        return self._config_file or os.environ.get(CONFIG_FILE_ENV)

    def _load_app_config(self) -> AppConfig:
        path = self.get_config_file_path()
        config_data: Dict[str, Any] = {}
        if path:
            config_data = self._load_file(path)
        else:
            logger.debug("No configuration file given, using defaults")

        config_data = self._apply_environment_overrides(expand_config_env_vars(config_data))

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", path) from e

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigurationError("Configuration file not found", path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to read configuration: {e}", path) from e
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a JSON object", path)
        logger.info("Loaded configuration from %s", path)
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            logging_section = dict(config_data.get("logging") or {})
            logging_section["level"] = level
            config_data = {**config_data, "logging": logging_section}
        return config_data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        config_name = config_type.__name__
        if config_name not in self._TYPE_MAPPING:
            raise ValueError(f"Unknown configuration type: {config_name}")
        return getattr(self.app_config, self._TYPE_MAPPING[config_name])

    def get_logging_config(self) -> LoggingConfig:
        return self.get_typed(LoggingConfig)

    def get_parser_config(self) -> ParserConfig:
        return self.get_typed(ParserConfig)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
