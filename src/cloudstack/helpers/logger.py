import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from cloudstack.config.manager import ConfigurationManager
from cloudstack.config.schemas import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds ``module.function:line`` of the caller to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[LoggingConfig] = None,
                  name: str = "cloudstack") -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging using structlog on top of the stdlib root logger.

    Args:
        config: Logging configuration. If None, it is taken from
               ConfigurationManager (file, env vars, defaults).
        name: Name of the returned logger.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = ConfigurationManager().get_logging_config()

    log_path = os.path.expandvars(config.file.path)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    handlers = []

    if config.destination in ("file", "both"):
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(name)

    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_path=log_path,
    )

    return logger
