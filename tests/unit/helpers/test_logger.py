"""Tests for structured logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from cloudstack.config import LogFileConfig, LoggingConfig
from cloudstack.helpers.logger import DetailedFormatter, setup_logging


def test_file_destination_creates_log_dir(tmp_path, restore_root_logging):
    # Arrange
    log_path = tmp_path / "nested" / "logs" / "cloudstack.log"
    config = LoggingConfig(
        level="debug",
        destination="file",
        file=LogFileConfig(path=str(log_path), max_size_mb=1, backup_count=2),
    )

    # Act
    setup_logging(config)

    # Assert
    root = restore_root_logging
    assert log_path.parent.is_dir()
    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024 * 1024
    assert file_handlers[0].backupCount == 2


def test_stdout_destination_has_no_file_handler(tmp_path, restore_root_logging):
    config = LoggingConfig(destination="stdout", file=LogFileConfig(path=str(tmp_path / "x" / "a.log")))

    setup_logging(config)

    root = restore_root_logging
    assert not any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert len(root.handlers) == 1
    assert not (tmp_path / "x").exists()


def test_both_destinations(tmp_path, restore_root_logging):
    config = LoggingConfig(destination="both", file=LogFileConfig(path=str(tmp_path / "cs.log")))

    setup_logging(config)

    assert len(restore_root_logging.handlers) == 2


def test_stdlib_records_reach_log_file(tmp_path, restore_root_logging):
    # Arrange
    log_path = tmp_path / "cloudstack.log"
    config = LoggingConfig(level="INFO", destination="file", file=LogFileConfig(path=str(log_path)))
    setup_logging(config)

    # Act
    logging.getLogger("cloudstack.tests").info("parsed %d records", 3)
    for handler in restore_root_logging.handlers:
        handler.flush()

    # Assert
    content = log_path.read_text()
    assert "parsed 3 records" in content
    assert "INFO - cloudstack.tests" in content


def test_detailed_formatter_adds_caller_info():
    formatter = DetailedFormatter("%(caller_info)s %(message)s")
    record = logging.LogRecord(
        name="cloudstack", level=logging.INFO, pathname="/src/cloudstack/module.py",
        lineno=42, msg="hello", args=(), exc_info=None, func="handler",
    )

    assert formatter.format(record) == "module.handler:42 hello"
