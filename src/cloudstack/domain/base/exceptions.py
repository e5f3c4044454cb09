# src/cloudstack/domain/base/exceptions.py
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException, ValueError):
    """Raised when a record cannot be built from the supplied values."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResponseParseError(DomainException):
    """Raised when a response envelope does not have the expected shape."""
    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class CloudStackApiError(DomainException):
    """Raised when a response envelope carries an API error instead of data."""
    def __init__(self, error_code: Optional[int], error_text: Optional[str],
                 command: Optional[str] = None):
        super().__init__(
            f"CloudStack error {error_code}: {error_text}"
        )
        self.error_code = error_code
        self.error_text = error_text
        self.command = command


class ConfigurationError(DomainException):
    """Raised when the library configuration cannot be loaded or validated."""
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(f"{message} ({source})" if source else message)
        self.source = source
