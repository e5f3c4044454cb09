"""Base domain layer - shared kernel for all CloudStack record contexts."""

from .builder import RecordBuilder
from .codecs import (
    TagSet,
    UnlimitedCount,
    WireDate,
    decode_tags,
    encode_tags,
    format_wire_date,
    natural_key,
    parse_unlimited,
    parse_wire_date,
)
from .exceptions import (
    CloudStackApiError,
    ConfigurationError,
    DomainException,
    ResponseParseError,
    ValidationError,
)
from .record import CloudStackRecord, is_wire_context
from .wire_enum import (
    CaseFormat,
    CodeEnum,
    LowerCaseEnum,
    LowerHyphenEnum,
    NameEnum,
    UpperCamelEnum,
    WireEnum,
)

__all__ = [
    # Records
    "CloudStackRecord",
    "RecordBuilder",
    "is_wire_context",
    # Enums
    "CaseFormat",
    "WireEnum",
    "UpperCamelEnum",
    "LowerHyphenEnum",
    "LowerCaseEnum",
    "NameEnum",
    "CodeEnum",
    # Codecs
    "TagSet",
    "UnlimitedCount",
    "WireDate",
    "decode_tags",
    "encode_tags",
    "parse_unlimited",
    "parse_wire_date",
    "format_wire_date",
    "natural_key",
    # Exceptions
    "DomainException",
    "ValidationError",
    "ResponseParseError",
    "CloudStackApiError",
    "ConfigurationError",
]
