"""Serialization of CloudStack response envelopes."""

from .response_parser import (
    ResponseParser,
    get_default_parser,
    parse_async_create,
    parse_async_job,
    parse_list,
    parse_one,
    reset_default_parser,
)

__all__ = [
    "ResponseParser",
    "get_default_parser",
    "reset_default_parser",
    "parse_list",
    "parse_one",
    "parse_async_create",
    "parse_async_job",
]
