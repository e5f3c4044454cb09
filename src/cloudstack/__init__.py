"""Typed records for the CloudStack API wire format."""

__version__ = "1.0.0"
