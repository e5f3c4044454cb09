"""Compute context enumerations."""
from enum import auto
from typing import Any

from cloudstack.domain.base.wire_enum import LowerCaseEnum, NameEnum, UpperCamelEnum

# Free-text template statuses the management server reports while a
# template or ISO is still being fetched.
_DOWNLOADING_TEXT = frozenset({"Processing", "Installing Template", "Installing ISO"})
_DOWNLOADED_TEXT = "Download Complete"
_PERCENT_DOWNLOADED_SUFFIX = "% Downloaded"


class VirtualMachineState(UpperCamelEnum):
    """
    Label of a VM's lifecycle state.

    The usual path is STARTING, RUNNING, STOPPING, STOPPED and then
    DESTROYED or EXPUNGING; ERROR, UNKNOWN and MIGRATING are side states.
    Transitions are owned by the management server.
    """
    STARTING = auto()
    RUNNING = auto()
    STOPPING = auto()
    STOPPED = auto()
    DESTROYED = auto()
    EXPUNGING = auto()
    MIGRATING = auto()
    ERROR = auto()
    UNKNOWN = auto()
    SHUTDOWNED = auto()
    UNRECOGNIZED = auto()


class TemplateStatus(NameEnum):
    """
    Download or extraction status of a template.

    The server reports this as free text; the known phrases are mapped onto
    members, an empty status is UNKNOWN, and any other text that is not a
    member name is UNRECOGNIZED.
    """
    UNKNOWN = auto()
    ABANDONED = auto()
    DOWNLOAD_ERROR = auto()
    NOT_DOWNLOADED = auto()
    DOWNLOAD_IN_PROGRESS = auto()
    DOWNLOADED = auto()
    UPLOADED = auto()
    NOT_UPLOADED = auto()
    UPLOAD_ERROR = auto()
    UPLOAD_IN_PROGRESS = auto()
    UNRECOGNIZED = auto()

    @classmethod
    def from_value(cls, value: Any) -> "TemplateStatus":
        if isinstance(value, cls):
            return value
        if not value:
            return cls.UNKNOWN
        text = str(value)
        if text in _DOWNLOADING_TEXT or text.endswith(_PERCENT_DOWNLOADED_SUFFIX):
            return cls.DOWNLOAD_IN_PROGRESS
        if text == _DOWNLOADED_TEXT:
            return cls.DOWNLOADED
        return super().from_value(text)


class TemplateType(NameEnum):
    USER = auto()
    BUILTIN = auto()
    SYSTEM = auto()
    UNRECOGNIZED = auto()


class TemplateFormat(NameEnum):
    VHD = auto()
    QCOW2 = auto()
    OVA = auto()
    ISO = auto()
    RAW = auto()
    UNRECOGNIZED = auto()


class TemplateFilter(LowerCaseEnum):
    """Which templates a list call returns; request-side only."""
    FEATURED = auto()
    SELF = auto()
    SELF_EXECUTABLE = auto()
    EXECUTABLE = auto()
    COMMUNITY = auto()
    UNRECOGNIZED = auto()


class ISOFilter(LowerCaseEnum):
    FEATURED = auto()
    SELF = auto()
    SELF_EXECUTABLE = auto()
    EXECUTABLE = auto()
    COMMUNITY = auto()
    UNRECOGNIZED = auto()


__all__ = [
    "VirtualMachineState",
    "TemplateStatus",
    "TemplateType",
    "TemplateFormat",
    "TemplateFilter",
    "ISOFilter",
]
