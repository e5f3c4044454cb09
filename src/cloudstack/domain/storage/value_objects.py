"""Storage context enumerations."""
from enum import auto

from cloudstack.domain.base.wire_enum import CodeEnum, LowerCaseEnum, NameEnum, UpperCamelEnum


class VolumeState(UpperCamelEnum):
    ALLOCATED = auto()
    CREATING = auto()
    READY = auto()
    DESTROYED = auto()
    FAILED = auto()
    UNRECOGNIZED = auto()


class VolumeType(CodeEnum):
    """
    Root or data disk.

    Coded 0/1 in requests; responses spell the name instead, in either
    case, so both are accepted and the lower-case name is written back.
    """
    ROOT = 0
    DATADISK = 1
    UNRECOGNIZED = 2147483647

    @classmethod
    def _to_wire(cls, member: "VolumeType") -> str:
        return member.name.lower()


class SnapshotState(UpperCamelEnum):
    BACKED_UP = auto()
    CREATING = auto()
    BACKING_UP = auto()
    UNRECOGNIZED = auto()


class SnapshotType(NameEnum):
    MANUAL = auto()
    RECURRING = auto()
    UNRECOGNIZED = auto()


class SnapshotInterval(NameEnum):
    HOURLY = auto()
    DAILY = auto()
    WEEKLY = auto()
    MONTHLY = auto()
    TEMPLATE = "template"
    NONE = "none"
    UNRECOGNIZED = auto()


class StorageType(LowerCaseEnum):
    LOCAL = auto()
    SHARED = auto()
    UNRECOGNIZED = auto()


__all__ = [
    "VolumeState",
    "VolumeType",
    "SnapshotState",
    "SnapshotType",
    "SnapshotInterval",
    "StorageType",
]
