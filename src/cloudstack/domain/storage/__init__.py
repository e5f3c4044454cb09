"""Storage bounded context - volumes, snapshots and disk offerings."""

from .models import DiskOffering, Snapshot, SnapshotPolicy, Volume
from .value_objects import (
    SnapshotInterval,
    SnapshotState,
    SnapshotType,
    StorageType,
    VolumeState,
    VolumeType,
)

__all__ = [
    "Volume",
    "VolumeState",
    "VolumeType",
    "Snapshot",
    "SnapshotState",
    "SnapshotType",
    "SnapshotInterval",
    "SnapshotPolicy",
    "DiskOffering",
    "StorageType",
]
