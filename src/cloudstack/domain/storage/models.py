"""Storage context records: volumes, snapshots and disk offerings."""
from typing import ClassVar, Optional

from pydantic import Field

from cloudstack.domain.base.codecs import TagSet, WireDate
from cloudstack.domain.base.record import CloudStackRecord
from cloudstack.domain.compute.value_objects import VirtualMachineState
from cloudstack.domain.job.value_objects import AsyncJobStatus
from cloudstack.domain.storage.value_objects import (
    SnapshotInterval,
    SnapshotState,
    SnapshotType,
    StorageType,
    VolumeState,
    VolumeType,
)


class Volume(CloudStackRecord):
    """A root or data disk, attached to a VM or free-standing."""

    State: ClassVar[type] = VolumeState
    Type: ClassVar[type] = VolumeType
    wire_collection = "volume"

    id: str
    account: Optional[str] = None
    attached: WireDate = None
    created: WireDate = None
    destroyed: bool = False
    device_id: Optional[str] = Field(default=None, alias="deviceid")
    disk_offering_display_text: Optional[str] = Field(default=None, alias="diskofferingdisplaytext")
    disk_offering_id: Optional[str] = Field(default=None, alias="diskofferingid")
    disk_offering_name: Optional[str] = Field(default=None, alias="diskofferingname")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    hypervisor: Optional[str] = None
    is_extractable: bool = Field(default=False, alias="isextractable")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    name: Optional[str] = None
    service_offering_display_text: Optional[str] = Field(default=None, alias="serviceofferingdisplaytext")
    service_offering_id: Optional[str] = Field(default=None, alias="serviceofferingid")
    service_offering_name: Optional[str] = Field(default=None, alias="serviceofferingname")
    size: int = 0
    snapshot_id: Optional[str] = Field(default=None, alias="snapshotid")
    state: Optional[VolumeState] = None
    storage: Optional[str] = None
    storage_type: Optional[StorageType] = Field(default=None, alias="storagetype")
    type: Optional[VolumeType] = None
    virtual_machine_id: Optional[str] = Field(default=None, alias="virtualmachineid")
    vm_display_name: Optional[str] = Field(default=None, alias="vmdisplayname")
    vm_name: Optional[str] = Field(default=None, alias="vmname")
    vm_state: Optional[VirtualMachineState] = Field(default=None, alias="vmstate")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")


class Snapshot(CloudStackRecord):
    State: ClassVar[type] = SnapshotState
    Type: ClassVar[type] = SnapshotType
    Interval: ClassVar[type] = SnapshotInterval
    wire_collection = "snapshot"

    id: str
    account: Optional[str] = None
    created: WireDate = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    interval: Optional[SnapshotInterval] = Field(default=None, alias="intervaltype")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    name: Optional[str] = None
    snapshot_type: Optional[SnapshotType] = Field(default=None, alias="snapshottype")
    state: Optional[SnapshotState] = None
    volume_id: Optional[str] = Field(default=None, alias="volumeid")
    volume_name: Optional[str] = Field(default=None, alias="volumename")
    volume_type: Optional[VolumeType] = Field(default=None, alias="volumetype")


class SnapshotPolicy(CloudStackRecord):
    """Recurring snapshot schedule of a volume."""

    wire_collection = "snapshotpolicy"

    id: str
    interval: Optional[SnapshotInterval] = Field(default=None, alias="intervaltype")
    num_to_keep: int = Field(default=0, alias="maxsnaps")
    schedule: Optional[str] = None
    timezone: Optional[str] = None
    volume_id: Optional[str] = Field(default=None, alias="volumeid")


class DiskOffering(CloudStackRecord):
    wire_collection = "diskoffering"

    id: str
    name: Optional[str] = None
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    created: WireDate = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    disk_size: int = Field(default=0, alias="disksize")
    customized: bool = Field(default=False, alias="iscustomized")
    tags: TagSet = Field(default_factory=frozenset)


__all__ = ["Volume", "Snapshot", "SnapshotPolicy", "DiskOffering"]
