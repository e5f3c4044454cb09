"""Physical and logical infrastructure records: zones down to hosts and pools."""
from typing import Any, ClassVar, Optional, Tuple

from pydantic import Field

from cloudstack.domain.base.codecs import TagSet, WireDate, natural_key
from cloudstack.domain.base.record import CloudStackRecord
from cloudstack.domain.job.value_objects import AsyncJobStatus
from cloudstack.domain.topology.value_objects import (
    AllocationState,
    CapacityType,
    HostClusterType,
    HostState,
    HostType,
    ManagedState,
    NetworkType,
    StoragePoolState,
    StoragePoolType,
)


class Zone(CloudStackRecord):
    NetworkType: ClassVar[type] = NetworkType
    wire_collection = "zone"

    id: str
    description: Optional[str] = None
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    dns1: Optional[str] = None
    dns2: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    guest_cidr_address: Optional[str] = Field(default=None, alias="guestcidraddress")
    internal_dns1: Optional[str] = Field(default=None, alias="internaldns1")
    internal_dns2: Optional[str] = Field(default=None, alias="internaldns2")
    name: Optional[str] = None
    network_type: Optional[NetworkType] = Field(default=None, alias="networktype")
    vlan: Optional[str] = None
    security_groups_enabled: bool = Field(default=False, alias="securitygroupsenabled")
    allocation_state: Optional[AllocationState] = Field(default=None, alias="allocationstate")
    dhcp_provider: Optional[str] = Field(default=None, alias="dhcpprovider")
    zone_token: Optional[str] = Field(default=None, alias="zonetoken")


class Pod(CloudStackRecord):
    wire_collection = "pod"

    id: str
    name: Optional[str] = None
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")
    gateway: Optional[str] = None
    netmask: Optional[str] = None
    start_ip: Optional[str] = Field(default=None, alias="startip")
    end_ip: Optional[str] = Field(default=None, alias="endip")
    allocation_state: Optional[AllocationState] = Field(default=None, alias="allocationstate")


class Cluster(CloudStackRecord):
    ManagedState: ClassVar[type] = ManagedState
    wire_collection = "cluster"

    id: str
    name: Optional[str] = None
    pod_id: Optional[str] = Field(default=None, alias="podid")
    pod_name: Optional[str] = Field(default=None, alias="podname")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")
    hypervisor: Optional[str] = Field(default=None, alias="hypervisortype")
    cluster_type: Optional[HostClusterType] = Field(default=None, alias="clustertype")
    allocation_state: Optional[AllocationState] = Field(default=None, alias="allocationstate")
    managed_state: Optional[ManagedState] = Field(default=None, alias="managedstate")


class Host(CloudStackRecord):
    """
    A hypervisor host, storage host or system VM host.

    Equality covers every field, counters and timestamps included.
    """

    ClusterType: ClassVar[type] = HostClusterType
    State: ClassVar[type] = HostState
    Type: ClassVar[type] = HostType
    wire_collection = "host"

    id: str
    allocation_state: Optional[AllocationState] = Field(default=None, alias="allocationstate")
    average_load: int = Field(default=0, alias="averageload")
    capabilities: Optional[str] = None
    cluster_id: Optional[str] = Field(default=None, alias="clusterid")
    cluster_name: Optional[str] = Field(default=None, alias="clustername")
    cluster_type: Optional[HostClusterType] = Field(default=None, alias="clustertype")
    cpu_allocated: Optional[str] = Field(default=None, alias="cpuallocated")
    cpu_number: int = Field(default=0, alias="cpunumber")
    cpu_speed: int = Field(default=0, alias="cpuspeed")
    cpu_used: Optional[str] = Field(default=None, alias="cpuused")
    cpu_with_over_provisioning: float = Field(default=0.0, alias="cpuwithoverprovisioning")
    created: WireDate = None
    disconnected: WireDate = None
    disk_size_allocated: int = Field(default=0, alias="disksizeallocated")
    disk_size_total: int = Field(default=0, alias="disksizetotal")
    events: Optional[str] = None
    has_enough_capacity: bool = Field(default=False, alias="hasenoughcapacity")
    tags: TagSet = Field(default_factory=frozenset, alias="hosttags")
    hypervisor: Optional[str] = None
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    local_storage_active: bool = Field(default=False, alias="islocalstorageactive")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    last_pinged: WireDate = Field(default=None, alias="lastpinged")
    management_server_id: Optional[str] = Field(default=None, alias="managementserverid")
    memory_allocated: int = Field(default=0, alias="memoryallocated")
    memory_total: int = Field(default=0, alias="memorytotal")
    memory_used: int = Field(default=0, alias="memoryused")
    name: Optional[str] = None
    network_kbs_read: int = Field(default=0, alias="networkkbsread")
    network_kbs_write: int = Field(default=0, alias="networkkbswrite")
    os_category_id: Optional[str] = Field(default=None, alias="oscategoryid")
    os_category_name: Optional[str] = Field(default=None, alias="oscategoryname")
    pod_id: Optional[str] = Field(default=None, alias="podid")
    pod_name: Optional[str] = Field(default=None, alias="podname")
    removed: WireDate = None
    state: Optional[HostState] = None
    type: Optional[HostType] = None
    version: Optional[str] = None
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")


class Capacity(CloudStackRecord):
    """
    Used and total capacity of one resource type in a zone or pod.

    Ordered by zone, then pod, then the numeric type code.
    """

    Type: ClassVar[type] = CapacityType
    identity_field = None
    wire_collection = "capacity"

    capacity_total: int = Field(default=0, alias="capacitytotal")
    capacity_used: int = Field(default=0, alias="capacityused")
    percent_used: float = Field(default=0.0, alias="percentused")
    pod_id: Optional[str] = Field(default=None, alias="podid")
    pod_name: Optional[str] = Field(default=None, alias="podname")
    type: Optional[CapacityType] = None
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")

    def sort_key(self) -> Tuple[Any, ...]:
        code = self.type.code if self.type is not None else -1
        return (natural_key(self.zone_id), natural_key(self.pod_id), code)


class StoragePool(CloudStackRecord):
    State: ClassVar[type] = StoragePoolState
    Type: ClassVar[type] = StoragePoolType
    wire_collection = "storagepool"

    id: str
    name: Optional[str] = None
    path: Optional[str] = None
    tags: TagSet = Field(default_factory=frozenset)
    state: Optional[StoragePoolState] = None
    type: Optional[StoragePoolType] = None
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")
    pod_id: Optional[str] = Field(default=None, alias="podid")
    pod_name: Optional[str] = Field(default=None, alias="podname")
    cluster_id: Optional[str] = Field(default=None, alias="clusterid")
    cluster_name: Optional[str] = Field(default=None, alias="clustername")
    created: WireDate = None
    disk_size_allocated: int = Field(default=0, alias="disksizeallocated")
    disk_size_total: int = Field(default=0, alias="disksizetotal")
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")


__all__ = ["Zone", "Pod", "Cluster", "Host", "Capacity", "StoragePool"]
