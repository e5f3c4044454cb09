"""Compute context records: virtual machines, offerings, templates and ISOs."""
import re
from typing import ClassVar, FrozenSet, Optional

from pydantic import Field, ValidationInfo, field_validator

from cloudstack.domain.base.codecs import TagSet, WireDate
from cloudstack.domain.base.record import CloudStackRecord, is_wire_context
from cloudstack.domain.compute.value_objects import (
    ISOFilter,
    TemplateFilter,
    TemplateFormat,
    TemplateStatus,
    TemplateType,
    VirtualMachineState,
)
from cloudstack.domain.job.value_objects import AsyncJobStatus
from cloudstack.domain.network.models import NIC, SecurityGroup
from cloudstack.domain.storage.value_objects import StorageType

_CPU_USED_PATTERN = re.compile(r"^[0-9.|,\-]+%$")


class VirtualMachine(CloudStackRecord):
    """A guest VM with its NICs and security groups."""

    State: ClassVar[type] = VirtualMachineState
    wire_collection = "virtualmachine"

    id: str
    account: Optional[str] = None
    cpu_count: int = Field(default=0, alias="cpunumber")
    cpu_speed: int = Field(default=0, alias="cpuspeed")
    cpu_used: Optional[str] = Field(default=None, alias="cpuused")
    display_name: Optional[str] = Field(default=None, alias="displayname")
    created: WireDate = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    uses_virtual_network: bool = Field(default=False, alias="forvirtualnetwork")
    group: Optional[str] = None
    group_id: Optional[str] = Field(default=None, alias="groupid")
    guest_os_id: Optional[str] = Field(default=None, alias="guestosid")
    ha_enabled: bool = Field(default=False, alias="haenable")
    host_id: Optional[str] = Field(default=None, alias="hostid")
    hostname: Optional[str] = None
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    iso_display_text: Optional[str] = Field(default=None, alias="isodisplaytext")
    iso_id: Optional[str] = Field(default=None, alias="isoid")
    iso_name: Optional[str] = Field(default=None, alias="isoname")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    memory: int = 0
    name: Optional[str] = None
    network_kbs_read: Optional[int] = Field(default=None, alias="networkkbsread")
    network_kbs_write: Optional[int] = Field(default=None, alias="networkkbswrite")
    password: Optional[str] = None
    password_enabled: bool = Field(default=False, alias="passwordenabled")
    public_ip: Optional[str] = Field(default=None, alias="publicip")
    public_ip_id: Optional[str] = Field(default=None, alias="publicipid")
    root_device_id: Optional[str] = Field(default=None, alias="rootdeviceid")
    root_device_type: Optional[str] = Field(default=None, alias="rootdevicetype")
    service_offering_id: Optional[str] = Field(default=None, alias="serviceofferingid")
    service_offering_name: Optional[str] = Field(default=None, alias="serviceofferingname")
    state: Optional[VirtualMachineState] = None
    template_display_text: Optional[str] = Field(default=None, alias="templatedisplaytext")
    template_id: Optional[str] = Field(default=None, alias="templateid")
    template_name: Optional[str] = Field(default=None, alias="templatename")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")
    nics: FrozenSet[NIC] = Field(default_factory=frozenset, alias="nic")
    hypervisor: Optional[str] = None
    security_groups: FrozenSet[SecurityGroup] = Field(default_factory=frozenset, alias="securitygroup")

    @field_validator("cpu_used")
    @classmethod
    def check_cpu_used(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if is_wire_context(info.context):
            return value
        if value and not _CPU_USED_PATTERN.match(value):
            raise ValueError("cpuused value should be a decimal number followed by %")
        return value

    @property
    def cpu_used_percent(self) -> float:
        """
        CPU usage as a number; ``"12,5%"`` reads as 12.5.

        Raises:
            ValueError: If the server reported something other than a percentage
        """
        if not self.cpu_used:
            return 0.0
        return float(self.cpu_used[:-1].replace(",", "."))

    @property
    def default_nic(self) -> Optional[NIC]:
        for nic in sorted(self.nics):
            if nic.is_default:
                return nic
        return None


class ServiceOffering(CloudStackRecord):
    """CPU, memory and HA settings a VM is deployed with."""

    wire_collection = "serviceoffering"

    id: str
    name: Optional[str] = None
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    created: WireDate = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    cpu_number: int = Field(default=0, alias="cpunumber")
    cpu_speed: int = Field(default=0, alias="cpuspeed")
    memory: int = 0
    ha_support: bool = Field(default=False, alias="offerha")
    storage_type: Optional[StorageType] = Field(default=None, alias="storagetype")
    tags: TagSet = Field(default_factory=frozenset)
    default_use: bool = Field(default=False, alias="defaultuse")
    system_vm_type: Optional[str] = Field(default=None, alias="systemvmtype")
    system_offering: bool = Field(default=False, alias="issystem")
    cpu_use_limited: bool = Field(default=False, alias="limitcpuuse")
    network_rate: int = Field(default=-1, alias="networkrate")


class Template(CloudStackRecord):
    Type: ClassVar[type] = TemplateType
    Status: ClassVar[type] = TemplateStatus
    Format: ClassVar[type] = TemplateFormat
    Filter: ClassVar[type] = TemplateFilter
    wire_collection = "template"

    id: str
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    account: Optional[str] = None
    account_id: Optional[str] = Field(default=None, alias="accountid")
    zone: Optional[str] = Field(default=None, alias="zonename")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    os_type: Optional[str] = Field(default=None, alias="ostypename")
    os_type_id: Optional[str] = Field(default=None, alias="ostypeid")
    name: Optional[str] = None
    type: Optional[TemplateType] = Field(default=None, alias="templatetype")
    status: Optional[TemplateStatus] = None
    format: Optional[TemplateFormat] = None
    hypervisor: Optional[str] = None
    size: Optional[int] = None
    created: WireDate = None
    removed: WireDate = None
    cross_zones: bool = Field(default=False, alias="crossZones")
    bootable: bool = False
    extractable: bool = Field(default=False, alias="isextractable")
    featured: bool = Field(default=False, alias="isfeatured")
    is_public: bool = Field(default=False, alias="ispublic")
    ready: bool = Field(default=False, alias="isready")
    password_enabled: bool = Field(default=False, alias="passwordenabled")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    checksum: Optional[str] = None
    host_id: Optional[str] = Field(default=None, alias="hostId")
    host_name: Optional[str] = Field(default=None, alias="hostname")
    source_template_id: Optional[str] = Field(default=None, alias="sourcetemplateid")
    template_tag: Optional[str] = Field(default=None, alias="templatetag")


class ISO(CloudStackRecord):
    """A bootable or data ISO image."""

    Filter: ClassVar[type] = ISOFilter
    wire_collection = "iso"

    id: str
    account: Optional[str] = None
    account_id: Optional[str] = Field(default=None, alias="accountid")
    bootable: bool = False
    checksum: Optional[str] = None
    created: WireDate = None
    cross_zones: bool = Field(default=False, alias="crossZones")
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    format: Optional[str] = None
    host_id: Optional[str] = Field(default=None, alias="hostid")
    host_name: Optional[str] = Field(default=None, alias="hostname")
    hypervisor: Optional[str] = None
    is_extractable: bool = Field(default=False, alias="isextractable")
    is_featured: bool = Field(default=False, alias="isfeatured")
    is_public: bool = Field(default=False, alias="ispublic")
    is_ready: bool = Field(default=False, alias="isready")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    name: Optional[str] = None
    os_type_id: Optional[str] = Field(default=None, alias="ostypeid")
    os_type_name: Optional[str] = Field(default=None, alias="ostypename")
    password_enabled: bool = Field(default=False, alias="passwordenabled")
    removed: WireDate = None
    size: int = 0
    source_template_id: Optional[str] = Field(default=None, alias="sourcetemplateid")
    status: Optional[str] = None
    template_tag: Optional[str] = Field(default=None, alias="templatetag")
    template_type: Optional[str] = Field(default=None, alias="templatetype")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")


class OSType(CloudStackRecord):
    wire_collection = "ostype"

    id: str
    os_category_id: Optional[str] = Field(default=None, alias="oscategoryid")
    description: Optional[str] = None


class VMGroup(CloudStackRecord):
    """Instance group used to organise VMs."""

    wire_collection = "instancegroup"

    id: str
    account: Optional[str] = None
    created: WireDate = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    name: Optional[str] = None


__all__ = [
    "VirtualMachine",
    "ServiceOffering",
    "Template",
    "ISO",
    "OSType",
    "VMGroup",
]
