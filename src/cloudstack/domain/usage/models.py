"""Usage context records: metering, events, alerts and global settings."""
from typing import ClassVar, Optional

from pydantic import Field

from cloudstack.domain.base.codecs import WireDate
from cloudstack.domain.base.record import CloudStackRecord
from cloudstack.domain.usage.value_objects import UsageType


class UsageRecord(CloudStackRecord):
    """One metered usage interval of an account's resource."""

    UsageType: ClassVar[type] = UsageType
    wire_collection = "usagerecord"

    id: str = Field(alias="usageid")
    description: Optional[str] = None
    account_id: Optional[str] = Field(default=None, alias="accountid")
    account_name: Optional[str] = Field(default=None, alias="account")
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    start_date: WireDate = Field(default=None, alias="startdate")
    end_date: WireDate = Field(default=None, alias="enddate")
    assign_date: WireDate = Field(default=None, alias="assigndate")
    release_date: Optional[str] = Field(default=None, alias="releasedate")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    virtual_machine_id: Optional[str] = Field(default=None, alias="virtualmachineid")
    virtual_machine_name: Optional[str] = Field(default=None, alias="name")
    service_offering_id: Optional[str] = Field(default=None, alias="offeringid")
    template_id: Optional[str] = Field(default=None, alias="templateid")
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    is_source_nat: bool = Field(default=False, alias="issourcenat")
    raw_usage_hours: float = Field(default=0.0, alias="rawusage")
    usage: Optional[str] = None
    type: Optional[str] = None
    usage_type: Optional[UsageType] = Field(default=None, alias="usagetype")


class Event(CloudStackRecord):
    wire_collection = "event"

    id: str
    account: Optional[str] = None
    created: WireDate = None
    description: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    level: Optional[str] = None
    parent_id: Optional[str] = Field(default=None, alias="parentid")
    state: Optional[str] = None
    type: Optional[str] = None
    username: Optional[str] = None


class Alert(CloudStackRecord):
    wire_collection = "alert"

    id: str
    description: Optional[str] = None
    sent: WireDate = None
    type: Optional[str] = None


class ConfigurationEntry(CloudStackRecord):
    """A global configuration setting of the management server."""

    identity_field = "name"
    wire_collection = "configuration"

    category: Optional[str] = None
    name: str
    value: Optional[str] = None
    description: Optional[str] = None


__all__ = ["UsageRecord", "Event", "Alert", "ConfigurationEntry"]
