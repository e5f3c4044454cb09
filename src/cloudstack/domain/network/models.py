"""Network context records: networks, addresses, rules and security groups."""
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import Field, ValidationInfo, ValidatorFunctionWrapHandler, model_validator

from cloudstack.domain.base.codecs import TagSet, WireDate
from cloudstack.domain.base.record import CloudStackRecord, is_wire_context
from cloudstack.domain.job.value_objects import AsyncJobStatus
from cloudstack.domain.network.value_objects import (
    GuestIPType,
    LoadBalancerAlgorithm,
    LoadBalancerState,
    NetworkOfferingAvailability,
    Protocol,
    PublicIPAddressState,
    RuleState,
    TrafficType,
)


class Capability(CloudStackRecord):
    """One named capability of a network service, e.g. ``SupportedProtocols``."""

    identity_field = "name"

    name: str
    value: Optional[str] = None


class NetworkService(CloudStackRecord):
    identity_field = "name"

    name: str
    capabilities: FrozenSet[Capability] = Field(default_factory=frozenset, alias="capability")

    def capability_map(self) -> Dict[str, Optional[str]]:
        """Capabilities keyed by name."""
        return {capability.name: capability.value for capability in self.capabilities}


class Network(CloudStackRecord):
    """A guest, public or system network and the services it offers."""

    wire_collection = "network"

    id: str
    account: Optional[str] = None
    broadcast_domain_type: Optional[str] = Field(default=None, alias="broadcastdomaintype")
    broadcast_uri: Optional[str] = Field(default=None, alias="broadcasturi")
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    dns1: Optional[str] = None
    dns2: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    end_ip: Optional[str] = Field(default=None, alias="endip")
    gateway: Optional[str] = None
    is_default: bool = Field(default=False, alias="isdefault")
    is_shared: bool = Field(default=False, alias="isshared")
    is_system: bool = Field(default=False, alias="issystem")
    netmask: Optional[str] = None
    network_domain: Optional[str] = Field(default=None, alias="networkdomain")
    network_offering_availability: Optional[NetworkOfferingAvailability] = Field(
        default=None, alias="networkofferingavailability"
    )
    network_offering_display_text: Optional[str] = Field(default=None, alias="networkofferingdisplaytext")
    network_offering_id: Optional[str] = Field(default=None, alias="networkofferingid")
    network_offering_name: Optional[str] = Field(default=None, alias="networkofferingname")
    related: Optional[str] = None
    start_ip: Optional[str] = Field(default=None, alias="startip")
    name: Optional[str] = None
    state: Optional[str] = None
    guest_ip_type: Optional[GuestIPType] = Field(default=None, alias="type")
    vlan: Optional[str] = None
    traffic_type: Optional[TrafficType] = Field(default=None, alias="traffictype")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    tags: TagSet = Field(default_factory=frozenset)
    security_group_enabled: bool = Field(default=False, alias="securitygroupenabled")
    services: FrozenSet[NetworkService] = Field(default_factory=frozenset, alias="service")

    def service(self, name: str) -> Optional[NetworkService]:
        """Return the named service (``Dns``, ``Firewall``, ...) if the network offers it."""
        for service in self.services:
            if service.name == name:
                return service
        return None


class NetworkOffering(CloudStackRecord):
    Availability: ClassVar[type] = NetworkOfferingAvailability
    wire_collection = "networkoffering"

    id: str
    name: Optional[str] = None
    display_text: Optional[str] = Field(default=None, alias="displaytext")
    created: WireDate = None
    availability: Optional[NetworkOfferingAvailability] = None
    max_connections: Optional[int] = Field(default=None, alias="maxconnections")
    is_default: bool = Field(default=False, alias="isdefault")
    supports_vlan: bool = Field(default=False, alias="specifyvlan")
    traffic_type: Optional[TrafficType] = Field(default=None, alias="traffictype")
    guest_ip_type: Optional[GuestIPType] = Field(default=None, alias="guestiptype")
    network_rate: int = Field(default=-1, alias="networkrate")
    tags: TagSet = Field(default_factory=frozenset)


class NIC(CloudStackRecord):
    """A virtual machine's network interface."""

    wire_collection = "nic"

    id: str
    broadcast_uri: Optional[str] = Field(default=None, alias="broadcasturi")
    gateway: Optional[str] = None
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    is_default: bool = Field(default=False, alias="isdefault")
    isolation_uri: Optional[str] = Field(default=None, alias="isolationuri")
    netmask: Optional[str] = None
    mac_address: Optional[str] = Field(default=None, alias="macaddress")
    network_id: Optional[str] = Field(default=None, alias="networkid")
    traffic_type: Optional[TrafficType] = Field(default=None, alias="traffictype")
    guest_ip_type: Optional[GuestIPType] = Field(default=None, alias="type")


class PublicIPAddress(CloudStackRecord):
    State: ClassVar[type] = PublicIPAddressState
    wire_collection = "publicipaddress"

    id: str
    account: Optional[str] = None
    allocated: WireDate = None
    associated_network_id: Optional[str] = Field(default=None, alias="associatednetworkid")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    uses_virtual_network: bool = Field(default=False, alias="forvirtualnetwork")
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    is_source_nat: bool = Field(default=False, alias="issourcenat")
    is_static_nat: bool = Field(default=False, alias="isstaticnat")
    network_id: Optional[str] = Field(default=None, alias="networkid")
    state: Optional[PublicIPAddressState] = None
    virtual_machine_display_name: Optional[str] = Field(default=None, alias="virtualmachinedisplayname")
    virtual_machine_id: Optional[str] = Field(default=None, alias="virtualmachineid")
    virtual_machine_name: Optional[str] = Field(default=None, alias="virtualmachinename")
    vlan_id: Optional[str] = Field(default=None, alias="VLANid")
    vlan_name: Optional[str] = Field(default=None, alias="VLANname")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")
    zone_name: Optional[str] = Field(default=None, alias="zonename")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")


class PortForwardingRule(CloudStackRecord):
    Protocol: ClassVar[type] = Protocol
    State: ClassVar[type] = RuleState
    wire_collection = "portforwardingrule"

    id: str
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    ip_address_id: Optional[str] = Field(default=None, alias="ipaddressid")
    private_port: int = Field(default=0, alias="privateport")
    protocol: Optional[Protocol] = None
    public_port: int = Field(default=0, alias="publicport")
    state: Optional[RuleState] = None
    virtual_machine_display_name: Optional[str] = Field(default=None, alias="virtualmachinedisplayname")
    virtual_machine_id: Optional[str] = Field(default=None, alias="virtualmachineid")
    virtual_machine_name: Optional[str] = Field(default=None, alias="virtualmachinename")
    cidrs: TagSet = Field(default_factory=frozenset, alias="cidrlist")
    private_end_port: int = Field(default=0, alias="privateendport")
    public_end_port: int = Field(default=0, alias="publicendport")


class FirewallRule(CloudStackRecord):
    Protocol: ClassVar[type] = Protocol
    State: ClassVar[type] = RuleState
    wire_collection = "firewallrule"

    id: str
    cidrs: TagSet = Field(default_factory=frozenset, alias="cidrlist")
    start_port: Optional[int] = Field(default=None, alias="startport")
    end_port: Optional[int] = Field(default=None, alias="endport")
    icmp_code: Optional[str] = Field(default=None, alias="icmpcode")
    icmp_type: Optional[str] = Field(default=None, alias="icmptype")
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    ip_address_id: Optional[str] = Field(default=None, alias="ipaddressid")
    protocol: Optional[Protocol] = None
    state: Optional[RuleState] = None


class IPForwardingRule(CloudStackRecord):
    """Static NAT forwarding of a public address range to one VM."""

    wire_collection = "ipforwardingrule"

    id: str
    ip_address: Optional[str] = Field(default=None, alias="ipaddress")
    ip_address_id: Optional[str] = Field(default=None, alias="ipaddressid")
    start_port: int = Field(default=0, alias="startport")
    protocol: Optional[Protocol] = None
    virtual_machine_display_name: Optional[str] = Field(default=None, alias="virtualmachinedisplayname")
    virtual_machine_id: Optional[str] = Field(default=None, alias="virtualmachineid")
    virtual_machine_name: Optional[str] = Field(default=None, alias="virtualmachinename")
    public_port: int = Field(default=0, alias="publicport")
    state: Optional[RuleState] = None
    end_port: int = Field(default=0, alias="endport")
    public_end_port: int = Field(default=0, alias="publicendport")


class LoadBalancerRule(CloudStackRecord):
    Algorithm: ClassVar[type] = LoadBalancerAlgorithm
    State: ClassVar[type] = LoadBalancerState
    wire_collection = "loadbalancerrule"

    id: str
    account: Optional[str] = None
    algorithm: Optional[LoadBalancerAlgorithm] = None
    description: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    name: Optional[str] = None
    private_port: int = Field(default=0, alias="privateport")
    public_ip: Optional[str] = Field(default=None, alias="publicip")
    public_ip_id: Optional[str] = Field(default=None, alias="publicipid")
    public_port: int = Field(default=0, alias="publicport")
    state: Optional[LoadBalancerState] = None
    cidrs: TagSet = Field(default_factory=frozenset, alias="cidrlist")
    zone_id: Optional[str] = Field(default=None, alias="zoneid")


class IngressRule(CloudStackRecord):
    """
    One ingress permission of a security group.

    The traffic source is either a CIDR or another account's security group;
    building a rule with neither fails. Rules read from a response are
    accepted as the server sent them.
    """

    identity_field = "id"

    account: Optional[str] = None
    cidr: Optional[str] = None
    end_port: int = Field(default=0, alias="endport")
    icmp_code: int = Field(default=0, alias="icmpcode")
    icmp_type: int = Field(default=0, alias="icmptype")
    protocol: Optional[Protocol] = None
    id: Optional[str] = Field(default=None, alias="ruleid")
    security_group_name: Optional[str] = Field(default=None, alias="securitygroupname")
    start_port: int = Field(default=0, alias="startport")

    @model_validator(mode="wrap")
    @classmethod
    def check_traffic_source(cls, data: Any, handler: ValidatorFunctionWrapHandler,
                             info: ValidationInfo) -> "IngressRule":
        # Instances were checked when first built or came from the wire
        if isinstance(data, IngressRule):
            return data
        rule = handler(data)
        if is_wire_context(info.context):
            return rule
        has_group = rule.account is not None and rule.security_group_name is not None
        if rule.cidr is None and not has_group:
            raise ValueError("either account and security group name, or CIDR, must be present")
        return rule


class SecurityGroup(CloudStackRecord):
    """
    A named set of ingress rules.

    Equality only looks at ``domain_id``, ``id`` and ``job_status``.
    """

    equality_fields = ("domain_id", "id", "job_status")
    wire_collection = "securitygroup"

    id: str
    account: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    job_id: Optional[str] = Field(default=None, alias="jobid")
    job_status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    ingress_rules: FrozenSet[IngressRule] = Field(default_factory=frozenset, alias="ingressrule")


__all__ = [
    "Capability",
    "NetworkService",
    "Network",
    "NetworkOffering",
    "NIC",
    "PublicIPAddress",
    "PortForwardingRule",
    "FirewallRule",
    "IPForwardingRule",
    "LoadBalancerRule",
    "IngressRule",
    "SecurityGroup",
]
