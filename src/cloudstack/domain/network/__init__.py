"""Network bounded context - networks, public addresses and traffic rules."""

from .models import (
    NIC,
    Capability,
    FirewallRule,
    IngressRule,
    IPForwardingRule,
    LoadBalancerRule,
    Network,
    NetworkOffering,
    NetworkService,
    PortForwardingRule,
    PublicIPAddress,
    SecurityGroup,
)
from .value_objects import (
    GuestIPType,
    LoadBalancerAlgorithm,
    LoadBalancerState,
    NetworkOfferingAvailability,
    Protocol,
    PublicIPAddressState,
    RuleState,
    TrafficType,
)

__all__ = [
    "Network",
    "NetworkService",
    "Capability",
    "NetworkOffering",
    "NetworkOfferingAvailability",
    "NIC",
    "GuestIPType",
    "TrafficType",
    "PublicIPAddress",
    "PublicIPAddressState",
    "PortForwardingRule",
    "FirewallRule",
    "IPForwardingRule",
    "LoadBalancerRule",
    "LoadBalancerAlgorithm",
    "LoadBalancerState",
    "SecurityGroup",
    "IngressRule",
    "Protocol",
    "RuleState",
]
