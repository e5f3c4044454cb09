"""Network context enumerations."""
from enum import auto

from cloudstack.domain.base.wire_enum import LowerCaseEnum, UpperCamelEnum


class GuestIPType(UpperCamelEnum):
    VIRTUAL = auto()
    DIRECT = auto()
    SHARED = auto()
    ISOLATED = auto()
    UNRECOGNIZED = auto()


class TrafficType(UpperCamelEnum):
    PUBLIC = auto()
    GUEST = auto()
    STORAGE = auto()
    MANAGEMENT = auto()
    CONTROL = auto()
    VLAN = auto()
    UNRECOGNIZED = auto()


class NetworkOfferingAvailability(UpperCamelEnum):
    REQUIRED = auto()
    OPTIONAL = auto()
    UNAVAILABLE = auto()
    UNRECOGNIZED = auto()


class PublicIPAddressState(UpperCamelEnum):
    ALLOCATING = auto()
    ALLOCATED = auto()
    RELEASING = auto()
    UNRECOGNIZED = auto()


class Protocol(LowerCaseEnum):
    """IP protocol of a firewall, forwarding or ingress rule."""
    TCP = auto()
    UDP = auto()
    ICMP = auto()
    UNKNOWN = auto()


class RuleState(UpperCamelEnum):
    """Lifecycle of a network rule on the network elements."""
    # created, not yet through conflict detection
    STAGED = auto()
    # passed conflict detection
    ADD = auto()
    # pushed to the network elements
    ACTIVE = auto()
    # revoked; removed once the elements drop it
    DELETING = auto()
    UNKNOWN = auto()


class LoadBalancerAlgorithm(LowerCaseEnum):
    SOURCE = auto()
    ROUNDROBIN = auto()
    LEASTCONN = auto()
    UNRECOGNIZED = auto()


class LoadBalancerState(UpperCamelEnum):
    ADD = auto()
    ACTIVE = auto()
    UNRECOGNIZED = auto()


__all__ = [
    "GuestIPType",
    "TrafficType",
    "NetworkOfferingAvailability",
    "PublicIPAddressState",
    "Protocol",
    "RuleState",
    "LoadBalancerAlgorithm",
    "LoadBalancerState",
]
