"""Usage context enumerations."""
from cloudstack.domain.base.wire_enum import CodeEnum


class UsageType(CodeEnum):
    """Kind of resource a usage record meters."""
    RUNNING_VM = 1
    ALLOCATED_VM = 2
    IP_ADDRESS = 3
    NETWORK_BYTES_SENT = 4
    NETWORK_BYTES_RECEIVED = 5
    VOLUME = 6
    TEMPLATE = 7
    ISO = 8
    SNAPSHOT = 9
    SECURITY_GROUP = 10
    LOAD_BALANCER_POLICY = 11
    PORT_FORWARDING_RULE = 12
    NETWORK_OFFERING = 13
    VPN_USERS = 14
    UNRECOGNIZED = 0


__all__ = ["UsageType"]
