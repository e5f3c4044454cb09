"""Infrastructure topology enumerations."""
from enum import auto

from cloudstack.domain.base.wire_enum import CodeEnum, UpperCamelEnum


class AllocationState(UpperCamelEnum):
    """Whether new resources may be placed in a zone, pod, cluster or host."""
    DISABLED = auto()
    ENABLED = auto()
    UNKNOWN = auto()


class NetworkType(UpperCamelEnum):
    BASIC = auto()
    ADVANCED = auto()
    UNKNOWN = auto()


class ManagedState(UpperCamelEnum):
    MANAGED = auto()
    PREPARE_UNMANAGED = auto()
    UNMANAGED = auto()
    PREPARE_UNMANAGED_ERROR = auto()
    UNKNOWN = auto()


class HostClusterType(UpperCamelEnum):
    CLOUD_MANAGED = auto()
    EXTERNAL_MANAGED = auto()
    UNKNOWN = auto()


class HostState(UpperCamelEnum):
    CONNECTING = auto()
    UP = auto()
    DOWN = auto()
    DISCONNECTED = auto()
    UPDATING = auto()
    PREPARE_FOR_MAINTENANCE = auto()
    ERROR_IN_MAINTENANCE = auto()
    MAINTENANCE = auto()
    ALERT = auto()
    REMOVED = auto()
    REBALANCING = auto()
    UNKNOWN = auto()


class HostType(UpperCamelEnum):
    """Host role; the secondary storage VM keeps its irregular wire spelling."""
    STORAGE = auto()
    ROUTING = auto()
    SECONDARY_STORAGE = auto()
    SECONDARY_STORAGE_CMD_EXECUTOR = auto()
    CONSOLE_PROXY = auto()
    EXTERNAL_FIREWALL = auto()
    EXTERNAL_LOAD_BALANCER = auto()
    PXE_SERVER = auto()
    TRAFFIC_MONITOR = auto()
    EXTERNAL_DHCP = auto()
    SECONDARY_STORAGE_VM = "SecondaryStorageVM"
    LOCAL_SECONDARY_STORAGE = auto()
    UNKNOWN = auto()


class CapacityType(CodeEnum):
    MEMORY = 0
    CPU = 1
    STORAGE = 2
    STORAGE_ALLOCATED = 3
    PUBLIC_IP = 4
    PRIVATE_IP = 5
    SECONDARY_STORAGE = 6
    VLAN = 7
    DIRECT_ATTACHED_PUBLIC_IP = 8
    LOCAL_STORAGE = 9
    UNRECOGNIZED = 2147483647


class StoragePoolState(UpperCamelEnum):
    UP = auto()
    PREPARE_FOR_MAINTENANCE = auto()
    ERROR_IN_MAINTENANCE = auto()
    CANCEL_MAINTENANCE = auto()
    MAINTENANCE = auto()
    REMOVED = auto()
    UNRECOGNIZED = auto()


class StoragePoolType(UpperCamelEnum):
    FILESYSTEM = auto()
    NETWORK_FILESYSTEM = auto()
    ISCSI_LUN = auto()
    ISCSI = auto()
    ISO = auto()
    LVM = auto()
    CLVM = auto()
    SHARED_MOUNT_POINT = auto()
    VMFS = auto()
    PRE_SETUP = auto()
    EXT = auto()
    OCFS2 = auto()
    UNRECOGNIZED = auto()


__all__ = [
    "AllocationState",
    "NetworkType",
    "ManagedState",
    "HostClusterType",
    "HostState",
    "HostType",
    "CapacityType",
    "StoragePoolState",
    "StoragePoolType",
]
