"""Topology bounded context - zones, pods, clusters, hosts and storage pools."""

from .models import Capacity, Cluster, Host, Pod, StoragePool, Zone
from .value_objects import (
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

__all__ = [
    "Zone",
    "NetworkType",
    "Pod",
    "Cluster",
    "ManagedState",
    "Host",
    "HostClusterType",
    "HostState",
    "HostType",
    "Capacity",
    "CapacityType",
    "StoragePool",
    "StoragePoolState",
    "StoragePoolType",
    "AllocationState",
]
