"""Tests for zones, pods, clusters, hosts, capacity and storage pools."""

from datetime import datetime, timedelta, timezone

import pytest

from cloudstack.domain.job import AsyncJobStatus
from cloudstack.domain.topology import (
    AllocationState,
    Capacity,
    CapacityType,
    Cluster,
    Host,
    HostClusterType,
    HostState,
    HostType,
    NetworkType,
    Pod,
    StoragePool,
    StoragePoolState,
    StoragePoolType,
    Zone,
)


@pytest.fixture
def hosts(list_hosts_payload):
    return [Host.from_wire(h) for h in list_hosts_payload["listhostsresponse"]["host"]]


def test_routing_host_from_wire(hosts):
    host = hosts[0]

    assert host.id == "1"
    assert host.type is HostType.ROUTING
    assert host.state is HostState.UP
    assert host.cluster_type is HostClusterType.CLOUD_MANAGED
    assert host.allocation_state is AllocationState.ENABLED
    assert host.tags == frozenset({"xen", "fast"})
    assert host.cpu_number == 24
    assert host.memory_total == 100549733760
    assert host.management_server_id == "223098941760041"
    assert host.last_pinged == datetime(1970, 1, 16, 0, 54, 43, tzinfo=timezone(timedelta(hours=2)))
    assert host.local_storage_active is False


def test_secondary_storage_vm_host(hosts):
    host = hosts[1]

    assert host.type is HostType.SECONDARY_STORAGE_VM
    assert host.tags == frozenset()
    assert host.to_wire()["type"] == "SecondaryStorageVM"
    assert "hosttags" not in host.to_wire()


def test_host_tags_round_trip():
    host = Host.builder().id("5").tags({"ssd", "gold"}).build()

    wire = host.to_wire()

    assert wire["hosttags"] == "gold,ssd"
    assert Host.from_wire(wire).tags == frozenset({"gold", "ssd"})


def test_host_equality_covers_all_fields(hosts):
    host = hosts[0]

    assert host == Host.from_wire(host.to_wire())
    assert host != host.to_builder().memory_used(1).build()


def test_host_unknown_state_and_type():
    host = Host.from_wire({"id": "1", "state": "Levitating", "type": "QuantumComputer",
                           "jobstatus": 9})

    assert host.state is HostState.UNKNOWN
    assert host.type is HostType.UNKNOWN
    assert host.job_status is AsyncJobStatus.UNKNOWN


def test_capacity_ordering_by_zone_pod_and_type(list_capacity_payload):
    # Arrange
    items = list_capacity_payload["listcapacityresponse"]["capacity"]
    capacities = [Capacity.from_wire(item) for item in items]

    # Act
    ordered = sorted(capacities)

    # Assert
    assert [(c.zone_id, c.type) for c in ordered] == [
        ("1", CapacityType.MEMORY),
        ("1", CapacityType.STORAGE_ALLOCATED),
        ("2", CapacityType.CPU),
    ]
    assert ordered[0].percent_used == pytest.approx(3.6)


def test_capacity_pod_breaks_zone_ties():
    first = Capacity.builder().zone_id(1).pod_id(1).type(CapacityType.VLAN).build()
    second = Capacity.builder().zone_id(1).pod_id(2).type(CapacityType.MEMORY).build()

    assert sorted([second, first]) == [first, second]


def test_capacity_unknown_type_code():
    capacity = Capacity.from_wire({"type": 99, "zoneid": 1})

    assert capacity.type is CapacityType.UNRECOGNIZED


def test_zone_from_wire():
    zone = Zone.from_wire({
        "id": 1, "name": "San Jose 1", "networktype": "Advanced", "dns1": "8.8.8.8",
        "securitygroupsenabled": True, "allocationstate": "Disabled",
    })

    assert zone.network_type is NetworkType.ADVANCED
    assert zone.security_groups_enabled is True
    assert zone.allocation_state is AllocationState.DISABLED
    assert zone.to_wire()["networktype"] == "Advanced"


def test_pod_and_cluster_from_wire():
    pod = Pod.from_wire({"id": 1, "name": "Dev Pod 1", "zoneid": 1, "gateway": "10.26.26.254",
                         "startip": "10.26.26.50", "endip": "10.26.26.100"})
    cluster = Cluster.from_wire({"id": 1, "name": "Xen Clust 1", "podid": 1, "zoneid": 1,
                                 "clustertype": "CloudManaged", "hypervisortype": "XenServer"})

    assert pod.zone_id == "1"
    assert pod.start_ip == "10.26.26.50"
    assert cluster.cluster_type is HostClusterType.CLOUD_MANAGED
    assert cluster.pod_id == "1"


def test_storage_pool_from_wire():
    pool = StoragePool.from_wire({
        "id": 201, "name": "NFS Pri 1", "path": "/export/primary", "state": "Up",
        "type": "NetworkFilesystem", "tags": "primary,nfs", "zoneid": 1,
        "disksizetotal": 898356445184, "created": "2011-11-26T23:28:36+0200",
    })

    assert pool.state is StoragePoolState.UP
    assert pool.type is StoragePoolType.NETWORK_FILESYSTEM
    assert pool.tags == frozenset({"primary", "nfs"})
    assert pool.disk_size_total == 898356445184
    assert pool.to_wire()["tags"] == "nfs,primary"
