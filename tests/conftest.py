"""Shared pytest fixtures: CloudStack response payloads as the API returns them."""
import logging

import pytest


@pytest.fixture
def list_accounts_payload():
    return {
        "listaccountsresponse": {
            "count": 1,
            "account": [
                {
                    "id": 505,
                    "name": "jclouds",
                    "accounttype": 2,
                    "domainid": 457,
                    "domain": "AA000062-jclouds-dev",
                    "receivedbytes": 318483,
                    "sentbytes": 23456,
                    "vmlimit": "Unlimited",
                    "vmtotal": 2,
                    "vmavailable": "Unlimited",
                    "iplimit": "Unlimited",
                    "iptotal": 3,
                    "ipavailable": "Unlimited",
                    "volumelimit": "Unlimited",
                    "volumetotal": 2,
                    "volumeavailable": "Unlimited",
                    "snapshotlimit": "Unlimited",
                    "snapshottotal": 0,
                    "snapshotavailable": "Unlimited",
                    "templatelimit": "Unlimited",
                    "templatetotal": 0,
                    "templateavailable": "Unlimited",
                    "vmstopped": 0,
                    "vmrunning": 2,
                    "state": "enabled",
                    "user": [
                        {
                            "id": 505,
                            "username": "jclouds",
                            "firstname": "Jclouds",
                            "lastname": "CloudStack",
                            "email": "jclouds@example.com",
                            "created": "2011-12-04T00:55:48-0800",
                            "state": "enabled",
                            "account": "jclouds",
                            "accounttype": 2,
                            "domainid": 457,
                            "domain": "AA000062-jclouds-dev",
                            "apikey": "APIKEY",
                            "secretkey": "SECRETKEY",
                        }
                    ],
                }
            ],
        }
    }


@pytest.fixture
def list_hosts_payload():
    return {
        "listhostsresponse": {
            "count": 2,
            "host": [
                {
                    "id": 1,
                    "name": "cs2-xevsrv.alucloud.local",
                    "state": "Up",
                    "type": "Routing",
                    "ipaddress": "10.26.26.107",
                    "zoneid": 1,
                    "zonename": "Dev Zone 1",
                    "podid": 1,
                    "podname": "Dev Pod 1",
                    "version": "2.2.12.20110928142833",
                    "hypervisor": "XenServer",
                    "cpunumber": 24,
                    "cpuspeed": 2266,
                    "cpuallocated": "2.76%",
                    "cpuused": "0.1%",
                    "cpuwithoverprovisioning": 54384.0,
                    "networkkbsread": 4443,
                    "networkkbswrite": 15048,
                    "memorytotal": 100549733760,
                    "memoryallocated": 3623878656,
                    "memoryused": 3623878656,
                    "disksizetotal": 0,
                    "disksizeallocated": 0,
                    "capabilities": "xen-3.0-x86_64 , hvm-3.0-x86_64",
                    "lastpinged": "1970-01-16T00:54:43+0200",
                    "managementserverid": 223098941760041,
                    "clusterid": 1,
                    "clustername": "Xen Clust 1",
                    "clustertype": "CloudManaged",
                    "islocalstorageactive": False,
                    "created": "2011-11-26T23:28:36+0200",
                    "events": "PrepareUnmanaged; HypervisorVersionChanged; ManagementServerDown",
                    "hosttags": "xen,fast",
                    "hasenoughcapacity": False,
                    "allocationstate": "Enabled",
                },
                {
                    "id": 2,
                    "name": "s-1-VM",
                    "state": "Up",
                    "type": "SecondaryStorageVM",
                    "ipaddress": "10.26.26.81",
                    "zoneid": 1,
                    "zonename": "Dev Zone 1",
                    "podid": 1,
                    "podname": "Dev Pod 1",
                    "version": "2.2.12.20110928142833",
                    "islocalstorageactive": False,
                    "created": "2011-11-26T23:34:42+0200",
                    "events": "AgentDisconnected; Remove; MaintenanceRequested",
                    "hasenoughcapacity": False,
                    "allocationstate": "Enabled",
                },
            ],
        }
    }


@pytest.fixture
def list_capacity_payload():
    return {
        "listcapacityresponse": {
            "count": 3,
            "capacity": [
                {"type": 1, "zoneid": 2, "zonename": "Zone B", "podid": 1,
                 "capacityused": 400, "capacitytotal": 1000, "percentused": "40"},
                {"type": 0, "zoneid": 1, "zonename": "Zone A", "podid": 1,
                 "capacityused": 3623878656, "capacitytotal": 100549733760, "percentused": "3.6"},
                {"type": 3, "zoneid": 1, "zonename": "Zone A", "podid": 1,
                 "capacityused": 0, "capacitytotal": 5, "percentused": "0"},
            ],
        }
    }


@pytest.fixture
def list_security_groups_payload():
    return {
        "listsecuritygroupsresponse": {
            "count": 1,
            "securitygroup": [
                {
                    "id": 13,
                    "name": "default",
                    "description": "Default Security Group",
                    "account": "adrian",
                    "domainid": 1,
                    "domain": "ROOT",
                    "ingressrule": [
                        {"ruleid": 5, "protocol": "tcp", "startport": 22, "endport": 22,
                         "cidr": "0.0.0.0/0"},
                        {"ruleid": 6, "protocol": "tcp", "startport": 80, "endport": 80,
                         "account": "adrian", "securitygroupname": "web"},
                        {"ruleid": 7, "protocol": "icmp", "icmptype": -1, "icmpcode": -1},
                    ],
                }
            ],
        }
    }


@pytest.fixture
def deploy_vm_job_payload():
    return {
        "queryasyncjobresultresponse": {
            "jobid": 1138,
            "jobstatus": 1,
            "jobprocstatus": 0,
            "jobresultcode": 0,
            "jobresulttype": "object",
            "cmd": "com.cloud.api.commands.DeployVMCmd",
            "created": "2011-12-04T00:55:48-0800",
            "jobresult": {
                "virtualmachine": {
                    "id": 1352,
                    "name": "i-3-1352-VM",
                    "displayname": "web-1",
                    "account": "adrian",
                    "domainid": 1,
                    "domain": "ROOT",
                    "state": "Running",
                    "haenable": False,
                    "zoneid": 1,
                    "zonename": "San Jose 1",
                    "templateid": 2,
                    "templatename": "CentOS 5.3(64-bit) no GUI (XenServer)",
                    "serviceofferingid": 1,
                    "serviceofferingname": "Small Instance",
                    "cpunumber": 1,
                    "cpuspeed": 500,
                    "memory": 512,
                    "cpuused": "0,5%",
                    "guestosid": 11,
                    "rootdeviceid": 0,
                    "rootdevicetype": "NetworkFilesystem",
                    "nic": [
                        {"id": 1371, "networkid": 204, "netmask": "255.255.255.0",
                         "gateway": "10.1.1.1", "ipaddress": "10.1.1.18",
                         "traffictype": "Guest", "type": "Virtual", "isdefault": True}
                    ],
                    "hypervisor": "XenServer",
                }
            },
        }
    }


@pytest.fixture
def failed_job_payload():
    return {
        "queryasyncjobresultresponse": {
            "jobid": 1139,
            "jobstatus": 2,
            "jobprocstatus": 0,
            "jobresultcode": 530,
            "jobresulttype": "object",
            "jobresult": {"errorcode": 533, "errortext": "Insufficient capacity"},
        }
    }


@pytest.fixture
def restore_root_logging():
    """Put back the root logger handlers and level changed by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
