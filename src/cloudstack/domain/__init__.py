"""
Domain Layer - CloudStack API records by bounded context

- base/: Shared kernel with the record base, wire enums and codecs
- account/: Accounts, users, domains, limits and credentials
- topology/: Zones, pods, clusters, hosts, capacity and storage pools
- network/: Networks, public addresses, traffic rules and security groups
- storage/: Volumes, snapshots and disk offerings
- compute/: Virtual machines, offerings, templates and ISOs
- job/: Asynchronous job status and results
- usage/: Usage records, events, alerts and configuration

Each bounded context contains:
- value_objects.py: Wire enumerations
- models.py: Immutable records
"""

from .account import Account, User
from .base import (
    CloudStackApiError,
    CloudStackRecord,
    DomainException,
    RecordBuilder,
    ResponseParseError,
    ValidationError,
)
from .compute import Template, VirtualMachine
from .job import AsyncCreateResponse, AsyncJob
from .network import IngressRule, SecurityGroup
from .storage import Volume
from .topology import Capacity, Host

__all__ = [
    # Base
    "CloudStackRecord",
    "RecordBuilder",
    "DomainException",
    "ValidationError",
    "ResponseParseError",
    "CloudStackApiError",
    # Common records
    "Account",
    "User",
    "Host",
    "Capacity",
    "SecurityGroup",
    "IngressRule",
    "Volume",
    "VirtualMachine",
    "Template",
    "AsyncJob",
    "AsyncCreateResponse",
]
