"""Compute bounded context - virtual machines, offerings, templates and ISOs."""

from .models import ISO, OSType, ServiceOffering, Template, VirtualMachine, VMGroup
from .value_objects import (
    ISOFilter,
    TemplateFilter,
    TemplateFormat,
    TemplateStatus,
    TemplateType,
    VirtualMachineState,
)

__all__ = [
    "VirtualMachine",
    "VirtualMachineState",
    "ServiceOffering",
    "Template",
    "TemplateType",
    "TemplateStatus",
    "TemplateFormat",
    "TemplateFilter",
    "ISO",
    "ISOFilter",
    "OSType",
    "VMGroup",
]
