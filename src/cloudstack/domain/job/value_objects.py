"""Async job enumerations.

``AsyncJobStatus`` is shared by every record that carries a ``jobstatus``.
"""
from cloudstack.domain.base.wire_enum import CodeEnum


class AsyncJobStatus(CodeEnum):
    IN_PROGRESS = 0
    SUCCEEDED = 1
    FAILED = 2
    UNKNOWN = -1


class AsyncJobResultCode(CodeEnum):
    SUCCESS = 0
    FAIL = 530
    UNKNOWN = -1


class AsyncJobErrorCode(CodeEnum):
    """Error codes carried by a failed job result."""
    INTERNAL_ERROR = 530
    ACCOUNT_ERROR = 531
    ACCOUNT_RESOURCE_LIMIT_ERROR = 532
    INSUFFICIENT_CAPACITY_ERROR = 533
    RESOURCE_UNAVAILABLE_ERROR = 534
    RESOURCE_ALLOCATION_ERROR = 535
    RESOURCE_IN_USE_ERROR = 536
    NETWORK_RULE_CONFLICT_ERROR = 537
    UNKNOWN = -1


__all__ = ["AsyncJobStatus", "AsyncJobResultCode", "AsyncJobErrorCode"]
