"""Async job records.

These describe a job running on the management server. Waiting for a job
to finish is the caller's concern; the records only carry what a
``queryAsyncJobResult`` or ``listAsyncJobs`` response reports.
"""
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Optional, Type, TypeVar

from pydantic import Field

from cloudstack.domain.base.codecs import WireDate
from cloudstack.domain.base.record import CloudStackRecord
from cloudstack.domain.job.value_objects import (
    AsyncJobErrorCode,
    AsyncJobResultCode,
    AsyncJobStatus,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CloudStackRecord)


class AsyncJobError(CloudStackRecord):
    """Error payload of a failed job."""

    ErrorCode: ClassVar[type] = AsyncJobErrorCode
    identity_field = None

    error_code: Optional[AsyncJobErrorCode] = Field(default=None, alias="errorcode")
    error_text: Optional[str] = Field(default=None, alias="errortext")


class AsyncCreateResponse(CloudStackRecord):
    """Reply to an asynchronous create: the new resource id and its job id."""

    id: Optional[str] = None
    job_id: Optional[str] = Field(default=None, alias="jobid")


class JobResult(CloudStackRecord):
    """Plain success flag returned by jobs that produce no resource."""

    identity_field = None

    success: bool = False
    display_text: Optional[str] = Field(default=None, alias="displaytext")


class AsyncJob(CloudStackRecord):
    """
    Status and result of an asynchronous job.

    ``result`` holds the raw ``jobresult`` object; use ``result_as`` to decode
    it into a record, or ``error`` when the job failed.
    """

    Status: ClassVar[type] = AsyncJobStatus
    ResultCode: ClassVar[type] = AsyncJobResultCode
    identity_field = "id"
    wire_collection = "asyncjobs"

    account_id: Optional[str] = Field(default=None, alias="accountid")
    command: Optional[str] = Field(default=None, alias="cmd")
    created: WireDate = None
    id: Optional[str] = Field(default=None, alias="jobid")
    instance_id: Optional[str] = Field(default=None, alias="jobinstanceid")
    instance_type: Optional[str] = Field(default=None, alias="jobinstancetype")
    progress: int = Field(default=0, alias="jobprocstatus")
    result: Optional[Any] = Field(default=None, alias="jobresult")
    result_code: Optional[AsyncJobResultCode] = Field(default=None, alias="jobresultcode")
    result_type: Optional[str] = Field(default=None, alias="jobresulttype")
    status: Optional[AsyncJobStatus] = Field(default=None, alias="jobstatus")
    user_id: Optional[str] = Field(default=None, alias="userid")

    def has_failed(self) -> bool:
        return self.status is AsyncJobStatus.FAILED or self.result_code is AsyncJobResultCode.FAIL

    def has_succeeded(self) -> bool:
        return self.status is AsyncJobStatus.SUCCEEDED and self.result_code is not AsyncJobResultCode.FAIL

    @property
    def error(self) -> Optional[AsyncJobError]:
        """Decoded error payload when the job failed, otherwise None."""
        if not self.has_failed() or not isinstance(self.result, Mapping):
            return None
        return AsyncJobError.from_wire(self.result)

    def result_as(self, record_cls: Type[R]) -> Optional[R]:
        """
        Decode the job result into a record.

        CloudStack nests the created resource under its collection key, e.g.
        ``{"virtualmachine": {...}}``; the bare object is accepted too.

        Args:
            record_cls: Record type the job produces

        Returns:
            Decoded record, or None when the job carries no result or failed
        """
        if self.result is None or self.has_failed():
            return None
        if isinstance(self.result, record_cls):
            return self.result
        payload = self.result
        if isinstance(payload, Mapping) and record_cls.wire_collection in payload:
            payload = payload[record_cls.wire_collection]
        if not isinstance(payload, Mapping):
            logger.debug("Job %s result is not an object: %r", self.id, payload)
            return None
        return record_cls.from_wire(payload)


__all__ = ["AsyncJob", "AsyncJobError", "AsyncCreateResponse", "JobResult"]
