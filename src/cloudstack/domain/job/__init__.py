"""Job bounded context - asynchronous job status and results."""

from .models import AsyncCreateResponse, AsyncJob, AsyncJobError, JobResult
from .value_objects import AsyncJobErrorCode, AsyncJobResultCode, AsyncJobStatus

__all__ = [
    "AsyncJob",
    "AsyncJobStatus",
    "AsyncJobResultCode",
    "AsyncJobError",
    "AsyncJobErrorCode",
    "AsyncCreateResponse",
    "JobResult",
]
