"""Tests for async job records."""

import pytest

from cloudstack.domain.compute import VirtualMachine, VirtualMachineState
from cloudstack.domain.job import (
    AsyncCreateResponse,
    AsyncJob,
    AsyncJobErrorCode,
    AsyncJobResultCode,
    AsyncJobStatus,
    JobResult,
)


@pytest.fixture
def succeeded_job(deploy_vm_job_payload):
    return AsyncJob.from_wire(deploy_vm_job_payload["queryasyncjobresultresponse"])


@pytest.fixture
def failed_job(failed_job_payload):
    return AsyncJob.from_wire(failed_job_payload["queryasyncjobresultresponse"])


def test_succeeded_job(succeeded_job):
    assert succeeded_job.id == "1138"
    assert succeeded_job.status is AsyncJobStatus.SUCCEEDED
    assert succeeded_job.result_code is AsyncJobResultCode.SUCCESS
    assert succeeded_job.command == "com.cloud.api.commands.DeployVMCmd"
    assert succeeded_job.has_succeeded()
    assert not succeeded_job.has_failed()
    assert succeeded_job.error is None


def test_result_as_record(succeeded_job):
    # Act
    vm = succeeded_job.result_as(VirtualMachine)

    # Assert
    assert isinstance(vm, VirtualMachine)
    assert vm.id == "1352"
    assert vm.state is VirtualMachineState.RUNNING


def test_result_as_accepts_bare_object():
    job = AsyncJob.from_wire({"jobid": 1, "jobstatus": 1, "jobresult": {"success": True,
                                                                        "displaytext": "done"}})

    result = job.result_as(JobResult)

    assert result.success is True
    assert result.display_text == "done"


def test_failed_job(failed_job):
    assert failed_job.status is AsyncJobStatus.FAILED
    assert failed_job.result_code is AsyncJobResultCode.FAIL
    assert failed_job.has_failed()
    assert not failed_job.has_succeeded()
    assert failed_job.result_as(VirtualMachine) is None


def test_failed_job_error(failed_job):
    error = failed_job.error

    assert error.error_code is AsyncJobErrorCode.INSUFFICIENT_CAPACITY_ERROR
    assert error.error_text == "Insufficient capacity"


def test_unknown_error_code():
    job = AsyncJob.from_wire({"jobid": 2, "jobstatus": 2,
                              "jobresult": {"errorcode": 431, "errortext": "bad parameter"}})

    assert job.error.error_code is AsyncJobErrorCode.UNKNOWN


def test_pending_job():
    job = AsyncJob.from_wire({"jobid": 3, "jobstatus": 0, "jobprocstatus": 40})

    assert job.status is AsyncJobStatus.IN_PROGRESS
    assert job.progress == 40
    assert not job.has_succeeded()
    assert not job.has_failed()
    assert job.result_as(VirtualMachine) is None


def test_jobs_order_by_id():
    jobs = [AsyncJob.from_wire({"jobid": i}) for i in (30, 4, 100)]

    assert [j.id for j in sorted(jobs)] == ["4", "30", "100"]


def test_async_create_response():
    response = AsyncCreateResponse.from_wire({"id": 42, "jobid": 99})

    assert response.id == "42"
    assert response.job_id == "99"
    assert response.to_wire() == {"id": "42", "jobid": "99"}
