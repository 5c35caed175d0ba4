"""
Job status transitions and the provider/ledger side effects they trigger.

The side effects depend only on the *new* status. Under the permissive mode
any status may follow any other (including itself), so repeated or backward
moves re-apply their deltas. The strict mode consults ``ALLOWED_TRANSITIONS``.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Set

from pydantic import BaseModel, Field

from services.provider_service.application.domain.job import Job, JobStatus
from services.provider_service.application.domain.transaction import Transaction
from services.provider_service.application.exceptions import InvalidTransitionError


class TransitionMode(str, Enum):
    PERMISSIVE = "permissive"
    STRICT = "strict"


ALLOWED_TRANSITIONS: Dict[JobStatus, Set[JobStatus]] = {
    JobStatus.PENDING: {
        JobStatus.IN_PROGRESS,
        JobStatus.COMPLETED,
        JobStatus.CANCELLED,
    },
    JobStatus.IN_PROGRESS: {
        JobStatus.PENDING,
        JobStatus.COMPLETED,
        JobStatus.CANCELLED,
    },
    JobStatus.COMPLETED: set(),
    JobStatus.CANCELLED: set(),
}

# new status -> provider counter deltas
COUNTER_DELTAS: Dict[JobStatus, Dict[str, int]] = {
    JobStatus.COMPLETED: {"completed_jobs": 1, "pending_jobs": -1},
    JobStatus.IN_PROGRESS: {"pending_jobs": -1},
    JobStatus.PENDING: {"pending_jobs": 1},
    JobStatus.CANCELLED: {},
}


class JobTransition(BaseModel):
    """The complete write set for one status change, in application order."""

    job_id: str
    provider_id: str
    previous_status: JobStatus
    new_status: JobStatus
    job_fields: Dict[str, Any]
    counter_deltas: Dict[str, float] = Field(default_factory=dict)
    transaction: Optional[Transaction] = None


def assert_transition(
    current: JobStatus, new: JobStatus, mode: TransitionMode
) -> None:
    if mode == TransitionMode.PERMISSIVE:
        return
    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise InvalidTransitionError(
            f"Illegal job transition: {current.value} -> {new.value}"
        )


def plan_transition(
    job: Job,
    new_status: JobStatus,
    now: datetime,
    notes: Optional[str] = None,
) -> JobTransition:
    job_fields: Dict[str, Any] = {"status": new_status.value, "updated_at": now}
    if notes:
        job_fields["description"] = notes

    counter_deltas: Dict[str, float] = dict(COUNTER_DELTAS[new_status])
    transaction = None

    if new_status == JobStatus.COMPLETED and job.amount is not None:
        transaction = Transaction(
            provider_id=job.provider_id,
            service=job.service_type,
            customer_name=job.customer_name,
            amount=job.amount,
            date=now,
            created_at=now,
        )
        counter_deltas["total_earnings"] = job.amount

    return JobTransition(
        job_id=job.id,
        provider_id=job.provider_id,
        previous_status=job.status,
        new_status=new_status,
        job_fields=job_fields,
        counter_deltas=counter_deltas,
        transaction=transaction,
    )
