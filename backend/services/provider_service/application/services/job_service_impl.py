import logging
from datetime import datetime
from typing import Callable, List, Optional

from services.provider_service.application.domain.job import Job, JobStatus
from services.provider_service.application.domain.job_transition import (
    JobTransition,
    TransitionMode,
    assert_transition,
    plan_transition,
)
from services.provider_service.application.exceptions import (
    InvalidArgumentError,
    InvalidTransitionError,
    JobNotFoundError,
)
from services.provider_service.application.ports.input.job_service import JobService
from services.provider_service.application.ports.output.job_ledger_repository import (
    JobLedgerRepository,
)
from services.provider_service.application.ports.output.job_repository import (
    JobRepository,
)
from shared.models.base_models import is_valid_object_id, utcnow

logger = logging.getLogger(__name__)


def parse_job_status(value: str) -> JobStatus:
    try:
        return JobStatus(value)
    except ValueError:
        raise InvalidArgumentError(f"Invalid status: {value}")


class JobServiceImpl(JobService):
    """
    Concrete implementation of the JobService input port.
    Loads jobs, validates status changes and hands the resulting write set to
    the ledger repository.
    """

    def __init__(
        self,
        job_repository: JobRepository,
        ledger_repository: JobLedgerRepository,
        transition_mode: TransitionMode = TransitionMode.PERMISSIVE,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.job_repository = job_repository
        self.ledger_repository = ledger_repository
        self.transition_mode = transition_mode
        self.clock = clock

    def list_jobs(self, provider_id: str, status: Optional[str] = None) -> List[Job]:
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")

        status_filter = None
        if status and status != "all":
            status_filter = parse_job_status(status)

        return self.job_repository.list_by_provider(provider_id, status=status_filter)

    def update_job_status(
        self, job_id: str, new_status: Optional[str], notes: Optional[str] = None
    ) -> JobTransition:
        """
        Handles a job status change.
        1. Rejects a missing status, then a malformed job id.
        2. Parses the status into the four known values.
        3. Loads the job; a missing job aborts before any write.
        4. Checks the transition against the configured mode.
        5. Plans the job update, provider counter deltas and optional transaction.
        6. Applies the write set through the ledger repository.
        """
        if not new_status:
            raise InvalidArgumentError("Status is required")
        if not is_valid_object_id(job_id):
            raise InvalidArgumentError("Invalid job ID")

        status = parse_job_status(new_status)

        job = self.job_repository.get_by_id(job_id)
        if not job:
            logger.warning("Status update for unknown job %s", job_id)
            raise JobNotFoundError("Job not found")

        try:
            assert_transition(job.status, status, self.transition_mode)
        except InvalidTransitionError:
            logger.warning(
                "Rejected transition %s -> %s for job %s",
                job.status.value,
                status.value,
                job_id,
            )
            raise

        transition = plan_transition(job, status, now=self.clock(), notes=notes)
        self.ledger_repository.apply_transition(transition)

        logger.info(
            "Job %s moved %s -> %s (provider %s, transaction %s)",
            job_id,
            transition.previous_status.value,
            transition.new_status.value,
            transition.provider_id,
            "created" if transition.transaction else "none",
        )
        return transition
