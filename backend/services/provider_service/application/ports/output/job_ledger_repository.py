from abc import ABC, abstractmethod

from services.provider_service.application.domain.job_transition import JobTransition


class JobLedgerRepository(ABC):
    """Output port that persists the write set of a job status change."""

    @abstractmethod
    def apply_transition(self, transition: JobTransition) -> None:
        """
        Applies, in order: the job field update, the provider counter deltas and
        the optional transaction insert. Implementations may group the three
        writes atomically; otherwise a failure leaves earlier writes in place.
        """
        pass
