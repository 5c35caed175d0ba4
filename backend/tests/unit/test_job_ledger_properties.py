"""
End-to-end behaviour of status updates against an in-memory ledger: job
fields, provider counters and transactions are observed together.
"""
import copy
import sys
import unittest
from datetime import datetime
from pathlib import Path

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from services.provider_service.application.domain.job import Job, JobStatus
from services.provider_service.application.domain.job_transition import JobTransition
from services.provider_service.application.exceptions import JobNotFoundError
from services.provider_service.application.ports.output.job_ledger_repository import (
    JobLedgerRepository,
)
from services.provider_service.application.ports.output.job_repository import (
    JobRepository,
)
from services.provider_service.application.services.job_service_impl import (
    JobServiceImpl,
)

PROVIDER_ID = "64b7f0c2a1b2c3d4e5f60718"
JOB_ID = "64b7f0c2a1b2c3d4e5f60799"
UNKNOWN_JOB_ID = "64b7f0c2a1b2c3d4e5f60000"
NOW = datetime(2024, 5, 10, 14, 30)


class InMemoryStore:
    def __init__(self):
        self.jobs = {}
        self.providers = {
            PROVIDER_ID: {
                "total_jobs": 3,
                "pending_jobs": 2,
                "completed_jobs": 1,
                "total_earnings": 120.0,
            }
        }
        self.transactions = []

    def snapshot(self):
        return copy.deepcopy((self.jobs, self.providers, self.transactions))


class InMemoryJobRepository(JobRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_by_id(self, job_id):
        return self.store.jobs.get(job_id)

    def list_by_provider(self, provider_id, status=None):  # pragma: no cover - unused
        raise NotImplementedError()

    def list_recent(self, provider_id, limit):  # pragma: no cover - unused
        raise NotImplementedError()

    def count_in_date_range(self, provider_id, start, end):  # pragma: no cover - unused
        raise NotImplementedError()

    def sum_amount_by_status(self, provider_id, status):  # pragma: no cover - unused
        raise NotImplementedError()

    def count_by_status(self, provider_id):  # pragma: no cover - unused
        raise NotImplementedError()


class InMemoryLedgerRepository(JobLedgerRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    def apply_transition(self, transition: JobTransition) -> None:
        job = self.store.jobs[transition.job_id]
        self.store.jobs[transition.job_id] = Job.model_validate(
            {**job.model_dump(), **transition.job_fields}
        )

        provider = self.store.providers[transition.provider_id]
        for counter, delta in transition.counter_deltas.items():
            provider[counter] += delta

        if transition.transaction is not None:
            self.store.transactions.append(transition.transaction)


class TestJobLedgerProperties(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryStore()
        self.service = JobServiceImpl(
            job_repository=InMemoryJobRepository(self.store),
            ledger_repository=InMemoryLedgerRepository(self.store),
            clock=lambda: NOW,
        )

    def add_job(self, amount=85.0, status=JobStatus.PENDING):
        self.store.jobs[JOB_ID] = Job(
            id=JOB_ID,
            provider_id=PROVIDER_ID,
            customer_name="Robert Davis",
            service_type="Outlet Installation",
            amount=amount,
            status=status,
            date=datetime(2024, 5, 10, 9, 0),
        )

    @property
    def provider(self):
        return self.store.providers[PROVIDER_ID]

    def test_outlet_installation_completed(self):
        self.add_job()

        self.service.update_job_status(JOB_ID, "completed")

        self.assertEqual(self.provider["completed_jobs"], 2)
        self.assertEqual(self.provider["pending_jobs"], 1)
        self.assertEqual(self.provider["total_earnings"], 205.0)
        self.assertEqual(self.provider["total_jobs"], 3)
        self.assertEqual(len(self.store.transactions), 1)
        transaction = self.store.transactions[0]
        self.assertEqual(transaction.amount, 85.0)
        self.assertEqual(transaction.service, "Outlet Installation")
        self.assertEqual(transaction.customer_name, "Robert Davis")
        self.assertEqual(transaction.provider_id, PROVIDER_ID)
        self.assertEqual(self.store.jobs[JOB_ID].status, JobStatus.COMPLETED)

    def test_completed_without_amount_leaves_earnings_alone(self):
        self.add_job(amount=None)

        self.service.update_job_status(JOB_ID, "completed")

        self.assertEqual(self.store.transactions, [])
        self.assertEqual(self.provider["total_earnings"], 120.0)
        self.assertEqual(self.provider["completed_jobs"], 2)

    def test_repeated_pending_increments_each_time(self):
        self.add_job(status=JobStatus.IN_PROGRESS)

        self.service.update_job_status(JOB_ID, "pending")
        self.service.update_job_status(JOB_ID, "pending")

        self.assertEqual(self.provider["pending_jobs"], 4)

    def test_completing_twice_records_two_transactions(self):
        self.add_job()

        self.service.update_job_status(JOB_ID, "completed")
        self.service.update_job_status(JOB_ID, "completed")

        self.assertEqual(len(self.store.transactions), 2)
        self.assertEqual(self.provider["total_earnings"], 290.0)

    def test_cancelled_changes_only_the_job(self):
        self.add_job()
        providers_before = copy.deepcopy(self.store.providers)

        self.service.update_job_status(JOB_ID, "cancelled", notes="Customer called off")

        self.assertEqual(self.store.providers, providers_before)
        self.assertEqual(self.store.transactions, [])
        self.assertEqual(self.store.jobs[JOB_ID].status, JobStatus.CANCELLED)
        self.assertEqual(self.store.jobs[JOB_ID].description, "Customer called off")

    def test_unknown_job_mutates_nothing(self):
        self.add_job()
        before = self.store.snapshot()

        with self.assertRaises(JobNotFoundError):
            self.service.update_job_status(UNKNOWN_JOB_ID, "completed")

        self.assertEqual(self.store.snapshot(), before)

    def test_earnings_delta_equals_sum_of_new_transactions(self):
        self.add_job(amount=42.5)
        earnings_before = self.provider["total_earnings"]

        self.service.update_job_status(JOB_ID, "completed")

        added = sum(tx.amount for tx in self.store.transactions)
        self.assertEqual(self.provider["total_earnings"] - earnings_before, added)


if __name__ == "__main__":
    unittest.main()
