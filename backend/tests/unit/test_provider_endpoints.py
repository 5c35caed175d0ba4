import sys
import unittest
from pathlib import Path

from fastapi import HTTPException

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.provider import ServiceType
from services.provider_service.application.dto.dashboard import (
    DashboardProviderSummary,
    DashboardSnapshot,
)
from services.provider_service.application.dto.earnings import EarningsSummary
from services.provider_service.application.dto.job_status import (
    JobStatusUpdateRequest,
)
from services.provider_service.application.dto.provider_account import (
    ProviderProfileUpdateRequest,
)
from services.provider_service.application.dto.service_catalog import (
    ServiceCreateRequest,
)
from services.provider_service.application.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidArgumentError,
    InvalidCredentialsError,
    InvalidTransitionError,
    JobNotFoundError,
    ProviderNotFoundError,
    StoreFailureError,
)
from services.provider_service.infrastructure.web import api, earnings_api
from shared.security.schemas import LoginRequest

PROVIDER_ID = "64b7f0c2a1b2c3d4e5f60718"
JOB_ID = "64b7f0c2a1b2c3d4e5f60799"


class FakeJobService:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def list_jobs(self, provider_id, status=None):
        if self.error:
            raise self.error
        return []

    def update_job_status(self, job_id, new_status, notes=None):
        self.calls.append((job_id, new_status, notes))
        if self.error:
            raise self.error
        return None


class FakeEarningsService:
    def __init__(
        self,
        summary: EarningsSummary | None = None,
        snapshot: DashboardSnapshot | None = None,
        error: Exception | None = None,
    ):
        self.summary = summary
        self.snapshot = snapshot
        self.error = error

    def get_earnings_summary(self, provider_id):
        if self.error:
            raise self.error
        return self.summary

    def get_monthly_breakdown(self, provider_id, months_back=6):
        if self.error:
            raise self.error
        return [MonthlyEarnings(year=2024, month=4, total=300.0)]

    def get_dashboard_snapshot(self, provider_id):
        if self.error:
            raise self.error
        return self.snapshot

    def list_transactions(self, *args, **kwargs):  # pragma: no cover - helper stub
        raise NotImplementedError()

    def reconcile_counters(self, *args, **kwargs):  # pragma: no cover - helper stub
        raise NotImplementedError()


class FakeAccountService:
    def __init__(self, error: Exception | None = None):
        self.error = error

    def login_provider(self, email, password):
        raise self.error

    def update_profile(self, provider_id, update):
        raise self.error


class FakeCatalogService:
    def __init__(self, error: Exception | None = None):
        self.error = error

    def add_service(self, **kwargs):
        raise self.error


class TestJobEndpoints(unittest.TestCase):
    def test_update_job_status_success(self):
        service = FakeJobService()

        result = api.update_job_status_endpoint(
            job_id=JOB_ID,
            request=JobStatusUpdateRequest(status="completed", notes="done"),
            service=service,
        )

        self.assertTrue(result.success)
        self.assertEqual(result.message, "Job status updated successfully")
        self.assertEqual(service.calls, [(JOB_ID, "completed", "done")])

    def test_update_job_status_error_mapping(self):
        cases = [
            (InvalidArgumentError("Status is required"), 400, "Status is required"),
            (JobNotFoundError("Job not found"), 404, "Job not found"),
            (InvalidTransitionError("Illegal"), 409, "Illegal"),
            (StoreFailureError("down"), 500, "Server error updating job"),
            (RuntimeError("boom"), 500, "Server error updating job"),
        ]
        for error, status_code, detail in cases:
            with self.subTest(error=type(error).__name__):
                with self.assertRaises(HTTPException) as ctx:
                    api.update_job_status_endpoint(
                        job_id=JOB_ID,
                        request=JobStatusUpdateRequest(status="completed"),
                        service=FakeJobService(error=error),
                    )
                self.assertEqual(ctx.exception.status_code, status_code)
                self.assertEqual(ctx.exception.detail, detail)

    def test_list_jobs_invalid_provider(self):
        with self.assertRaises(HTTPException) as ctx:
            api.list_jobs_endpoint(
                provider_id="bad",
                status_filter=None,
                service=FakeJobService(error=InvalidArgumentError("Invalid provider ID")),
            )
        self.assertEqual(ctx.exception.status_code, 400)


class TestEarningsEndpoints(unittest.TestCase):
    def test_earnings_summary(self):
        summary = EarningsSummary(lifetime=900.0, monthly=300.0, weekly=85.0, pending=150.0)

        result = earnings_api.get_earnings_summary_endpoint(
            provider_id=PROVIDER_ID, service=FakeEarningsService(summary=summary)
        )

        self.assertTrue(result.success)
        self.assertEqual(result.earnings.lifetime, 900.0)

    def test_dashboard_payload_uses_camel_case_lists(self):
        snapshot = DashboardSnapshot(
            provider=DashboardProviderSummary(
                name="Mike Johnson",
                service_type=ServiceType.ELECTRICAL,
                rating=4.8,
                total_jobs=10,
                pending_jobs=3,
                completed_jobs=6,
                total_earnings=1250.0,
                today_appointments=1,
            ),
            monthly_earnings=[MonthlyEarnings(year=2024, month=5, total=450.0)],
        )

        result = earnings_api.get_dashboard_endpoint(
            provider_id=PROVIDER_ID, service=FakeEarningsService(snapshot=snapshot)
        )
        payload = result.model_dump(by_alias=True)

        self.assertTrue(payload["success"])
        self.assertEqual(payload["provider"]["today_appointments"], 1)
        self.assertEqual(payload["recentJobs"], [])
        self.assertEqual(payload["monthlyEarnings"][0]["total"], 450.0)

    def test_dashboard_unknown_provider(self):
        with self.assertRaises(HTTPException) as ctx:
            earnings_api.get_dashboard_endpoint(
                provider_id=PROVIDER_ID,
                service=FakeEarningsService(error=ProviderNotFoundError("Provider not found")),
            )
        self.assertEqual(ctx.exception.status_code, 404)

    def test_monthly_breakdown(self):
        result = earnings_api.get_monthly_breakdown_endpoint(
            provider_id=PROVIDER_ID, months=3, service=FakeEarningsService()
        )
        self.assertEqual(
            result.model_dump(by_alias=True)["monthlyEarnings"],
            [{"year": 2024, "month": 4, "total": 300.0}],
        )

    def test_earnings_store_failure(self):
        with self.assertRaises(HTTPException) as ctx:
            earnings_api.get_earnings_summary_endpoint(
                provider_id=PROVIDER_ID,
                service=FakeEarningsService(error=StoreFailureError("down")),
            )
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.detail, "Server error fetching earnings")


class TestAccountAndCatalogEndpoints(unittest.TestCase):
    def test_login_invalid_credentials_is_401(self):
        with self.assertRaises(HTTPException) as ctx:
            api.login_provider_endpoint(
                request=LoginRequest(email="mike@example.com", password="nope"),
                service=FakeAccountService(
                    error=InvalidCredentialsError("Invalid email or password")
                ),
            )
        self.assertEqual(ctx.exception.status_code, 401)

    def test_profile_update_with_taken_email_is_409(self):
        with self.assertRaises(HTTPException) as ctx:
            api.update_profile_endpoint(
                provider_id=PROVIDER_ID,
                request=ProviderProfileUpdateRequest(email="taken@example.com"),
                service=FakeAccountService(
                    error=EmailAlreadyRegisteredError("Email already registered")
                ),
            )
        self.assertEqual(ctx.exception.status_code, 409)

    def test_add_service_missing_fields_is_400(self):
        with self.assertRaises(HTTPException) as ctx:
            api.add_service_endpoint(
                request=ServiceCreateRequest(provider_id=PROVIDER_ID),
                service=FakeCatalogService(
                    error=InvalidArgumentError("provider_id, name, and price are required")
                ),
            )
        self.assertEqual(ctx.exception.status_code, 400)


if __name__ == "__main__":
    unittest.main()
