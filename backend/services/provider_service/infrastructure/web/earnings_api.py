import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from services.provider_service.application.dto.dashboard import DashboardResponse
from services.provider_service.application.dto.earnings import (
    EarningsSummaryResponse,
    MonthlyBreakdownResponse,
    ReconciliationResponse,
    TransactionListResponse,
)
from services.provider_service.application.exceptions import ApplicationError
from services.provider_service.application.ports.input.earnings_service import (
    EarningsService,
)
from services.provider_service.infrastructure.dependencies import get_earnings_service
from services.provider_service.infrastructure.web.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/provider", tags=["Earnings"])


@router.get("/earnings/{provider_id}", response_model=EarningsSummaryResponse)
def get_earnings_summary_endpoint(
    provider_id: str, service: EarningsService = Depends(get_earnings_service)
):
    try:
        summary = service.get_earnings_summary(provider_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching earnings")
    except Exception:
        logger.exception("Earnings error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error fetching earnings",
        )
    return EarningsSummaryResponse(earnings=summary)


@router.get(
    "/earnings/{provider_id}/monthly", response_model=MonthlyBreakdownResponse
)
def get_monthly_breakdown_endpoint(
    provider_id: str,
    months: int = Query(default=6, ge=1, le=24),
    service: EarningsService = Depends(get_earnings_service),
):
    try:
        breakdown = service.get_monthly_breakdown(provider_id, months_back=months)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching monthly earnings")
    except Exception:
        logger.exception("Monthly earnings error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error fetching monthly earnings",
        )
    return MonthlyBreakdownResponse(monthly_earnings=breakdown)


@router.get("/dashboard/{provider_id}", response_model=DashboardResponse)
def get_dashboard_endpoint(
    provider_id: str, service: EarningsService = Depends(get_earnings_service)
):
    try:
        snapshot = service.get_dashboard_snapshot(provider_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching dashboard data")
    except Exception:
        logger.exception("Dashboard error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error fetching dashboard data",
        )
    return DashboardResponse.model_validate(snapshot.model_dump())


@router.get("/transactions/{provider_id}", response_model=TransactionListResponse)
def list_transactions_endpoint(
    provider_id: str,
    time: str = Query(default="all"),
    service: EarningsService = Depends(get_earnings_service),
):
    try:
        transactions = service.list_transactions(provider_id, time=time)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching transactions")
    except Exception:
        logger.exception("Transactions error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error fetching transactions",
        )
    return TransactionListResponse(transactions=transactions)


@router.get("/reconcile/{provider_id}", response_model=ReconciliationResponse)
def reconcile_counters_endpoint(
    provider_id: str, service: EarningsService = Depends(get_earnings_service)
):
    """Reports drift between stored provider counters and recomputed ones."""
    try:
        report = service.reconcile_counters(provider_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error reconciling counters")
    except Exception:
        logger.exception("Reconciliation error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error reconciling counters",
        )
    return ReconciliationResponse(report=report)
