import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from services.provider_service.application.dto.job_status import (
    JobListResponse,
    JobStatusUpdateRequest,
)
from services.provider_service.application.dto.provider_account import (
    ProviderLoginResponse,
    ProviderProfileResponse,
    ProviderProfileUpdateRequest,
    ProviderRegistrationRequest,
    ProviderRegistrationResponse,
)
from services.provider_service.application.dto.service_catalog import (
    ServiceCreatedResponse,
    ServiceCreateRequest,
    ServiceListResponse,
    ServiceUpdateRequest,
)
from services.provider_service.application.exceptions import ApplicationError
from services.provider_service.application.ports.input.job_service import JobService
from services.provider_service.application.ports.input.provider_account_service import (
    ProviderAccountService,
)
from services.provider_service.application.ports.input.service_catalog_service import (
    ServiceCatalogService,
)
from services.provider_service.infrastructure.dependencies import (
    get_job_service,
    get_provider_account_service,
    get_service_catalog_service,
)
from services.provider_service.infrastructure.web.errors import to_http_exception
from shared.models.base_models import SuccessResponse
from shared.security.schemas import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/provider", tags=["Provider"])


def _server_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


# ------------------- Account -------------------


@router.post(
    "/register",
    response_model=ProviderRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_provider_endpoint(
    request: ProviderRegistrationRequest,
    service: ProviderAccountService = Depends(get_provider_account_service),
):
    try:
        profile = service.register_provider(
            name=request.name,
            email=request.email,
            phone=request.phone,
            service_type=request.service_type,
            experience=request.experience,
            experience_unit=request.experience_unit,
            password=request.password,
        )
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error during registration")
    except Exception:
        logger.exception("Registration error")
        raise _server_error("Server error during registration")
    return ProviderRegistrationResponse(provider_id=profile.id)


@router.post("/login", response_model=ProviderLoginResponse)
def login_provider_endpoint(
    request: LoginRequest,
    service: ProviderAccountService = Depends(get_provider_account_service),
):
    try:
        result = service.login_provider(email=request.email, password=request.password)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error during login")
    except Exception:
        logger.exception("Login error")
        raise _server_error("Server error during login")
    return ProviderLoginResponse(
        provider=result.provider,
        access_token=result.token.access_token,
        token_type=result.token.token_type,
    )


@router.get("/profile/{provider_id}", response_model=ProviderProfileResponse)
def get_profile_endpoint(
    provider_id: str,
    service: ProviderAccountService = Depends(get_provider_account_service),
):
    try:
        profile = service.get_profile(provider_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching profile")
    except Exception:
        logger.exception("Profile error")
        raise _server_error("Server error fetching profile")
    return ProviderProfileResponse(profile=profile)


@router.put("/profile/{provider_id}", response_model=SuccessResponse)
def update_profile_endpoint(
    provider_id: str,
    request: ProviderProfileUpdateRequest,
    service: ProviderAccountService = Depends(get_provider_account_service),
):
    try:
        service.update_profile(provider_id, request)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error updating profile")
    except Exception:
        logger.exception("Profile update error")
        raise _server_error("Server error updating profile")
    return SuccessResponse(message="Profile updated successfully")


# ------------------- Jobs -------------------


@router.get("/jobs/{provider_id}", response_model=JobListResponse)
def list_jobs_endpoint(
    provider_id: str,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    service: JobService = Depends(get_job_service),
):
    try:
        jobs = service.list_jobs(provider_id, status=status_filter)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching jobs")
    except Exception:
        logger.exception("Jobs error")
        raise _server_error("Server error fetching jobs")
    return JobListResponse(jobs=jobs)


@router.put("/jobs/{job_id}", response_model=SuccessResponse)
def update_job_status_endpoint(
    job_id: str,
    request: JobStatusUpdateRequest,
    service: JobService = Depends(get_job_service),
):
    try:
        service.update_job_status(
            job_id=job_id, new_status=request.status, notes=request.notes
        )
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error updating job")
    except Exception:
        logger.exception("Job update error")
        raise _server_error("Server error updating job")
    return SuccessResponse(message="Job status updated successfully")


# ------------------- Services -------------------


@router.get("/services", response_model=ServiceListResponse)
def list_services_endpoint(
    provider_id: Optional[str] = Query(default=None),
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    try:
        services = service.list_services(provider_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error fetching services")
    except Exception:
        logger.exception("Error fetching services")
        raise _server_error("Server error fetching services")
    return ServiceListResponse(services=services)


@router.post(
    "/services",
    response_model=ServiceCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_service_endpoint(
    request: ServiceCreateRequest,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    try:
        created = service.add_service(
            provider_id=request.provider_id,
            name=request.name,
            price=request.price,
            description=request.description,
            availability=request.availability,
        )
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error adding service")
    except Exception:
        logger.exception("Error adding service")
        raise _server_error("Server error adding service")
    return ServiceCreatedResponse(service_id=created.id)


@router.put("/services/{service_id}", response_model=SuccessResponse)
def update_service_endpoint(
    service_id: str,
    request: ServiceUpdateRequest,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    try:
        service.update_service(service_id, request)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error updating service")
    except Exception:
        logger.exception("Error updating service")
        raise _server_error("Server error updating service")
    return SuccessResponse(message="Service updated successfully")


@router.delete("/services/{service_id}", response_model=SuccessResponse)
def delete_service_endpoint(
    service_id: str,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
):
    try:
        service.delete_service(service_id)
    except ApplicationError as exc:
        raise to_http_exception(exc, "Server error deleting service")
    except Exception:
        logger.exception("Error deleting service")
        raise _server_error("Server error deleting service")
    return SuccessResponse(message="Service deleted successfully")
