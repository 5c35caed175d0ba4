import logging

from fastapi import APIRouter, Depends, HTTPException, status

from services.auth_service.application.dto.admin import (
    AdminDashboardResponse,
    AdminLoginResponse,
    AdminRegistrationRequest,
)
from services.auth_service.application.exceptions import (
    AccessDeniedError,
    InvalidArgumentError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from services.auth_service.application.ports.input.admin_service import AdminService
from services.auth_service.infrastructure.dependencies import get_admin_service
from services.auth_service.infrastructure.security import get_current_admin
from shared.models.base_models import SuccessResponse, TokenData
from shared.security.schemas import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])


@router.post("/register", response_model=SuccessResponse)
def register_admin_endpoint(
    request: AdminRegistrationRequest,
    service: AdminService = Depends(get_admin_service),
):
    try:
        service.register_admin(
            name=request.name,
            email=request.email,
            password=request.password,
            admin_secret=request.admin_secret,
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception:
        logger.exception("Admin registration error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during registration.",
        )
    return SuccessResponse(message="Admin registered successfully.")


@router.post("/login", response_model=AdminLoginResponse)
def login_admin_endpoint(
    request: LoginRequest, service: AdminService = Depends(get_admin_service)
):
    try:
        result = service.login_admin(email=request.email, password=request.password)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception:
        logger.exception("Admin login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during login.",
        )
    return AdminLoginResponse(
        admin=result.admin,
        access_token=result.token.access_token,
        token_type=result.token.token_type,
    )


@router.get("/admin/dashboard", response_model=AdminDashboardResponse)
def admin_dashboard_endpoint(
    token: TokenData = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service),
):
    try:
        admin = service.get_admin(token.subject)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return AdminDashboardResponse(message=f"Welcome, {admin.name}.", admin=admin)
