import logging

from fastapi import APIRouter, Depends, HTTPException, status

from services.auth_service.application.dto.customer import (
    CustomerAuthData,
    CustomerAuthResponse,
    CustomerProfileData,
    CustomerProfileResponse,
    CustomerRegistrationRequest,
)
from services.auth_service.application.exceptions import (
    InvalidArgumentError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from services.auth_service.application.ports.input.customer_service import (
    CustomerService,
)
from services.auth_service.infrastructure.dependencies import get_customer_service
from services.auth_service.infrastructure.security import get_current_customer_id
from shared.security.schemas import LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Customer"])


@router.post(
    "/auth/register",
    response_model=CustomerAuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_customer_endpoint(
    request: CustomerRegistrationRequest,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        result = service.register_customer(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            password=request.password,
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception:
        logger.exception("Customer registration error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    return CustomerAuthResponse(
        message="User registered successfully",
        data=CustomerAuthData(user=result.user, access_token=result.token.access_token),
    )


@router.post("/auth/login", response_model=CustomerAuthResponse)
def login_customer_endpoint(
    request: LoginRequest, service: CustomerService = Depends(get_customer_service)
):
    try:
        result = service.login_customer(email=request.email, password=request.password)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception:
        logger.exception("Customer login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    return CustomerAuthResponse(
        message="Login successful",
        data=CustomerAuthData(user=result.user, access_token=result.token.access_token),
    )


@router.get("/user/profile", response_model=CustomerProfileResponse)
def get_customer_profile_endpoint(
    user_id: str = Depends(get_current_customer_id),
    service: CustomerService = Depends(get_customer_service),
):
    try:
        profile = service.get_profile(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CustomerProfileResponse(data=CustomerProfileData(user=profile))
