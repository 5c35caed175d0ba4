from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from services.auth_service.infrastructure.config import settings
from shared.models.base_models import TokenData, UserRole
from shared.security.jwt import decode_access_token

_auth_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_auth_scheme),
) -> TokenData:
    """
    Validates the bearer token of an admin request. Missing, invalid and
    non-admin tokens are all rejected with 401.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = decode_access_token(
        token=credentials.credentials,
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    if token_data.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token_data


def get_current_customer_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_auth_scheme),
) -> str:
    """Customer tokens: 401 when absent, 403 when invalid or expired."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
        )

    token_data = decode_access_token(
        token=credentials.credentials,
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        invalid_status=status.HTTP_403_FORBIDDEN,
    )
    return token_data.subject
