from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt
from shared.models.base_models import TokenData, utcnow


def create_access_token(
    data: Dict[str, Any],
    secret_key: str,
    algorithm: str,
    expires_minutes: int,
) -> str:
    """
    Encodes ``data`` as a signed JWT with an ``exp`` claim ``expires_minutes`` from now.
    """
    payload = dict(data)
    payload["exp"] = utcnow() + timedelta(minutes=expires_minutes)
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_access_token(
    token: str,
    secret_key: str,
    algorithm: str,
    invalid_status: int = status.HTTP_401_UNAUTHORIZED,
) -> TokenData:
    """
    Decodes and validates a JWT access token, returning its claims as TokenData.
    Raises ``invalid_status`` (401 unless overridden) if the token is invalid or
    missing required claims.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        raise HTTPException(
            status_code=invalid_status,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    subject: Optional[str] = payload.get("sub")
    if not subject:
        raise HTTPException(
            status_code=invalid_status,
            detail="Token subject missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return TokenData(
        subject=subject,
        email=payload.get("email"),
        role=payload.get("role"),
    )
