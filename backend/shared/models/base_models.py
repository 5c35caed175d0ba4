from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, EmailStr

# =============================================================================
# Enums shared by more than one portal
# =============================================================================


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class ProviderRole(str, Enum):
    PROVIDER = "provider"


# =============================================================================
# Token Models (every portal)
# =============================================================================


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    subject: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[str] = None


# =============================================================================
# Generic API Responses
# =============================================================================


class Message(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str


# =============================================================================
# Helpers
# =============================================================================


def utcnow() -> datetime:
    """Naive UTC timestamp, the representation pymongo hands back by default."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_object_id(value: object) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)
