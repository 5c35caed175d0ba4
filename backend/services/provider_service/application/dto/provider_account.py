"""DTOs for provider registration, login and profile management."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from services.provider_service.application.domain.provider import (
    ExperienceUnit,
    ServiceType,
)
from shared.models.base_models import Token


class ProviderRegistrationRequest(BaseModel):
    name: str
    email: EmailStr
    phone: str
    service_type: ServiceType
    experience: int = Field(ge=0)
    experience_unit: ExperienceUnit = ExperienceUnit.YEARS
    password: str


class ProviderRegistrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Provider registered successfully"
    provider_id: str = Field(serialization_alias="providerId")


class ProviderIdentity(BaseModel):
    id: str
    name: str
    email: str
    service_type: ServiceType


class ProviderLoginResult(BaseModel):
    provider: ProviderIdentity
    token: Token


class ProviderLoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    provider: ProviderIdentity
    access_token: str
    token_type: str = "bearer"


class ProviderProfile(BaseModel):
    """Provider as exposed over the API: everything except the password hash."""

    id: str
    name: str
    email: str
    phone: str
    service_type: ServiceType
    experience: int
    experience_unit: ExperienceUnit
    license_image: Optional[str] = None
    profile_image: Optional[str] = None
    rating: float
    total_jobs: int
    pending_jobs: int
    completed_jobs: int
    total_earnings: float
    created_at: datetime
    updated_at: datetime


class ProviderProfileResponse(BaseModel):
    success: bool = True
    profile: ProviderProfile


class ProviderProfileUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    service_type: Optional[ServiceType] = None
    experience: Optional[int] = Field(default=None, ge=0)
