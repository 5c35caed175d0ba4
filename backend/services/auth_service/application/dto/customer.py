"""DTOs for the customer portal. The public payloads keep camelCase keys."""
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from shared.models.base_models import Token


class CustomerRegistrationRequest(BaseModel):
    first_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("first_name", "firstName")
    )
    last_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("last_name", "lastName")
    )
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class CustomerProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: Optional[str] = Field(default=None, serialization_alias="firstName")
    last_name: Optional[str] = Field(default=None, serialization_alias="lastName")
    email: str
    phone: Optional[str] = None


class CustomerAuthResult(BaseModel):
    user: CustomerProfile
    token: Token


class CustomerAuthData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user: CustomerProfile
    access_token: str = Field(serialization_alias="accessToken")


class CustomerAuthResponse(BaseModel):
    success: bool = True
    message: str
    data: CustomerAuthData


class CustomerProfileData(BaseModel):
    user: CustomerProfile


class CustomerProfileResponse(BaseModel):
    success: bool = True
    data: CustomerProfileData
