from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from shared.models.base_models import Token


class AdminRegistrationRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    admin_secret: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("admin_secret", "adminSecret")
    )


class AdminIdentity(BaseModel):
    id: str
    name: str
    email: str


class AdminLoginResult(BaseModel):
    admin: AdminIdentity
    token: Token


class AdminLoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful."
    admin: AdminIdentity
    access_token: str
    token_type: str = "bearer"


class AdminDashboardResponse(BaseModel):
    success: bool = True
    message: str
    admin: AdminIdentity
