from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from shared.models.base_models import UserRole, utcnow


class User(BaseModel):
    """
    Account stored in the ``users`` collection. Admins carry only ``name``;
    customers also carry first/last name and phone.
    """

    id: Optional[str] = None
    name: str
    email: str
    hashed_password: str
    role: UserRole = UserRole.USER
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
