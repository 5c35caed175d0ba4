from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models.base_models import utcnow


class Availability(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ServiceOffering(BaseModel):
    id: Optional[str] = None
    provider_id: str
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    availability: Availability = Availability.AVAILABLE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
