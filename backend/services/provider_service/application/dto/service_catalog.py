from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.provider_service.application.domain.service_offering import (
    Availability,
    ServiceOffering,
)


class ServiceCreateRequest(BaseModel):
    provider_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    availability: Optional[Availability] = None


class ServiceUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    availability: Optional[Availability] = None


class ServiceListResponse(BaseModel):
    success: bool = True
    services: List[ServiceOffering] = Field(default_factory=list)


class ServiceCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Service added successfully"
    service_id: str = Field(serialization_alias="serviceId")
