from abc import ABC, abstractmethod
from typing import List, Optional

from services.provider_service.application.domain.service_offering import (
    Availability,
    ServiceOffering,
)
from services.provider_service.application.dto.service_catalog import (
    ServiceUpdateRequest,
)


class ServiceCatalogService(ABC):
    """Input port for managing the services a provider offers."""

    @abstractmethod
    def list_services(self, provider_id: Optional[str]) -> List[ServiceOffering]:
        pass

    @abstractmethod
    def add_service(
        self,
        provider_id: Optional[str],
        name: Optional[str],
        price: Optional[float],
        description: Optional[str] = None,
        availability: Optional[Availability] = None,
    ) -> ServiceOffering:
        pass

    @abstractmethod
    def update_service(self, service_id: str, update: ServiceUpdateRequest) -> None:
        """Writes only the fields present in ``update``."""
        pass

    @abstractmethod
    def delete_service(self, service_id: str) -> None:
        pass
