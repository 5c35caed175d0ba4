from abc import ABC, abstractmethod
from typing import Any, Dict, List

from services.provider_service.application.domain.service_offering import (
    ServiceOffering,
)


class ServiceRepository(ABC):
    """Output port for a provider's service catalog."""

    @abstractmethod
    def list_by_provider(self, provider_id: str) -> List[ServiceOffering]:
        pass

    @abstractmethod
    def save(self, service: ServiceOffering) -> ServiceOffering:
        pass

    @abstractmethod
    def update_fields(self, service_id: str, fields: Dict[str, Any]) -> bool:
        """Returns False when no service matched."""
        pass

    @abstractmethod
    def delete(self, service_id: str) -> bool:
        """Returns False when no service matched."""
        pass
