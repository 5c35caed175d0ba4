import logging
from typing import List, Optional

from services.provider_service.application.domain.service_offering import (
    Availability,
    ServiceOffering,
)
from services.provider_service.application.dto.service_catalog import (
    ServiceUpdateRequest,
)
from services.provider_service.application.exceptions import (
    InvalidArgumentError,
    ServiceNotFoundError,
)
from services.provider_service.application.ports.input.service_catalog_service import (
    ServiceCatalogService,
)
from services.provider_service.application.ports.output.service_repository import (
    ServiceRepository,
)
from shared.models.base_models import is_valid_object_id, utcnow

logger = logging.getLogger(__name__)


class ServiceCatalogServiceImpl(ServiceCatalogService):
    def __init__(self, service_repository: ServiceRepository):
        self.service_repository = service_repository

    def list_services(self, provider_id: Optional[str]) -> List[ServiceOffering]:
        if not provider_id:
            raise InvalidArgumentError("provider_id is required")
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")
        return self.service_repository.list_by_provider(provider_id)

    def add_service(
        self,
        provider_id: Optional[str],
        name: Optional[str],
        price: Optional[float],
        description: Optional[str] = None,
        availability: Optional[Availability] = None,
    ) -> ServiceOffering:
        if not provider_id or not name or price is None:
            raise InvalidArgumentError("provider_id, name, and price are required")
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")

        service = ServiceOffering(
            provider_id=provider_id,
            name=name,
            description=description,
            price=price,
            availability=availability or Availability.AVAILABLE,
        )
        saved = self.service_repository.save(service)
        logger.info("Service %s added for provider %s", saved.id, provider_id)
        return saved

    def update_service(self, service_id: str, update: ServiceUpdateRequest) -> None:
        if not is_valid_object_id(service_id):
            raise InvalidArgumentError("Invalid service ID")

        fields = update.model_dump(exclude_none=True, mode="json")
        fields["updated_at"] = utcnow()
        if not self.service_repository.update_fields(service_id, fields):
            raise ServiceNotFoundError("Service not found")

    def delete_service(self, service_id: str) -> None:
        if not is_valid_object_id(service_id):
            raise InvalidArgumentError("Invalid service ID")
        if not self.service_repository.delete(service_id):
            raise ServiceNotFoundError("Service not found")
        logger.info("Service %s deleted", service_id)
