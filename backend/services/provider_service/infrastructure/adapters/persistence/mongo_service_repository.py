from typing import Any, Dict, List

from bson import ObjectId
from pymongo.database import Database

from services.provider_service.application.domain.service_offering import (
    ServiceOffering,
)
from services.provider_service.application.ports.output.service_repository import (
    ServiceRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_support import (
    from_document,
    provider_filter,
    store_errors,
    to_document,
    to_update_fields,
)


class MongoServiceRepository(ServiceRepository):
    def __init__(self, db: Database):
        self.collection = db["services"]

    def list_by_provider(self, provider_id: str) -> List[ServiceOffering]:
        with store_errors("listing services"):
            documents = list(self.collection.find(provider_filter(provider_id)))
        return [ServiceOffering.model_validate(from_document(doc)) for doc in documents]

    def save(self, service: ServiceOffering) -> ServiceOffering:
        with store_errors("saving service"):
            result = self.collection.insert_one(to_document(service))
        return service.model_copy(update={"id": str(result.inserted_id)})

    def update_fields(self, service_id: str, fields: Dict[str, Any]) -> bool:
        with store_errors("updating service"):
            result = self.collection.update_one(
                {"_id": ObjectId(service_id)}, {"$set": to_update_fields(fields)}
            )
        return result.matched_count > 0

    def delete(self, service_id: str) -> bool:
        with store_errors("deleting service"):
            result = self.collection.delete_one({"_id": ObjectId(service_id)})
        return result.deleted_count > 0
