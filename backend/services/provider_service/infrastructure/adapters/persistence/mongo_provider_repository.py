from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from services.provider_service.application.domain.provider import Provider
from services.provider_service.application.exceptions import (
    EmailAlreadyRegisteredError,
)
from services.provider_service.application.ports.output.provider_repository import (
    ProviderRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_support import (
    from_document,
    store_errors,
    to_document,
    to_update_fields,
)

# The collection keeps the hash under the legacy "password" key.
_TO_DOCUMENT = {"hashed_password": "password"}
_FROM_DOCUMENT = {"password": "hashed_password"}


class MongoProviderRepository(ProviderRepository):
    def __init__(self, db: Database):
        self.collection = db["providers"]

    def save(self, provider: Provider) -> Provider:
        document = to_document(provider, renames=_TO_DOCUMENT)
        with store_errors("saving provider"):
            try:
                result = self.collection.insert_one(document)
            except DuplicateKeyError as exc:
                raise EmailAlreadyRegisteredError("Email already registered") from exc
        return provider.model_copy(update={"id": str(result.inserted_id)})

    def get_by_id(self, provider_id: str) -> Optional[Provider]:
        with store_errors("loading provider"):
            document = self.collection.find_one({"_id": ObjectId(provider_id)})
        return self._to_domain(document)

    def get_by_email(self, email: str) -> Optional[Provider]:
        with store_errors("loading provider by email"):
            document = self.collection.find_one({"email": email})
        return self._to_domain(document)

    def email_in_use(
        self, email: str, exclude_provider_id: Optional[str] = None
    ) -> bool:
        query: Dict[str, Any] = {"email": email}
        if exclude_provider_id:
            query["_id"] = {"$ne": ObjectId(exclude_provider_id)}
        with store_errors("checking provider email"):
            return self.collection.count_documents(query, limit=1) > 0

    def update_fields(self, provider_id: str, fields: Dict[str, Any]) -> bool:
        with store_errors("updating provider"):
            try:
                result = self.collection.update_one(
                    {"_id": ObjectId(provider_id)},
                    {"$set": to_update_fields(fields)},
                )
            except DuplicateKeyError as exc:
                raise EmailAlreadyRegisteredError("Email already in use") from exc
        return result.matched_count > 0

    def _to_domain(self, document: Optional[Dict[str, Any]]) -> Optional[Provider]:
        if not document:
            return None
        return Provider.model_validate(from_document(document, renames=_FROM_DOCUMENT))
