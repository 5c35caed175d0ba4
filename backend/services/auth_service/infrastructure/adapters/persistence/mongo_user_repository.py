import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from services.auth_service.application.domain.user import User
from services.auth_service.application.exceptions import (
    StoreFailureError,
    UserAlreadyExistsError,
)
from services.auth_service.application.ports.output.user_repository import (
    UserRepository,
)

logger = logging.getLogger(__name__)

_TIMESTAMP_KEYS = {"created_at": "createdAt", "updated_at": "updatedAt"}


class MongoUserRepository(UserRepository):
    def __init__(self, db: Database):
        self.collection = db["users"]

    def save(self, user: User) -> User:
        document = {
            _TIMESTAMP_KEYS.get(key, key): value
            for key, value in user.model_dump(exclude={"id", "hashed_password"}).items()
        }
        document["password"] = user.hashed_password
        document["role"] = user.role.value
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise UserAlreadyExistsError("Email already registered.") from exc
        except PyMongoError as exc:
            logger.exception("MongoDB failure while saving user")
            raise StoreFailureError("Store failure while saving user") from exc
        return user.model_copy(update={"id": str(result.inserted_id)})

    def get_by_email(self, email: str) -> Optional[User]:
        return self._find_one({"email": email})

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._find_one({"_id": ObjectId(user_id)})

    def _find_one(self, query: Dict[str, Any]) -> Optional[User]:
        try:
            document = self.collection.find_one(query)
        except PyMongoError as exc:
            logger.exception("MongoDB failure while loading user")
            raise StoreFailureError("Store failure while loading user") from exc
        if not document:
            return None

        data = dict(document)
        for field, stored in _TIMESTAMP_KEYS.items():
            if stored in data:
                data[field] = data.pop(stored)
        data["id"] = str(data.pop("_id"))
        data["hashed_password"] = data.pop("password", "")
        return User.model_validate(data)
