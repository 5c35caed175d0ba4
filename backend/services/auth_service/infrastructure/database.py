from pymongo.database import Database

from services.auth_service.infrastructure.config import settings
from shared.persistence.mongo import ensure_indexes, get_database


def get_db() -> Database:
    """FastAPI dependency returning the users database."""
    return get_database(settings.MONGODB_URI, settings.MONGODB_DB)


def init_db() -> None:
    ensure_indexes(get_db(), ["users"])
