from pymongo.database import Database

from services.provider_service.infrastructure.config import settings
from shared.persistence.mongo import ensure_indexes, get_database

COLLECTIONS = ("providers", "jobs", "services", "transactions")


def get_db() -> Database:
    """FastAPI dependency returning the provider portal database."""
    return get_database(settings.MONGODB_URI, settings.MONGODB_DB)


def init_db() -> None:
    ensure_indexes(get_db(), COLLECTIONS)
