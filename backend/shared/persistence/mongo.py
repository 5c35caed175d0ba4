"""MongoDB client plumbing shared by every portal process."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

# collection -> [(keys, unique)]
INDEXES: Dict[str, List[Tuple[list, bool]]] = {
    "users": [
        ([("email", ASCENDING)], True),
        ([("role", ASCENDING)], False),
    ],
    "providers": [
        ([("email", ASCENDING)], True),
        ([("service_type", ASCENDING)], False),
    ],
    "jobs": [
        ([("provider_id", ASCENDING)], False),
        ([("status", ASCENDING)], False),
        ([("date", ASCENDING)], False),
    ],
    "services": [
        ([("provider_id", ASCENDING)], False),
        ([("availability", ASCENDING)], False),
    ],
    "transactions": [
        ([("provider_id", ASCENDING)], False),
        ([("date", DESCENDING)], False),
    ],
}

_clients: Dict[str, MongoClient] = {}


def get_mongo_client(uri: str) -> MongoClient:
    """One client per URI; pymongo pools connections internally."""
    client = _clients.get(uri)
    if client is None:
        logger.info("Opening MongoDB client")
        client = MongoClient(uri)
        _clients[uri] = client
    return client


def get_database(uri: str, name: str) -> Database:
    return get_mongo_client(uri)[name]


def ensure_indexes(db: Database, collections: Iterable[str]) -> None:
    for collection in collections:
        for keys, unique in INDEXES.get(collection, []):
            db[collection].create_index(keys, unique=unique)
        logger.info("Indexes ensured for collection %s", collection)


def close_clients() -> None:
    while _clients:
        _, client = _clients.popitem()
        client.close()
