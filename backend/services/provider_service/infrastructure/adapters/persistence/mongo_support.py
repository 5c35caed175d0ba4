"""Helpers shared by the provider portal MongoDB repositories."""
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from bson import ObjectId
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from services.provider_service.application.exceptions import StoreFailureError

logger = logging.getLogger(__name__)

# Stored documents carry camelCase timestamps (createdAt/updatedAt).
TIMESTAMP_KEYS = {"created_at": "createdAt", "updated_at": "updatedAt"}
_FROM_TIMESTAMP_KEYS = {value: key for key, value in TIMESTAMP_KEYS.items()}


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raises driver errors as StoreFailureError."""
    try:
        yield
    except PyMongoError as exc:
        logger.exception("MongoDB failure while %s", action)
        raise StoreFailureError(f"Store failure while {action}") from exc


def to_document(
    model: BaseModel, renames: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Dumps a domain model into a BSON-ready dict: ``id`` is dropped, enums become
    their values, timestamps take their stored names and ``provider_id`` is
    stored as an ObjectId.
    """
    renames = {**TIMESTAMP_KEYS, **(renames or {})}
    document: Dict[str, Any] = {}
    for key, value in model.model_dump(exclude={"id"}).items():
        if isinstance(value, Enum):
            value = value.value
        if key == "provider_id" and value is not None:
            value = ObjectId(value)
        document[renames.get(key, key)] = value
    return document


def from_document(
    document: Dict[str, Any], renames: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """Inverse of ``to_document``: ``_id`` and ObjectId references become strings."""
    renames = {**_FROM_TIMESTAMP_KEYS, **(renames or {})}
    data = {renames.get(key, key): value for key, value in document.items()}
    data["id"] = str(data.pop("_id"))
    if isinstance(data.get("provider_id"), ObjectId):
        data["provider_id"] = str(data["provider_id"])
    return data


def to_update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Renames timestamp keys of a partial update to their stored names."""
    return {TIMESTAMP_KEYS.get(key, key): value for key, value in fields.items()}


def provider_filter(provider_id: str) -> Dict[str, Any]:
    return {"provider_id": ObjectId(provider_id)}


def sum_from_pipeline_result(rows) -> float:
    """First ``total`` of a ``$group: {_id: null}`` pipeline, 0 when nothing matched."""
    for row in rows:
        return row.get("total") or 0
    return 0
