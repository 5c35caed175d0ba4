from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models.base_models import utcnow


class Transaction(BaseModel):
    """Append-only earnings entry written when a paid job is completed."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    provider_id: str
    service: str
    customer_name: str
    amount: float = Field(ge=0)
    date: datetime
    created_at: datetime = Field(default_factory=utcnow)
