from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.database import Database

from services.provider_service.application.domain.earnings import MonthlyEarnings
from services.provider_service.application.domain.transaction import Transaction
from services.provider_service.application.ports.output.transaction_repository import (
    TransactionRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_support import (
    from_document,
    provider_filter,
    store_errors,
    sum_from_pipeline_result,
)


class MongoTransactionRepository(TransactionRepository):
    def __init__(self, db: Database):
        self.collection = db["transactions"]

    def list_by_provider(
        self, provider_id: str, since: Optional[datetime] = None
    ) -> List[Transaction]:
        with store_errors("listing transactions"):
            documents = list(
                self.collection.find(self._match(provider_id, since)).sort(
                    "date", DESCENDING
                )
            )
        return [Transaction.model_validate(from_document(doc)) for doc in documents]

    def list_recent(self, provider_id: str, limit: int) -> List[Transaction]:
        with store_errors("listing recent transactions"):
            documents = list(
                self.collection.find(provider_filter(provider_id))
                .sort("date", DESCENDING)
                .limit(limit)
            )
        return [Transaction.model_validate(from_document(doc)) for doc in documents]

    def sum_amount(self, provider_id: str, since: Optional[datetime] = None) -> float:
        pipeline = [
            {"$match": self._match(provider_id, since)},
            {"$group": {"_id": None, "total": {"$sum": "$amount"}}},
        ]
        with store_errors("summing transactions"):
            return sum_from_pipeline_result(self.collection.aggregate(pipeline))

    def monthly_totals(self, provider_id: str, since: datetime) -> List[MonthlyEarnings]:
        pipeline = [
            {"$match": self._match(provider_id, since)},
            {
                "$group": {
                    "_id": {"year": {"$year": "$date"}, "month": {"$month": "$date"}},
                    "total": {"$sum": "$amount"},
                }
            },
            {"$sort": {"_id.year": 1, "_id.month": 1}},
        ]
        with store_errors("aggregating monthly earnings"):
            rows = list(self.collection.aggregate(pipeline))
        return [
            MonthlyEarnings(
                year=row["_id"]["year"], month=row["_id"]["month"], total=row["total"]
            )
            for row in rows
        ]

    def _match(self, provider_id: str, since: Optional[datetime]) -> Dict[str, Any]:
        query = provider_filter(provider_id)
        if since is not None:
            query["date"] = {"$gte": since}
        return query
