from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from services.provider_service.application.domain.job import Job, JobStatus
from services.provider_service.application.ports.output.job_repository import (
    JobRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_support import (
    from_document,
    provider_filter,
    store_errors,
    sum_from_pipeline_result,
)


class MongoJobRepository(JobRepository):
    def __init__(self, db: Database):
        self.collection = db["jobs"]

    def get_by_id(self, job_id: str) -> Optional[Job]:
        with store_errors("loading job"):
            document = self.collection.find_one({"_id": ObjectId(job_id)})
        if not document:
            return None
        return Job.model_validate(from_document(document))

    def list_by_provider(
        self, provider_id: str, status: Optional[JobStatus] = None
    ) -> List[Job]:
        query: Dict[str, Any] = provider_filter(provider_id)
        if status:
            query["status"] = status.value
        with store_errors("listing jobs"):
            documents = list(self.collection.find(query).sort("date", DESCENDING))
        return [Job.model_validate(from_document(doc)) for doc in documents]

    def list_recent(self, provider_id: str, limit: int) -> List[Job]:
        with store_errors("listing recent jobs"):
            documents = list(
                self.collection.find(provider_filter(provider_id))
                .sort("date", DESCENDING)
                .limit(limit)
            )
        return [Job.model_validate(from_document(doc)) for doc in documents]

    def count_in_date_range(
        self, provider_id: str, start: datetime, end: datetime
    ) -> int:
        query = provider_filter(provider_id)
        query["date"] = {"$gte": start, "$lt": end}
        with store_errors("counting jobs"):
            return self.collection.count_documents(query)

    def sum_amount_by_status(self, provider_id: str, status: JobStatus) -> float:
        match = provider_filter(provider_id)
        match["status"] = status.value
        pipeline = [
            {"$match": match},
            {"$group": {"_id": None, "total": {"$sum": "$amount"}}},
        ]
        with store_errors("summing job amounts"):
            return sum_from_pipeline_result(self.collection.aggregate(pipeline))

    def count_by_status(self, provider_id: str) -> Dict[JobStatus, int]:
        pipeline = [
            {"$match": provider_filter(provider_id)},
            {"$group": {"_id": "$status", "count": {"$sum": 1}}},
        ]
        with store_errors("counting jobs by status"):
            rows = list(self.collection.aggregate(pipeline))

        known = {status.value for status in JobStatus}
        return {
            JobStatus(row["_id"]): row["count"] for row in rows if row["_id"] in known
        }
