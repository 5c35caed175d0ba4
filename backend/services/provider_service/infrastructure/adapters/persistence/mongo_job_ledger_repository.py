import logging
from typing import Optional

from bson import ObjectId
from pymongo.client_session import ClientSession
from pymongo.database import Database

from services.provider_service.application.domain.job_transition import JobTransition
from services.provider_service.application.ports.output.job_ledger_repository import (
    JobLedgerRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_support import (
    store_errors,
    to_document,
    to_update_fields,
)

logger = logging.getLogger(__name__)


class MongoJobLedgerRepository(JobLedgerRepository):
    """
    Writes a job transition across the jobs, providers and transactions
    collections. With ``use_transactions`` the three writes share one
    multi-document transaction; otherwise they are applied one after another
    and a failure leaves the earlier writes in place.
    """

    def __init__(self, db: Database, use_transactions: bool = False):
        self.db = db
        self.use_transactions = use_transactions

    def apply_transition(self, transition: JobTransition) -> None:
        with store_errors(f"applying transition for job {transition.job_id}"):
            if not self.use_transactions:
                self._write(transition)
                return

            with self.db.client.start_session() as session:
                session.with_transaction(
                    lambda s: self._write(transition, session=s)
                )

    def _write(
        self, transition: JobTransition, session: Optional[ClientSession] = None
    ) -> None:
        self.db["jobs"].update_one(
            {"_id": ObjectId(transition.job_id)},
            {"$set": to_update_fields(transition.job_fields)},
            session=session,
        )

        if transition.counter_deltas:
            self.db["providers"].update_one(
                {"_id": ObjectId(transition.provider_id)},
                {"$inc": transition.counter_deltas},
                session=session,
            )

        if transition.transaction is not None:
            result = self.db["transactions"].insert_one(
                to_document(transition.transaction), session=session
            )
            logger.info(
                "Transaction %s recorded for provider %s",
                result.inserted_id,
                transition.provider_id,
            )
