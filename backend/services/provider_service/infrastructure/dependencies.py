from fastapi import Depends
from pymongo.database import Database

from services.provider_service.application.ports.input.earnings_service import (
    EarningsService,
)
from services.provider_service.application.ports.input.job_service import JobService
from services.provider_service.application.ports.input.provider_account_service import (
    ProviderAccountService,
)
from services.provider_service.application.ports.input.service_catalog_service import (
    ServiceCatalogService,
)
from services.provider_service.application.services.earnings_service_impl import (
    EarningsServiceImpl,
)
from services.provider_service.application.services.job_service_impl import (
    JobServiceImpl,
)
from services.provider_service.application.services.provider_account_service_impl import (
    ProviderAccountServiceImpl,
)
from services.provider_service.application.services.service_catalog_service_impl import (
    ServiceCatalogServiceImpl,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_job_ledger_repository import (
    MongoJobLedgerRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_job_repository import (
    MongoJobRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_provider_repository import (
    MongoProviderRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_service_repository import (
    MongoServiceRepository,
)
from services.provider_service.infrastructure.adapters.persistence.mongo_transaction_repository import (
    MongoTransactionRepository,
)
from services.provider_service.infrastructure.config import settings
from services.provider_service.infrastructure.database import get_db
from shared.security.password_hasher import BcryptPasswordHasher
from shared.security.token_provider import JwtTokenProvider


def get_job_service(db: Database = Depends(get_db)) -> JobService:
    """
    Composition Root for the JobService.
    """
    return JobServiceImpl(
        job_repository=MongoJobRepository(db),
        ledger_repository=MongoJobLedgerRepository(
            db, use_transactions=settings.MONGO_USE_TRANSACTIONS
        ),
        transition_mode=settings.JOB_TRANSITION_MODE,
    )


def get_earnings_service(db: Database = Depends(get_db)) -> EarningsService:
    """
    Composition Root for the EarningsService.
    """
    return EarningsServiceImpl(
        provider_repository=MongoProviderRepository(db),
        job_repository=MongoJobRepository(db),
        transaction_repository=MongoTransactionRepository(db),
    )


def get_provider_account_service(
    db: Database = Depends(get_db),
) -> ProviderAccountService:
    """
    Composition Root for the ProviderAccountService.
    """
    return ProviderAccountServiceImpl(
        provider_repository=MongoProviderRepository(db),
        password_hasher=BcryptPasswordHasher(),
        token_provider=JwtTokenProvider(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        ),
    )


def get_service_catalog_service(
    db: Database = Depends(get_db),
) -> ServiceCatalogService:
    return ServiceCatalogServiceImpl(service_repository=MongoServiceRepository(db))
