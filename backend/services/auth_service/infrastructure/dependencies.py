from fastapi import Depends
from pymongo.database import Database

from services.auth_service.application.ports.input.admin_service import AdminService
from services.auth_service.application.ports.input.customer_service import (
    CustomerService,
)
from services.auth_service.application.services.admin_service_impl import (
    AdminServiceImpl,
)
from services.auth_service.application.services.customer_service_impl import (
    CustomerServiceImpl,
)
from services.auth_service.infrastructure.adapters.persistence.mongo_user_repository import (
    MongoUserRepository,
)
from services.auth_service.infrastructure.config import settings
from services.auth_service.infrastructure.database import get_db
from shared.security.password_hasher import BcryptPasswordHasher
from shared.security.token_provider import JwtTokenProvider


def get_admin_service(db: Database = Depends(get_db)) -> AdminService:
    """
    Composition Root for the AdminService.
    """
    return AdminServiceImpl(
        user_repository=MongoUserRepository(db),
        password_hasher=BcryptPasswordHasher(),
        token_provider=JwtTokenProvider(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        ),
        admin_secret=settings.ADMIN_SECRET,
    )


def get_customer_service(db: Database = Depends(get_db)) -> CustomerService:
    """
    Composition Root for the CustomerService.
    """
    return CustomerServiceImpl(
        user_repository=MongoUserRepository(db),
        password_hasher=BcryptPasswordHasher(),
        token_provider=JwtTokenProvider(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expires_minutes=settings.CUSTOMER_TOKEN_EXPIRE_MINUTES,
        ),
    )
