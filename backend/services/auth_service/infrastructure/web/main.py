"""
Application factories for the two processes backed by the ``users`` collection.

    uvicorn services.auth_service.infrastructure.web.main:admin_app
    uvicorn services.auth_service.infrastructure.web.main:customer_app
"""
from fastapi import FastAPI

from services.auth_service.infrastructure.config import settings
from services.auth_service.infrastructure.database import init_db
from services.auth_service.infrastructure.web.admin_api import router as admin_router
from services.auth_service.infrastructure.web.customer_api import (
    router as customer_router,
)
from shared.web.app_factory import create_service_app


def create_admin_app() -> FastAPI:
    return create_service_app(
        title="Admin Portal",
        service_name="admin_service",
        routers=[admin_router],
        cors_origins=settings.CORS_ORIGINS,
        log_level=settings.LOG_LEVEL,
        on_startup=init_db,
    )


def create_customer_app() -> FastAPI:
    return create_service_app(
        title="Customer Portal",
        service_name="customer_service",
        routers=[customer_router],
        cors_origins=settings.CORS_ORIGINS,
        log_level=settings.LOG_LEVEL,
        on_startup=init_db,
    )


admin_app = create_admin_app()
customer_app = create_customer_app()
