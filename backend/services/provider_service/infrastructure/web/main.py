from fastapi import FastAPI

from services.provider_service.infrastructure.config import settings
from services.provider_service.infrastructure.database import init_db
from services.provider_service.infrastructure.web.api import router as provider_router
from services.provider_service.infrastructure.web.earnings_api import (
    router as earnings_router,
)
from shared.web.app_factory import create_service_app


def create_app() -> FastAPI:
    return create_service_app(
        title="Provider Portal",
        service_name="provider_service",
        routers=[provider_router, earnings_router],
        cors_origins=settings.CORS_ORIGINS,
        log_level=settings.LOG_LEVEL,
        on_startup=init_db,
    )


app = create_app()
