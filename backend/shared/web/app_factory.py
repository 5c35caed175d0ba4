"""FastAPI wiring shared by the admin, provider and customer processes."""
import logging
from contextlib import asynccontextmanager
from typing import Callable, Iterable, Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.models.base_models import HealthResponse
from shared.persistence.mongo import close_clients

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid request",
            "errors": jsonable_errors(exc),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def create_service_app(
    title: str,
    service_name: str,
    routers: Iterable[APIRouter],
    cors_origins: Iterable[str] = ("*",),
    log_level: str = "INFO",
    on_startup: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """
    Builds a portal application: logging, CORS, JSON error envelopes,
    ``/health`` and the given routers. ``on_startup`` runs once before serving
    (index creation, typically).
    """
    configure_logging(log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if on_startup is not None:
            on_startup()
        logger.info("%s started", service_name)
        yield
        close_clients()

    app = FastAPI(title=title, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health():
        return HealthResponse(service=service_name)

    for router in routers:
        app.include_router(router)

    return app
