"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error rendering, logging.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from sqlalchemy.exc import InterfaceError, OperationalError

from inventory_tracker.api.v1.router import api_router
from inventory_tracker.config import get_settings
from inventory_tracker.core.exceptions import (
    FieldError,
    InternalError,
    InventoryTrackerError,
    PayloadValidationError,
    StorageUnavailableError,
)
from inventory_tracker.db.session import engine

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("inventory_tracker")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown logging. Schema is owned by Alembic, not created here."""
    logger.info(
        "%s starting (demo account %s)",
        settings.app_name,
        "enabled" if settings.demo_account_active else "disabled",
    )
    yield
    await engine.dispose()
    logger.info("%s shutdown complete", settings.app_name)


async def inventory_error_handler(request: Request, exc: InventoryTrackerError) -> JSONResponse:
    """Render every taxonomy error as {error, code[, details]} with its status code."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures caught by FastAPI itself are reported like payload validation errors."""
    errors = [
        FieldError(
            field=".".join(str(part) for part in err["loc"] if part != "body") or "body",
            message=str(err["msg"]).removeprefix("Value error, "),
        )
        for err in exc.errors()
    ]
    return await inventory_error_handler(request, PayloadValidationError(errors))


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Backend unreachable or misconfigured. Detail goes to the log, never the client."""
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return await inventory_error_handler(request, StorageUnavailableError())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: generic 500 body, traceback logged server-side only."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return await inventory_error_handler(request, InternalError())


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant inventory tracker: per-user items, admin-wide visibility and statistics.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InventoryTrackerError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(OperationalError, storage_error_handler)
    app.add_exception_handler(InterfaceError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Prometheus metrics at /metrics (monitoring & observability)
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
