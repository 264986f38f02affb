"""FastAPI server for the in-memory testbed API."""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from testbed.api import probe_router, router as api_router
from testbed.errors import ServiceError
from testbed.logging_config import setup_logging
from testbed.models.dto import ErrorResponse
from testbed.repositories.product_repository import ProductRepository
from testbed.repositories.user_repository import UserRepository
from testbed.seed import seed_products, seed_users
from testbed.services.config_service import Settings, get_settings
from testbed.services.diagnostics_service import DiagnosticsService
from testbed.services.product_service import ProductService
from testbed.services.user_service import UserService

logger = logging.getLogger(__name__)


def error_response(code: int, message: str) -> JSONResponse:
    """Build the standard {error, code, message} body."""
    try:
        reason = HTTPStatus(code).phrase
    except ValueError:
        reason = "Unknown Status"
    body = ErrorResponse(error=reason, code=code, message=message)
    return JSONResponse(status_code=code, content=body.model_dump())


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.debug("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "Invalid request body")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    settings = app.state.settings
    logger.info(
        "Testbed API %s ready (%d users, %d products seeded)",
        settings.version,
        len(app.state.user_repo),
        len(app.state.product_repo),
    )
    yield
    logger.info("Testbed API shutting down")


def create_app(settings: Optional[Settings] = None, seed: bool = True) -> FastAPI:
    """
    Build an application with its own, freshly seeded stores.

    Every call returns an independent instance, so tests can run against
    separate state without resetting globals.

    Args:
        settings: Settings to use. Defaults to the environment-derived ones.
        seed: Load the fixed seed users and products.
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Testbed API",
        description="In-memory users and products API with health checks and fault injection",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    user_repo = UserRepository()
    product_repo = ProductRepository()
    if seed:
        seed_users(user_repo)
        seed_products(product_repo)

    app.state.settings = settings
    app.state.user_repo = user_repo
    app.state.product_repo = product_repo
    app.state.user_service = UserService(user_repo)
    app.state.product_service = ProductService(product_repo)
    app.state.diagnostics_service = DiagnosticsService(settings)

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(probe_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
