from __future__ import annotations

import logging
import time
from collections.abc import AsyncGenerator  # noqa: TC003
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from arambo.config import Settings
from arambo.config import settings as default_settings
from arambo.database import Database
from arambo.routers import auth, furniture, health, properties, trips, trucks
from arambo.schemas.common import ErrorResponse
from arambo.security import enforce_route_policy
from arambo.services.auth_service import AuthService
from arambo.utils.exceptions import AppError
from arambo.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Location prefixes pydantic adds to request validation errors
_LOCATION_PARTS = {"body", "query", "path", "header"}


def _error_body(error: str, message: str, details: list | None = None) -> dict:
    envelope = ErrorResponse(error=error, message=message, details=details or None)
    return envelope.model_dump(exclude_none=True)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.error, exc.message, exc.details),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = [str(p) for p in err["loc"] if p not in _LOCATION_PARTS]
        details.append({"field": ".".join(loc), "message": err["msg"]})
    return JSONResponse(
        status_code=400,
        content=_error_body("Validation Error", "Invalid request data", details),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        content = _error_body(
            "Not Found", f"Route {request.method} {request.url.path} not found"
        )
    else:
        content = _error_body("Error", str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal Server Error", "An unexpected error occurred"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    database: Database = app.state.database

    database.open()
    database.create_tables()

    if settings.admin_username and settings.admin_password:
        with database.session() as db:
            app.state.auth_service.ensure_admin(
                db, settings.admin_username, settings.admin_password
            )

    if settings.skip_auth:
        logger.warning("SKIP_AUTH is enabled: protected routes are open")
    if settings.jwt_secret == "change-me" and not settings.is_development:
        logger.warning("JWT_SECRET is the default value; set it for %s", settings.environment)

    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    try:
        yield
    finally:
        database.close()
        logger.info("%s stopped", settings.app_name)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        dependencies=[Depends(enforce_route_policy)],
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url, echo=settings.debug)
    app.state.auth_service = AuthService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_origin_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s - %d - %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
    app.include_router(auth.router, prefix=settings.api_prefix, tags=["auth"])
    app.include_router(properties.router, prefix=settings.api_prefix, tags=["properties"])
    app.include_router(trucks.router, prefix=settings.api_prefix, tags=["trucks"])
    app.include_router(trips.router, prefix=settings.api_prefix, tags=["trips"])
    app.include_router(furniture.router, prefix=settings.api_prefix, tags=["furniture"])

    return app


app = create_app()
