"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio_site.api.auth import router as auth_router
from studio_site.api.bookings import router as bookings_router
from studio_site.api.content import gallery_router, logos_router, packages_router
from studio_site.api.engagement import analytics_router, signups_router
from studio_site.api.portfolio import router as portfolio_router
from studio_site.api.site_settings import router as site_settings_router
from studio_site.app_logging import configure_logging
from studio_site.config import parse_cors_origins
from studio_site.containers import AppContainer
from studio_site.domain.errors import StudioError

_GENERIC_ERROR = "Internal server error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.admin_email and settings.admin_password:
            try:
                app.state.container.auth_service.seed_admin(
                    settings.admin_email, settings.admin_password
                )
            except Exception:
                logger.exception("Failed to seed admin account")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_cors_origins(settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials="*" not in origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(StudioError)
    async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "kind": exc.kind},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": _describe_validation_errors(exc.errors()),
                "kind": "validation_error",
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "kind": "http_error"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        message = _GENERIC_ERROR if settings.is_production else str(exc)
        return JSONResponse(
            status_code=500,
            content={"error": message or _GENERIC_ERROR, "kind": "internal_error"},
        )

    app.include_router(auth_router)
    app.include_router(bookings_router)
    app.include_router(portfolio_router)
    app.include_router(gallery_router)
    app.include_router(packages_router)
    app.include_router(logos_router)
    app.include_router(site_settings_router)
    app.include_router(signups_router)
    app.include_router(analytics_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _describe_validation_errors(errors: list[dict[str, object]]) -> str:
    parts: list[str] = []
    for error in errors:
        location = [
            str(item) for item in error.get("loc", ()) if item not in {"body", "query"}
        ]
        field = ".".join(location)
        message = str(error.get("msg", "Invalid value"))
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid request"
