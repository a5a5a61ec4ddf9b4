"""
NorthWind Extension FastAPI Application
Main entry point: application factory, middleware, and security configuration
"""

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from functools import partial
from typing import Callable, Optional

from api.routes import northwind, catalog, health
from adapters import northwind_adapter
from domain.models import build_engine, build_session_factory, init_database
from app.config import Settings, settings

from api.middleware import (
    RequestLoggingMiddleware,
    CSRFTokenMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_exception_handler,
    general_exception_handler,
)
from api.security import make_basic_auth_dependency
from app.exceptions import AppError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("northwind.main")


def make_lifespan(
    app_settings: Settings, db_engine, init_db: Optional[Callable[[], None]] = None
):
    """
    Build the lifespan context manager for application startup and shutdown.
    Initializes the local store on db_engine with retries and binds the remote source.
    """
    init_db = init_db or partial(
        init_database, db_engine, seed=app_settings.seed_sample_data
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting {app_settings.app_name} in {app_settings.environment.value} mode")

        for attempt in range(1, app_settings.db_init_attempts + 1):
            try:
                # Run blocking init in a thread to avoid blocking the event loop
                await anyio.to_thread.run_sync(init_db)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    app_settings.db_init_attempts,
                    exc,
                )
                if attempt < app_settings.db_init_attempts:
                    await anyio.sleep(app_settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts", attempt
                    )
                    raise

        northwind_adapter.connect(app_settings.remote_destination)

        try:
            yield
        finally:
            _logger.info(f"Shutting down {app_settings.app_name}")
            northwind_adapter.close()
            db_engine.dispose()

    return lifespan


def create_app(
    app_settings: Settings = settings, init_db: Optional[Callable[[], None]] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Authentication and CSRF protection are controlled by
    ``app_settings.auth_enabled`` and ``app_settings.csrf_protection_enabled``.
    Both are off by default, which is only suitable for a demo deployment.
    """
    db_engine = build_engine(app_settings.database_url, echo=app_settings.db_echo)

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=make_lifespan(app_settings, db_engine, init_db),
        debug=app_settings.debug,
        openapi_url=(
            f"{app_settings.api_prefix}/openapi.json"
            if not app_settings.is_production()
            else None
        ),
        docs_url=f"{app_settings.api_prefix}/docs" if not app_settings.is_production() else None,
        redoc_url=None,
    )
    app.state.settings = app_settings
    app.state.engine = db_engine
    app.state.session_factory = build_session_factory(db_engine)

    for protection in app_settings.disabled_protections():
        # FIXME: enable authentication and CSRF protection before any productive use
        _logger.warning(
            "%s protection is DISABLED: non-production demo setting", protection.upper()
        )

    # CSRF check sits inside CORS so preflight responses are untouched
    if app_settings.csrf_protection_enabled:
        app.add_middleware(CSRFTokenMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
        expose_headers=["ETag", "X-CSRF-Token", "X-Request-ID"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    service_dependencies = []
    if app_settings.auth_enabled:
        service_dependencies.append(Depends(make_basic_auth_dependency(app_settings)))

    app.include_router(
        northwind.router, prefix=app_settings.api_prefix, dependencies=service_dependencies
    )
    app.include_router(
        catalog.router, prefix=app_settings.api_prefix, dependencies=service_dependencies
    )
    app.include_router(health.router, prefix=app_settings.api_prefix)

    return app


app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
