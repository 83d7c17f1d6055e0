"""
Main entrypoint for the Stable Store API.

This module assembles the FastAPI application: it sets up logging,
opens the SQLite database and applies migrations, builds one store and
service per resource kind, includes the versioned router and installs
the error handlers.  ``create_app`` does the work and is called once at
import time to provide ``app`` for ASGI servers, e.g.::

    uvicorn stable_store_api.app.main:app --reload

Tests call ``create_app`` with their own ``Settings`` to get an
isolated application backed by a temporary database.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_connection, init_db
from .core.logging_config import setup_logging
from .resources import RESOURCE_KINDS
from .services.resource_service import ResourceService
from .services.resource_store import ResourceStore

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        messages.append(f"Invalid {field}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "Invalid request"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process-wide ``settings``.

    Returns
    -------
    FastAPI
        A configured application.  Its database connection is closed
        when the application shuts down.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the steps below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    conn = get_connection(app_settings.database_url)
    version = init_db(conn)
    logger.info("Database %s ready at schema version %s", app_settings.database_url, version)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        conn.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.db = conn
    app.state.services = {
        kind.name: ResourceService(kind, ResourceStore(conn, kind.table, kind.record_model))
        for kind in RESOURCE_KINDS
    }

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _format_validation_errors(exc)},
        )

    @app.middleware("http")
    async def internal_error_middleware(request: Request, call_next):
        # Unexpected failures become a bare 500; details only go to the log.
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
