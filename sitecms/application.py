"""
Application factory.

Builds the FastAPI app around explicitly constructed collaborators: the
database handle, the upload storage backend and the email provider. Any of
them can be passed in (tests do); otherwise they are built from settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sitecms.api.endpoints import auth, health, images, jobs, notifications, pages, services, team, uploads
from sitecms.core.config import Settings, settings as default_settings
from sitecms.core.database import Database
from sitecms.core.errors import register_exception_handlers
from sitecms.core.logging_config import REQUEST_ID_HEADER, RequestLoggingMiddleware
from sitecms.core.storage import LocalStorage, StorageError, build_storage
from sitecms.services.email_service import build_email_provider

logger = logging.getLogger(__name__)

# Distinguishes "not passed" from an explicit None (= not configured)
_UNSET = object()


def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    storage=_UNSET,
    email_provider=_UNSET,
) -> FastAPI:
    app_settings = app_settings or default_settings
    database = database or Database(app_settings.SQLALCHEMY_DATABASE_URI)
    local_uploads = LocalStorage(app_settings.UPLOAD_DIR, app_settings.UPLOAD_URL_PREFIX)

    if storage is _UNSET:
        try:
            storage = build_storage(app_settings)
        except StorageError as e:
            logger.error(f"Upload storage disabled: {e}")
            storage = None

    if email_provider is _UNSET:
        email_provider = build_email_provider(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        logger.info(f"Starting up {app_settings.PROJECT_NAME}...")
        if not database.ping():
            raise RuntimeError("Database is unreachable")
        database.init_db()
        logger.info(
            f"Database initialized; storage={storage.name if storage else 'none'}, "
            f"email={email_provider.name if email_provider else 'none'}"
        )

        yield

        # Runs on SIGINT/SIGTERM via uvicorn; in-flight requests are not drained
        logger.info(f"Shutting down {app_settings.PROJECT_NAME}...")
        database.dispose()

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version="1.0.0",
        description="Content management API for the company website",
        lifespan=lifespan
    )

    app.state.settings = app_settings
    app.state.database = database
    app.state.storage = storage
    app.state.local_uploads = local_uploads
    app.state.email_provider = email_provider

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    register_exception_handlers(app)

    for module in (jobs, images, services, team, pages, auth, notifications):
        app.include_router(module.router, prefix=app_settings.API_PREFIX)
    app.include_router(uploads.router)
    app.include_router(health.router)

    # Locally stored uploads
    app.mount(local_uploads.url_prefix, StaticFiles(directory=local_uploads.base_dir), name="uploads")

    return app
