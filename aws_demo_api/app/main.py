"""
Main entrypoint for the AWS Demo API.

``create_app`` assembles the FastAPI application: logging, middleware,
exception handlers and the ``/api`` router.  Its lifespan handler opens
the users store, creates the table, seeds sample data into an empty
store and closes the store again on shutdown.  The module level ``app``
can be served directly, e.g.::

    uvicorn aws_demo_api.app.main:app --port 8080
"""

import logging
import sqlite3
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import DatabaseConfigError, register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import register_middleware
from .services.data_initializer import initialize_sample_data
from .services.user_repository import UserRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    try:
        db = Database.from_settings(settings)
        db.init_db()
    except (sqlite3.Error, DatabaseConfigError) as exc:
        logger.critical("Cannot open users store %s: %s", settings.database_url, exc)
        raise

    repository = UserRepository(db)
    app.state.database = db
    app.state.user_repository = repository
    try:
        if settings.seed_sample_data:
            initialize_sample_data(repository)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
    finally:
        db.close()
        logger.info("%s stopped", settings.project_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑derived
        module level ``settings``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Module level instance for ``uvicorn aws_demo_api.app.main:app``.
app = create_app()
