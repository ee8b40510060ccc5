"""
Main FastAPI application for the Webdesk file server.
"""

from collections.abc import Mapping
from contextlib import asynccontextmanager
from types import MappingProxyType

from fastapi import FastAPI
from loguru import logger

from . import __version__
from .config import Settings, get_settings
from .models.tables import MimeEntry
from .services.file_service import FileService
from .tools.files import router as files_router
from .utils.exceptions import setup_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting Webdesk file server", root=app.state.file_service.root)

    yield

    logger.info("Shutting down Webdesk file server")


def create_app(
    mime_table: Mapping[str, MimeEntry],
    config: Mapping[str, int | str] | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        mime_table: Loaded MIME table
        config: Loaded Config.txt values
        settings: Process settings, read from the environment when omitted

    Returns:
        The application with the tables attached read-only to its state.
    """
    settings = settings or get_settings()

    # Every GET path belongs to the file router, so the API docs stay off.
    app = FastAPI(
        title="Webdesk",
        description="Local development file server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.config = MappingProxyType(dict(config or {}))
    app.state.home_document = settings.home_document
    app.state.file_service = FileService(settings.root_dir, mime_table)

    # Exception handlers
    setup_exception_handlers(app)

    app.include_router(files_router, tags=["files"])

    return app
