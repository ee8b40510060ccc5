"""
Exception handling utilities.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


class WebdeskException(Exception):
    """Base exception for Webdesk operations."""

    def __init__(self, message: str, details: dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationException(WebdeskException):
    """Exception for configuration-related issues."""

    pass


class UnknownFileTypeException(WebdeskException):
    """Raised when an extension has no MIME table entry."""

    def __init__(self, extension: str):
        super().__init__(f"File type {extension} is not defined.", {"extension": extension})
        self.extension = extension


class EmptyPayloadException(WebdeskException):
    """Raised when a write carries an empty data parameter."""

    def __init__(self, file: str):
        super().__init__(f"Cannot create empty file {file}.", {"file": file})
        self.file = file


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Setup last-resort exception handlers for the FastAPI application.

    File handlers convert their own failures into responses; these only
    keep the listener answering when something slips through.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(WebdeskException)
    async def webdesk_exception_handler(request: Request, exc: WebdeskException) -> PlainTextResponse:
        """Handle custom Webdesk exceptions."""
        logger.error("Webdesk error", error=exc.message, details=exc.details, path=request.url.path)

        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        """Handle HTTP exceptions."""
        logger.warning("HTTP error", status_code=exc.status_code, detail=exc.detail)

        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Handle general exceptions."""
        logger.opt(exception=exc).error("Unhandled exception", path=request.url.path)

        return PlainTextResponse("Internal Server Error", status_code=500)
