"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DrawsAPIError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class UnsupportedLanguageError(DrawsAPIError):
    def __init__(self, lang: str, supported: set[str]):
        super().__init__(
            f"Unsupported language: {lang}. Supported: {sorted(supported)}",
            status_code=400,
        )


class PartitionNotFoundError(DrawsAPIError):
    """A language partition is missing from the draw store."""

    def __init__(self, lang: str, location: str):
        super().__init__(f"No draw data for '{lang}' at {location}", status_code=503)
        self.lang = lang


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(DrawsAPIError)
    async def handle_draws_error(_request: Request, exc: DrawsAPIError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
