"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CongressLookupError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InvalidZipError(CongressLookupError):
    def __init__(self, zipcode: str):
        super().__init__(
            f"Invalid US ZIP code: '{zipcode}'. Expected 5 digits (e.g. 90210) or ZIP+4 (e.g. 90210-1234)",
            status_code=400,
        )


class MissingAddressError(CongressLookupError):
    def __init__(self):
        super().__init__("Address is required", status_code=400)


class StateNotFoundError(CongressLookupError):
    def __init__(self, address: str):
        super().__init__(
            f"Could not determine a state from '{address}'. "
            "Please include a state abbreviation (e.g., CA, NY, TX) or a ZIP code",
            status_code=400,
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(CongressLookupError)
    async def handle_lookup_error(_request: Request, exc: CongressLookupError):
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
