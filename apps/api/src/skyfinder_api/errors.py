"""Error kinds surfaced to API consumers as ``{"error": message}`` bodies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


class SkyfinderError(Exception):
    """Base class; ``message`` is safe to show to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialsError(SkyfinderError):
    """The Amadeus client cannot be constructed without an API key/secret."""

    default_message = "Missing AMADEUS_API_KEY or AMADEUS_API_SECRET env variables"


class InvalidRequestError(SkyfinderError):
    """Search parameters are missing or malformed; the user can fix them."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UpstreamError(SkyfinderError):
    """The provider rejected the call or could not be reached."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream provider request failed"


async def _handle_skyfinder_error(request: Request, exc: SkyfinderError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("[%s] %s: %s", request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        field = str(errors[0].get("loc", ("",))[-1])
        message = f"{field}: {errors[0].get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Render handled failures and query validation errors as ``{"error": ...}``."""
    app.add_exception_handler(SkyfinderError, _handle_skyfinder_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_validation_error)  # type: ignore[arg-type]
