"""Translation of library exceptions into HTTP error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from soundrex.api.schemas import APIError
from soundrex.core.exceptions import (
    AggregateResolutionError,
    InvalidIdentifierError,
    SoundrexError,
    UnsupportedDataTypeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

AUDIO_UNAVAILABLE_MESSAGE = "Could not retrieve audio"


def error_for_exception(exc: SoundrexError) -> tuple[int, APIError]:
    """Map a library exception to a status code and error body."""
    if isinstance(exc, UnsupportedDataTypeError):
        return 400, APIError.build("unsupported_data_type", exc.message, dataType=exc.data_type)

    if isinstance(exc, InvalidIdentifierError):
        return 422, APIError.build("invalid_video_id", exc.message)

    if isinstance(exc, ValidationError):
        return 400, APIError.build("validation_error", exc.message)

    if isinstance(exc, AggregateResolutionError):
        last_error = exc.last_error
        return 502, APIError.build(
            "audio_unavailable",
            AUDIO_UNAVAILABLE_MESSAGE,
            provider=last_error.provider.value if last_error else None,
            cause=str(last_error.cause) if last_error else None,
        )

    return 500, APIError.build("internal_error", "An unexpected error occurred")


async def soundrex_exception_handler(request: Request, exc: SoundrexError) -> JSONResponse:
    """Render a SoundrexError as a JSON error envelope."""
    status_code, body = error_for_exception(exc)

    if status_code >= 500:
        logger.warning(f"{request.url.path} failed with {status_code}: {exc}")
    else:
        logger.info(f"{request.url.path} rejected with {status_code}: {exc.message}")

    return JSONResponse(status_code=status_code, content=body.to_content())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SoundrexError, soundrex_exception_handler)
