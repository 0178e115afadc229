"""API schema definitions."""

from soundrex.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from soundrex.api.schemas.responses import (
    AudioFormatResponse,
    HealthResponse,
    ProviderAttemptResponse,
    ResolveAudioResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "AudioFormatResponse",
    "HealthResponse",
    "ProviderAttemptResponse",
    "ResolveAudioResponse",
]
