"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from soundrex.api.schemas.base import APIBaseSchema
from soundrex.core.types import ProviderName, ResolutionStatus


class AudioFormatResponse(APIBaseSchema):
    """A resolved audio stream."""

    url: str
    mime_type: str
    bitrate: int
    container: str
    source: ProviderName | None = None


class ProviderAttemptResponse(APIBaseSchema):
    """Result of one provider attempt."""

    source: ProviderName
    status: ResolutionStatus
    duration_ms: float
    error_message: str | None = None


class ResolveAudioResponse(APIBaseSchema):
    """Resolution report with every provider attempt."""

    video_id: str
    status: ResolutionStatus
    audio_format: AudioFormatResponse | None = None
    sources_tried: list[ProviderAttemptResponse]
    total_duration_ms: float


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    providers: list[ProviderName]
