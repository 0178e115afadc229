"""Audio resolution endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Query

from soundrex.api.dependencies import Resolver
from soundrex.api.schemas import (
    APIError,
    AudioFormatResponse,
    ProviderAttemptResponse,
    ResolveAudioResponse,
)
from soundrex.core.models import AudioFormat
from soundrex.core.types import DataType, ResolutionStatus

router = APIRouter(prefix="/audio", tags=["audio"])

_ERROR_RESPONSES = {
    400: {"model": APIError, "description": "Unsupported data type"},
    422: {"model": APIError, "description": "Blank video identifier"},
    502: {"model": APIError, "description": "Every provider failed"},
}


def _to_response(audio_format: AudioFormat) -> AudioFormatResponse:
    return AudioFormatResponse.model_validate(audio_format)


@router.get(
    "/{video_id}",
    response_model=AudioFormatResponse,
    responses=_ERROR_RESPONSES,
    operation_id="resolveAudio",
    summary="Resolve audio stream",
    description="Resolve the highest-bitrate audio stream for a video identifier.",
)
async def resolve_audio(
    video_id: str,
    resolver: Resolver,
    data_type: str = Query(default=DataType.AUDIO.value, alias="dataType"),
) -> AudioFormatResponse:
    """Resolve an audio stream, trying each provider in priority order."""
    audio_format = await resolver.resolve(video_id, data_type)
    return _to_response(audio_format)


@router.get(
    "/{video_id}/report",
    response_model=ResolveAudioResponse,
    responses={400: _ERROR_RESPONSES[400], 422: _ERROR_RESPONSES[422]},
    operation_id="resolveAudioReport",
    summary="Resolve audio stream with provider report",
    description="Resolve an audio stream and report every provider attempt.",
)
async def resolve_audio_report(
    video_id: str,
    resolver: Resolver,
    data_type: str = Query(default=DataType.AUDIO.value, alias="dataType"),
) -> ResolveAudioResponse:
    """Resolve an audio stream without failing on provider exhaustion."""
    start_time = time.monotonic()
    outcome = await resolver.resolve_detailed(video_id, data_type)
    total_duration = (time.monotonic() - start_time) * 1000

    return ResolveAudioResponse(
        video_id=video_id,
        status=ResolutionStatus.SUCCESS if outcome.success else ResolutionStatus.NOT_FOUND,
        audio_format=_to_response(outcome.audio_format) if outcome.audio_format else None,
        sources_tried=[
            ProviderAttemptResponse(
                source=attempt.source,
                status=attempt.status,
                duration_ms=attempt.duration_ms,
                error_message=str(attempt.error.cause) if attempt.error else None,
            )
            for attempt in outcome.attempts
        ],
        total_duration_ms=total_duration,
    )
