"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from soundrex.resolution.orchestrator import AudioResolver


async def get_audio_resolver(request: Request) -> AudioResolver:
    """Get the audio resolver from app state."""
    return request.app.state.audio_resolver


# Type aliases for cleaner dependency injection
Resolver = Annotated[AudioResolver, Depends(get_audio_resolver)]
