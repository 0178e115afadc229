"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from soundrex.config import SoundrexSettings
from soundrex.core.models import AudioFormat
from soundrex.core.types import DataType
from soundrex.resolution.orchestrator import AudioResolver, ResolutionOutcome

logger = logging.getLogger(__name__)


class SoundrexClient:
    """
    Main client for the soundrex library.

    Usage:
        async with SoundrexClient() as client:
            audio = await client.resolve_audio("dQw4w9WgXcQ")
            print(audio.url, audio.mime_type)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: SoundrexSettings | None = None) -> None:
        self._settings = settings or SoundrexSettings()
        self._resolver: AudioResolver | None = None

    async def __aenter__(self) -> SoundrexClient:
        """Initialize resources on context entry."""
        self._resolver = AudioResolver.from_settings(self._settings)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def close(self) -> None:
        """Close all resources."""
        if self._resolver:
            await self._resolver.close()
            self._resolver = None

    def _ensure_initialized(self) -> AudioResolver:
        if self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with SoundrexClient() as client:'"
            )
        return self._resolver

    async def resolve_audio(
        self,
        video_id: str,
        data_type: str = DataType.AUDIO,
    ) -> AudioFormat:
        """
        Resolve the best audio stream for a video.

        Args:
            video_id: External video identifier
            data_type: Stream kind; only "audio" is supported

        Returns:
            Normalized audio format
        """
        return await self._ensure_initialized().resolve(video_id, data_type)

    async def resolve_audio_detailed(
        self,
        video_id: str,
        data_type: str = DataType.AUDIO,
    ) -> ResolutionOutcome:
        """Resolve and report each provider attempt instead of raising."""
        return await self._ensure_initialized().resolve_detailed(video_id, data_type)


async def resolve_audio(
    video_id: str,
    data_type: str = DataType.AUDIO,
    *,
    settings: SoundrexSettings | None = None,
) -> AudioFormat:
    """
    Resolve an audio stream (convenience function).

    For multiple resolutions, use SoundrexClient to reuse HTTP connections.
    """
    async with SoundrexClient(settings) as client:
        return await client.resolve_audio(video_id, data_type)
