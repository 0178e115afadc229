"""Priority-ordered audio resolution across providers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from soundrex.core.exceptions import (
    AggregateResolutionError,
    InvalidIdentifierError,
    ProviderError,
    UnsupportedDataTypeError,
)
from soundrex.core.models import AudioFormat
from soundrex.core.types import DataType, ResolutionStatus
from soundrex.resolution.base import AbstractProvider, ProviderResult
from soundrex.resolution.registry import create_providers

if TYPE_CHECKING:
    from soundrex.config import SoundrexSettings

logger = logging.getLogger(__name__)


@dataclass
class ResolutionOutcome:
    """Everything that happened during one resolution."""

    audio_format: AudioFormat | None = None
    attempts: list[ProviderResult] = field(default_factory=list)
    last_error: ProviderError | None = None

    @property
    def success(self) -> bool:
        return self.audio_format is not None

    @property
    def sources_tried(self) -> list[str]:
        return [attempt.source.value for attempt in self.attempts]


class AudioResolver:
    """
    Resolves a video identifier to a single audio format.

    Providers are tried strictly in the order given, one at a time. The first
    success wins and the remaining providers are never contacted. When all
    fail, the last provider error is surfaced inside an
    AggregateResolutionError.

    Usage:
        async with AudioResolver() as resolver:
            audio = await resolver.resolve("dQw4w9WgXcQ")
    """

    def __init__(self, providers: Sequence[AbstractProvider] | None = None) -> None:
        self._providers = list(providers) if providers is not None else create_providers()

    @classmethod
    def from_settings(cls, settings: "SoundrexSettings") -> "AudioResolver":
        """Create a resolver with the fixed provider chain and configured timeouts."""
        return cls(create_providers(settings))

    @property
    def providers(self) -> list[AbstractProvider]:
        return list(self._providers)

    async def resolve(self, video_id: str, data_type: str = DataType.AUDIO) -> AudioFormat:
        """
        Resolve an audio format or raise.

        Raises:
            InvalidIdentifierError: If the identifier is blank
            UnsupportedDataTypeError: If data_type is not "audio"
            AggregateResolutionError: If every provider failed
        """
        outcome = await self.resolve_detailed(video_id, data_type)
        if outcome.audio_format is None:
            raise AggregateResolutionError(
                outcome.last_error,
                details={"video_id": video_id, "sources_tried": outcome.sources_tried},
            )
        return outcome.audio_format

    async def resolve_detailed(
        self,
        video_id: str,
        data_type: str = DataType.AUDIO,
    ) -> ResolutionOutcome:
        """Run the provider chain and report every attempt."""
        video_id = self._validate(video_id, data_type)
        outcome = ResolutionOutcome()

        if not self._providers:
            logger.warning("No providers configured")
            return outcome

        logger.debug(f"Resolving {data_type} for {video_id}")

        for provider in self._providers:
            result = await self._try_provider(provider, video_id)
            outcome.attempts.append(result)

            if result.success:
                logger.info(f"Resolved {video_id} with {result.source}")
                outcome.audio_format = result.audio_format
                return outcome

            outcome.last_error = result.error

        logger.warning(f"All providers failed for {video_id}: {outcome.last_error}")
        return outcome

    @staticmethod
    def _validate(video_id: str, data_type: str) -> str:
        if data_type != DataType.AUDIO:
            raise UnsupportedDataTypeError(
                f"Unsupported data type: {data_type!r}",
                data_type=str(data_type),
            )
        if not isinstance(video_id, str) or not video_id.strip():
            raise InvalidIdentifierError("Video identifier must be a non-empty string")
        return video_id.strip()

    async def _try_provider(
        self,
        provider: AbstractProvider,
        video_id: str,
    ) -> ProviderResult:
        """Try a single provider with error handling."""
        try:
            return await provider.resolve(video_id)
        except Exception as e:
            logger.exception(f"Provider {provider.provider_name} crashed: {e}")
            return ProviderResult(
                status=ResolutionStatus.ERROR,
                source=provider.provider_name,
                error=ProviderError(provider.provider_name, e),
            )

    async def close(self) -> None:
        """Close all providers."""
        for provider in self._providers:
            await provider.close()

    async def __aenter__(self) -> "AudioResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
