"""Federated (Invidious-style) mirror provider."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from soundrex.core.models import DEFAULT_CONTAINER, AudioFormat, RawStreamDescriptor
from soundrex.core.normalization import descriptor_from_mapping
from soundrex.core.types import ProviderName
from soundrex.resolution.base import AbstractProvider, ProviderConfig
from soundrex.resolution.mirrors import try_mirrors


class FederatedProvider(AbstractProvider):
    """
    Resolves audio through a fixed, ordered list of federated mirrors.

    Mirrors are tried one at a time, each under its own timeout.
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.FEDERATED
    DEFAULT_TIMEOUT: ClassVar[float] = 5.0
    MIRRORS: ClassVar[tuple[str, ...]] = (
        "https://invidious.snopyta.org",
        "https://invidious.kavin.rocks",
        "https://vid.puffyan.us",
        "https://invidious.namazso.eu",
    )

    def __init__(
        self,
        config: ProviderConfig | None = None,
        mirrors: Sequence[str] | None = None,
    ) -> None:
        super().__init__(config)
        self._mirrors = tuple(mirrors) if mirrors is not None else self.MIRRORS

    @property
    def mirrors(self) -> tuple[str, ...]:
        return self._mirrors

    async def fetch_descriptors(self, mirror: str, video_id: str) -> list[RawStreamDescriptor]:
        """Fetch a mirror's adaptive formats, keeping only audio entries."""
        data = await self._get_json(
            f"{mirror.rstrip('/')}/api/v1/videos/{video_id}",
            params={"fields": "adaptiveFormats"},
        )
        return audio_descriptors(data)

    async def fetch_audio(self, video_id: str) -> AudioFormat:
        async def fetch(mirror: str) -> list[RawStreamDescriptor]:
            return await self.fetch_descriptors(mirror, video_id)

        return await try_mirrors(self.mirrors, fetch, timeout=self.timeout)


def audio_descriptors(data: Any) -> list[RawStreamDescriptor]:
    """Extract audio entries from an ``adaptiveFormats`` payload."""
    if not isinstance(data, Mapping):
        return []
    formats = data.get("adaptiveFormats")
    if not isinstance(formats, list):
        return []

    descriptors = []
    for fmt in formats:
        descriptor = descriptor_from_mapping(fmt, mime_keys=("type",))
        if descriptor is None or not descriptor.mime_type:
            continue
        # the federated service does not report containers reliably
        if descriptor.mime_type.startswith("audio"):
            descriptors.append(descriptor.model_copy(update={"container": DEFAULT_CONTAINER}))
    return descriptors
