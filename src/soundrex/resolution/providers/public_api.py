"""Public streaming-metadata API provider."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from soundrex.core.exceptions import EmptyResultError
from soundrex.core.models import AudioFormat
from soundrex.core.normalization import descriptors_from_list
from soundrex.core.types import ProviderName
from soundrex.resolution.base import AbstractProvider


class PublicApiProvider(AbstractProvider):
    """
    Piped-style public API resolver (no API key required).

    ``GET /streams/{id}`` returns an ``audioStreams`` list that only holds
    audio entries, so no audio re-filtering is applied here.
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.PUBLIC_API
    BASE_URL: ClassVar[str] = "https://pipedapi.kavin.rocks"
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0

    async def fetch_audio(self, video_id: str) -> AudioFormat:
        data = await self._get_json(f"/streams/{video_id}")

        if not isinstance(data, Mapping) or "audioStreams" not in data:
            raise EmptyResultError(
                "Response has no audioStreams field",
                source=self.provider_name.value,
            )

        streams = [d for d in descriptors_from_list(data.get("audioStreams")) if d.url]
        if not streams:
            raise EmptyResultError(
                "No audio streams available",
                source=self.provider_name.value,
            )

        # sorted() is stable, so equal bitrates keep upstream order
        best = sorted(streams, key=lambda d: d.bitrate, reverse=True)[0]
        return AudioFormat.from_descriptor(best)
