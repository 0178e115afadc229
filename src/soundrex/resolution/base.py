"""Abstract base provider with HTTP client management."""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from soundrex.core.exceptions import (
    EmptyResultError,
    ProviderError,
    SourceError,
    TransportError,
)
from soundrex.core.models import AudioFormat
from soundrex.core.normalization import truncate_url
from soundrex.core.types import ProviderName, ResolutionStatus

logger = logging.getLogger(__name__)

# Browser-like header set; several upstreams reject obvious non-browser clients.
BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
    "Origin": "https://www.youtube.com",
    "Referer": "https://www.youtube.com",
}


class ProviderConfig(BaseModel):
    """Configuration for a provider."""

    base_url: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)


class ProviderResult(BaseModel):
    """Outcome of one provider attempt: either a format or a provider error."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: ResolutionStatus
    source: ProviderName
    audio_format: AudioFormat | None = None
    error: ProviderError | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS and self.audio_format is not None


class AbstractProvider(ABC):
    """
    Abstract base class for all audio stream providers.

    Provides:
    - HTTP client management with connection pooling
    - Transport and parse error normalization
    - Conversion of source failures into tagged provider results
    """

    # Class-level configuration (to be overridden by subclasses)
    PROVIDER_NAME: ClassVar[ProviderName]
    BASE_URL: ClassVar[str | None] = None
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self.config = config or ProviderConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def provider_name(self) -> ProviderName:
        """The provider identity used to tag failures."""
        return self.PROVIDER_NAME

    @property
    def timeout(self) -> float:
        """Per-call timeout in seconds."""
        return self.config.timeout or self.DEFAULT_TIMEOUT

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url or self.BASE_URL or "",
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise TransportError(
                message=f"Request timed out: {e}",
                source=self.provider_name.value,
                timed_out=True,
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                message=f"HTTP {e.response.status_code} from upstream",
                source=self.provider_name.value,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                message=f"HTTP error: {e}",
                source=self.provider_name.value,
            ) from e
        except httpx.InvalidURL as e:
            raise TransportError(
                message=f"Invalid request URL: {e}",
                source=self.provider_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            **BROWSER_HEADERS,
            "Accept": "application/json",
            **self.config.headers,
        }

    async def _get_json(self, url: str, **kwargs: Any) -> Any:
        """
        GET a URL and return the decoded, still untyped, JSON body.

        httpx timeouts apply per connect/read/write step, so the whole
        exchange is additionally bounded by the provider timeout.
        """
        try:
            async with asyncio.timeout(self.timeout):
                async with self._get_client() as client:
                    response = await client.get(url, **kwargs)
                    response.raise_for_status()
        except TimeoutError as e:
            raise TransportError(
                message=f"Request exceeded {self.timeout}s",
                source=self.provider_name.value,
                timed_out=True,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                message=f"Invalid JSON from {truncate_url(str(response.url))}",
                source=self.provider_name.value,
                status_code=response.status_code,
            ) from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    async def fetch_audio(self, video_id: str) -> AudioFormat:
        """
        Fetch the best audio format for a video.

        Args:
            video_id: External video identifier

        Returns:
            The selected audio format

        Raises:
            TransportError: If the source could not be reached or parsed
            EmptyResultError: If the source had no usable audio entries
        """
        ...

    async def resolve(self, video_id: str) -> ProviderResult:
        """Resolve a video to an audio format, reporting failure as a result."""
        start = time.monotonic()
        logger.debug(f"Trying provider {self.provider_name} for {video_id}")

        try:
            audio_format = await self.fetch_audio(video_id)
        except SourceError as e:
            duration_ms = (time.monotonic() - start) * 1000
            logger.warning(f"Provider {self.provider_name} failed for {video_id}: {e}")
            return ProviderResult(
                status=self._status_for(e),
                source=self.provider_name,
                error=ProviderError(self.provider_name, e),
                duration_ms=duration_ms,
            )

        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(
            f"Provider {self.provider_name} found {audio_format.mime_type} "
            f"@ {audio_format.bitrate}: {truncate_url(audio_format.url)}"
        )
        return ProviderResult(
            status=ResolutionStatus.SUCCESS,
            source=self.provider_name,
            audio_format=audio_format.model_copy(update={"source": self.provider_name}),
            duration_ms=duration_ms,
        )

    @staticmethod
    def _status_for(error: SourceError) -> ResolutionStatus:
        if isinstance(error, EmptyResultError):
            return ResolutionStatus.NOT_FOUND
        if isinstance(error, TransportError) and error.timed_out:
            return ResolutionStatus.TIMEOUT
        return ResolutionStatus.ERROR

    async def __aenter__(self) -> "AbstractProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
