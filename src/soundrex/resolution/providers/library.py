"""Metadata-library provider backed by the yt-dlp Python API."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, ClassVar

import yt_dlp
import yt_dlp.utils

from soundrex.core.exceptions import EmptyResultError, TransportError
from soundrex.core.models import AudioFormat, RawStreamDescriptor
from soundrex.core.normalization import coerce_bitrate, optional_str
from soundrex.core.selection import select_best_audio
from soundrex.core.types import ProviderName
from soundrex.resolution.base import BROWSER_HEADERS, AbstractProvider, ProviderConfig

logger = logging.getLogger(__name__)


class LibraryProvider(AbstractProvider):
    """
    Resolves audio through yt-dlp's extractor.

    The extraction is blocking, so it runs on a small thread pool owned by
    the provider and is bounded by ``asyncio.timeout``. A timed-out worker is
    abandoned, not killed: it keeps its thread until yt-dlp returns. Once
    ``MAX_WORKERS`` extractions hang, later attempts queue behind them and
    time out without running. The shared default executor is never used.
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.LIBRARY
    BASE_URL: ClassVar[str] = "https://www.youtube.com"
    DEFAULT_TIMEOUT: ClassVar[float] = 20.0
    MAX_WORKERS: ClassVar[int] = 4

    def __init__(self, config: ProviderConfig | None = None) -> None:
        super().__init__(config)
        self._executor: ThreadPoolExecutor | None = None

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.MAX_WORKERS,
                thread_name_prefix="soundrex-ytdlp",
            )
        return self._executor

    def watch_url(self, video_id: str) -> str:
        base_url = self.config.base_url or self.BASE_URL
        return f"{base_url}/watch?v={video_id}"

    def _build_opts(self) -> dict[str, Any]:
        """Return yt-dlp options suitable for metadata-only extraction."""
        return {
            "quiet": True,
            "no_warnings": True,
            "no_color": True,
            "skip_download": True,
            "noplaylist": True,
            "http_headers": {**BROWSER_HEADERS, **self.config.headers},
        }

    def _extract_info(self, url: str) -> dict[str, Any]:
        """Run the blocking extraction and shape-check the result."""
        try:
            with yt_dlp.YoutubeDL(self._build_opts()) as ydl:
                info: Any = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as e:
            raise TransportError(
                f"Extraction failed: {e}",
                source=self.provider_name.value,
            ) from e
        except Exception as e:
            raise TransportError(
                f"Unexpected yt-dlp error: {e}",
                source=self.provider_name.value,
            ) from e

        if not isinstance(info, dict):
            raise TransportError(
                "yt-dlp returned no metadata",
                source=self.provider_name.value,
            )
        return info

    async def fetch_audio(self, video_id: str) -> AudioFormat:
        url = self.watch_url(video_id)

        try:
            async with asyncio.timeout(self.timeout):
                loop = asyncio.get_running_loop()
                info = await loop.run_in_executor(self._get_executor(), self._extract_info, url)
        except TimeoutError as e:
            raise TransportError(
                f"Extraction timed out after {self.timeout}s",
                source=self.provider_name.value,
                timed_out=True,
            ) from e

        descriptors = audio_only_descriptors(info.get("formats"))
        if not descriptors:
            raise EmptyResultError(
                "No audio-only formats found",
                source=self.provider_name.value,
            )

        audio_format = select_best_audio(descriptors)
        if audio_format is None:
            raise EmptyResultError(
                "No playable audio-only formats found",
                source=self.provider_name.value,
            )
        return audio_format

    async def close(self) -> None:
        """Release the extraction pool without waiting for hung workers."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
        await super().close()


def is_audio_only(fmt: dict[str, Any]) -> bool:
    """yt-dlp marks absent tracks with the codec string 'none'."""
    acodec = fmt.get("acodec")
    return fmt.get("vcodec") == "none" and bool(acodec) and acodec != "none"


def descriptor_from_ytdlp(fmt: dict[str, Any]) -> RawStreamDescriptor:
    """Map a yt-dlp format dict onto a descriptor."""
    ext = optional_str(fmt.get("audio_ext")) or optional_str(fmt.get("ext"))
    if ext == "none":
        ext = None
    acodec = optional_str(fmt.get("acodec"))

    mime_type = f"audio/{ext or 'webm'}"
    if acodec:
        mime_type = f'{mime_type}; codecs="{acodec}"'

    # abr/tbr are reported in kbit/s
    kbps = fmt.get("abr") or fmt.get("tbr")
    bitrate = coerce_bitrate(kbps * 1000) if isinstance(kbps, (int, float)) else 0

    return RawStreamDescriptor(
        url=optional_str(fmt.get("url")),
        mime_type=mime_type,
        bitrate=bitrate,
        container=ext,
    )


def audio_only_descriptors(formats: Any) -> list[RawStreamDescriptor]:
    """Filter yt-dlp formats to audio-only entries and normalize them."""
    if not isinstance(formats, list):
        return []
    return [
        descriptor_from_ytdlp(fmt)
        for fmt in formats
        if isinstance(fmt, dict) and is_audio_only(fmt)
    ]
