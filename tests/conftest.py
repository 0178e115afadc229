"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any, ClassVar

import pytest

from soundrex.config import SoundrexSettings
from soundrex.core.exceptions import SourceError, TransportError
from soundrex.core.models import AudioFormat, RawStreamDescriptor
from soundrex.core.types import ProviderName
from soundrex.resolution.base import AbstractProvider

# ============================================================================
# Stub Provider for Orchestration Tests
# ============================================================================


class StubProvider(AbstractProvider):
    """Provider that returns a canned format or raises a canned error."""

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.LIBRARY

    def __init__(
        self,
        name: ProviderName,
        audio_format: AudioFormat | None = None,
        error: Exception | None = None,
    ) -> None:
        super().__init__()
        self._name = name
        self._audio_format = audio_format
        self._error = error
        self.calls: list[str] = []
        self.closed = False

    @property
    def provider_name(self) -> ProviderName:
        return self._name

    async def fetch_audio(self, video_id: str) -> AudioFormat:
        self.calls.append(video_id)
        if self._error is not None:
            raise self._error
        assert self._audio_format is not None
        return self._audio_format

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_provider():
    """Factory fixture for stub providers."""

    def _make(
        name: ProviderName,
        audio_format: AudioFormat | None = None,
        error: Exception | None = None,
    ) -> StubProvider:
        return StubProvider(name, audio_format=audio_format, error=error)

    return _make


def stub_error(message: str = "upstream down") -> SourceError:
    """Create a generic source failure."""
    return TransportError(message, source="stub")


@pytest.fixture
def source_failure():
    """Factory for source failures used by stub providers."""
    return stub_error


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_audio_format() -> AudioFormat:
    """Create a sample audio format."""
    return AudioFormat(
        url="https://media.example.com/audio/opus-160.webm",
        mime_type='audio/webm; codecs="opus"',
        bitrate=160000,
        container="webm",
    )


@pytest.fixture
def sample_descriptors() -> list[RawStreamDescriptor]:
    """Audio descriptors with bitrates 90k, 128k and 256k, plus one video entry."""
    return [
        RawStreamDescriptor(
            url="https://media.example.com/a90", mime_type="audio/mp4", bitrate=90
        ),
        RawStreamDescriptor(
            url="https://media.example.com/v999", mime_type="video/mp4", bitrate=999
        ),
        RawStreamDescriptor(
            url="https://media.example.com/a128", mime_type="audio/webm", bitrate=128
        ),
        RawStreamDescriptor(
            url="https://media.example.com/a256", mime_type="audio/webm", bitrate=256
        ),
    ]


@pytest.fixture
def settings() -> SoundrexSettings:
    """Settings with short timeouts for tests."""
    return SoundrexSettings(
        library_timeout=2.0,
        public_api_timeout=1.0,
        mirror_timeout=0.5,
        log_level="DEBUG",
    )


# ============================================================================
# Upstream Payload Fixtures
# ============================================================================


@pytest.fixture
def public_api_response() -> dict[str, Any]:
    """Sample public streaming API response."""
    return {
        "title": "Sample Video",
        "audioStreams": [
            {
                "url": "https://pipedproxy.example.com/audio-48",
                "mimeType": "audio/mp4",
                "bitrate": 48000,
                "format": "M4A",
            },
            {
                "url": "https://pipedproxy.example.com/audio-160",
                "mimeType": "audio/webm",
                "bitrate": 160000,
                "format": "WEBMA_OPUS",
            },
            {
                "url": "https://pipedproxy.example.com/audio-128",
                "mimeType": "audio/mp4",
                "bitrate": 128000,
                "container": "m4a",
            },
        ],
        "videoStreams": [],
    }


@pytest.fixture
def federated_response() -> dict[str, Any]:
    """Sample federated mirror response with mixed audio and video formats."""
    return {
        "adaptiveFormats": [
            {
                "url": "https://mirror.example.com/videoplayback?itag=137",
                "type": 'video/mp4; codecs="avc1.640028"',
                "bitrate": "4000000",
            },
            {
                "url": "https://mirror.example.com/videoplayback?itag=140",
                "type": 'audio/mp4; codecs="mp4a.40.2"',
                "bitrate": "130000",
                "container": "m4a",
            },
            {
                "url": "https://mirror.example.com/videoplayback?itag=251",
                "type": 'audio/webm; codecs="opus"',
                "bitrate": "150000",
            },
        ]
    }


@pytest.fixture
def ytdlp_info() -> dict[str, Any]:
    """Sample yt-dlp info dict."""
    return {
        "id": "dQw4w9WgXcQ",
        "title": "Sample Video",
        "formats": [
            {
                "format_id": "140",
                "url": "https://rr1.example.com/videoplayback?itag=140",
                "ext": "m4a",
                "audio_ext": "m4a",
                "acodec": "mp4a.40.2",
                "vcodec": "none",
                "abr": 129.5,
            },
            {
                "format_id": "251",
                "url": "https://rr1.example.com/videoplayback?itag=251",
                "ext": "webm",
                "audio_ext": "webm",
                "acodec": "opus",
                "vcodec": "none",
                "abr": 141.2,
            },
            {
                "format_id": "18",
                "url": "https://rr1.example.com/videoplayback?itag=18",
                "ext": "mp4",
                "acodec": "mp4a.40.2",
                "vcodec": "avc1.42001E",
                "tbr": 600.0,
            },
            {
                "format_id": "sb0",
                "url": "https://rr1.example.com/storyboard",
                "ext": "mhtml",
                "acodec": "none",
                "vcodec": "none",
            },
        ],
    }
