"""Domain models for resolved audio streams."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import ProviderName

DEFAULT_MIME_TYPE = "audio/webm"
DEFAULT_CONTAINER = "webm"


class RawStreamDescriptor(BaseModel):
    """One stream entry as reported by a source, after shape normalization."""

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(default=None, description="Direct stream URL")
    mime_type: str | None = Field(default=None, description="MIME type or type indicator")
    bitrate: int = Field(default=0, ge=0, description="Bitrate in bits per second")
    container: str | None = Field(default=None, description="Container hint")

    @property
    def is_audio(self) -> bool:
        """Whether the type indicator carries an audio signal."""
        return bool(self.mime_type) and "audio" in self.mime_type.lower()


class AudioFormat(BaseModel):
    """Provider-agnostic description of a resolved audio stream."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="Direct stream URL")
    mime_type: str = Field(default=DEFAULT_MIME_TYPE, description="Audio MIME type")
    bitrate: int = Field(default=0, ge=0, description="Bitrate in bits per second")
    container: str = Field(default=DEFAULT_CONTAINER, description="Container format")
    source: ProviderName | None = Field(
        default=None, description="Provider that produced this format"
    )

    @classmethod
    def from_descriptor(
        cls,
        descriptor: RawStreamDescriptor,
        *,
        container: str | None = None,
    ) -> AudioFormat:
        """Build a format from a descriptor, substituting defaults."""
        return cls(
            url=descriptor.url or "",
            mime_type=descriptor.mime_type or DEFAULT_MIME_TYPE,
            bitrate=descriptor.bitrate,
            container=container or descriptor.container or DEFAULT_CONTAINER,
        )
