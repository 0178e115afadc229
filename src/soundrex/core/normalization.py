"""Shape normalization for untrusted upstream stream payloads."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from .models import RawStreamDescriptor


def coerce_bitrate(value: Any) -> int:
    """
    Coerce an upstream bitrate value to a non-negative integer.

    Missing, non-numeric, non-finite and negative values all become 0.
    Numeric strings are accepted ("128000").
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            value = float(value)
        except ValueError:
            return 0
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(int(value), 0)


def optional_str(value: Any) -> str | None:
    """Return a stripped non-empty string, or None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def container_from_mime(mime_type: str | None) -> str | None:
    """
    Extract the container subtype from a MIME type.

    'audio/webm; codecs="opus"' -> 'webm'
    """
    if not mime_type or "/" not in mime_type:
        return None
    subtype = mime_type.split("/", 1)[1].split(";", 1)[0].strip().lower()
    return subtype or None


def descriptor_from_mapping(
    data: Any,
    *,
    mime_keys: tuple[str, ...] = ("mimeType", "type"),
    container_key: str = "container",
) -> RawStreamDescriptor | None:
    """
    Normalize one upstream stream entry into a descriptor.

    Args:
        data: Untyped upstream entry
        mime_keys: Keys checked in order for the type indicator
        container_key: Key holding the container hint

    Returns:
        Descriptor, or None if the entry is not a mapping
    """
    if not isinstance(data, Mapping):
        return None

    mime_type = None
    for key in mime_keys:
        if mime_type := optional_str(data.get(key)):
            break

    return RawStreamDescriptor(
        url=optional_str(data.get("url")),
        mime_type=mime_type,
        bitrate=coerce_bitrate(data.get("bitrate")),
        container=optional_str(data.get(container_key)) or container_from_mime(mime_type),
    )


def descriptors_from_list(data: Any, **kwargs: Any) -> list[RawStreamDescriptor]:
    """Normalize a list of upstream entries, skipping malformed ones."""
    if not isinstance(data, list):
        return []

    descriptors = []
    for item in data:
        if (descriptor := descriptor_from_mapping(item, **kwargs)) is not None:
            descriptors.append(descriptor)
    return descriptors


def truncate_url(url: str | None, limit: int = 100) -> str:
    """Shorten a URL for log output."""
    if not url:
        return ""
    return url if len(url) <= limit else f"{url[:limit]}..."
