"""Audio format selection across heterogeneous stream descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import AudioFormat, RawStreamDescriptor
from .normalization import descriptor_from_mapping


def filter_audio(descriptors: Any) -> list[RawStreamDescriptor]:
    """
    Keep only audio entries that carry a URL.

    Mappings are normalized on the fly; anything that is not a list yields
    an empty result.
    """
    if not isinstance(descriptors, list):
        return []

    audio = []
    for item in descriptors:
        if isinstance(item, Mapping):
            item = descriptor_from_mapping(item)
        if not isinstance(item, RawStreamDescriptor):
            continue
        if item.is_audio and item.url:
            audio.append(item)
    return audio


def select_best_audio(descriptors: Any) -> AudioFormat | None:
    """
    Select the highest-bitrate audio entry.

    Ties keep the entry that appears first in the input: the current best
    is only replaced on a strictly greater bitrate.

    Returns:
        The chosen format, or None when no audio entry is present
    """
    candidates = filter_audio(descriptors)
    if not candidates:
        return None

    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.bitrate > best.bitrate:
            best = candidate

    return AudioFormat.from_descriptor(best)
