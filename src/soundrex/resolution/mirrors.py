"""Sequential fallback across equivalent mirror instances."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from soundrex.core.exceptions import EmptyResultError, SourceError, TransportError
from soundrex.core.models import AudioFormat
from soundrex.core.selection import select_best_audio

logger = logging.getLogger(__name__)

DEFAULT_MIRROR_TIMEOUT = 5.0

MirrorFetch = Callable[[str], Awaitable[Any]]
Selector = Callable[[Any], AudioFormat | None]


@dataclass(frozen=True)
class MirrorAttempt:
    """Result of trying a single mirror."""

    mirror: str
    audio_format: AudioFormat | None = None
    error: SourceError | None = None

    @property
    def success(self) -> bool:
        return self.audio_format is not None


async def attempt_mirror(
    mirror: str,
    fetch: MirrorFetch,
    *,
    timeout: float = DEFAULT_MIRROR_TIMEOUT,
    select: Selector = select_best_audio,
) -> MirrorAttempt:
    """Fetch descriptors from one mirror under its own timeout and select from them."""
    try:
        async with asyncio.timeout(timeout):
            descriptors = await fetch(mirror)
    except TimeoutError:
        return MirrorAttempt(
            mirror,
            error=TransportError(
                f"Mirror {mirror} timed out after {timeout}s",
                source=mirror,
                timed_out=True,
            ),
        )
    except SourceError as e:
        return MirrorAttempt(mirror, error=e)

    audio_format = select(descriptors)
    if audio_format is None:
        return MirrorAttempt(
            mirror,
            error=EmptyResultError(f"Mirror {mirror} returned no audio formats", source=mirror),
        )
    return MirrorAttempt(mirror, audio_format=audio_format)


async def try_mirrors(
    mirrors: Sequence[str],
    fetch: MirrorFetch,
    *,
    timeout: float = DEFAULT_MIRROR_TIMEOUT,
    select: Selector = select_best_audio,
) -> AudioFormat:
    """
    Try mirrors strictly in order until one yields an audio format.

    Mirrors are never contacted concurrently. A timeout, transport error or
    empty selection on one mirror moves on to the next.

    Raises:
        SourceError: The last mirror error, or a TransportError when no
            mirror was tried at all
    """
    last_error: SourceError | None = None

    for mirror in mirrors:
        attempt = await attempt_mirror(mirror, fetch, timeout=timeout, select=select)
        if attempt.success:
            logger.debug(f"Mirror {mirror} succeeded")
            return attempt.audio_format

        last_error = attempt.error
        logger.warning(f"Mirror {mirror} failed: {attempt.error}")

    raise last_error or TransportError("All mirrors failed")
