"""Tests for the mirror iterator."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from soundrex.core.exceptions import EmptyResultError, TransportError
from soundrex.resolution.mirrors import attempt_mirror, try_mirrors

AUDIO_ENTRY = {"url": "https://c.example/audio", "type": "audio/webm", "bitrate": 128000}


class ScriptedFetch:
    """Fetch callable that replays a scripted behavior per mirror."""

    def __init__(self, script: dict[str, Any]) -> None:
        self.script = script
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, mirror: str) -> Any:
        self.calls.append(mirror)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            behavior = self.script[mirror]
            if behavior == "hang":
                await asyncio.sleep(5)
            if isinstance(behavior, Exception):
                raise behavior
            await asyncio.sleep(0)
            return behavior
        finally:
            self.in_flight -= 1


# ============================================================================
# Single Attempt Tests
# ============================================================================


class TestAttemptMirror:
    """Tests for a single mirror attempt."""

    async def test_success(self):
        """A mirror with audio should produce a successful attempt."""
        fetch = ScriptedFetch({"a": [AUDIO_ENTRY]})
        attempt = await attempt_mirror("a", fetch)

        assert attempt.success is True
        assert attempt.audio_format.url == "https://c.example/audio"
        assert attempt.error is None

    async def test_timeout(self):
        """A hanging mirror should become a timed-out transport error."""
        fetch = ScriptedFetch({"a": "hang"})
        attempt = await attempt_mirror("a", fetch, timeout=0.05)

        assert attempt.success is False
        assert isinstance(attempt.error, TransportError)
        assert attempt.error.timed_out is True

    async def test_empty_selection(self):
        """A mirror without audio should become an empty-result error."""
        fetch = ScriptedFetch({"a": []})
        attempt = await attempt_mirror("a", fetch)

        assert isinstance(attempt.error, EmptyResultError)

    async def test_transport_error_captured(self):
        """Transport errors raised by fetch should be captured, not raised."""
        error = TransportError("refused")
        fetch = ScriptedFetch({"a": error})
        attempt = await attempt_mirror("a", fetch)

        assert attempt.error is error


# ============================================================================
# Iteration Tests
# ============================================================================


class TestTryMirrors:
    """Tests for sequential mirror fallback."""

    async def test_timeout_then_empty_then_success(self):
        """A times out, B is empty, C succeeds; D is never contacted."""
        fetch = ScriptedFetch(
            {
                "A": "hang",
                "B": [],
                "C": [AUDIO_ENTRY],
                "D": [{"url": "https://d.example/audio", "type": "audio/webm", "bitrate": 1}],
            }
        )

        result = await try_mirrors(["A", "B", "C", "D"], fetch, timeout=0.05)

        assert result.url == "https://c.example/audio"
        assert fetch.calls == ["A", "B", "C"]

    async def test_first_success_short_circuits(self):
        """The first usable mirror should end iteration."""
        fetch = ScriptedFetch({"A": [AUDIO_ENTRY], "B": [AUDIO_ENTRY]})

        await try_mirrors(["A", "B"], fetch)

        assert fetch.calls == ["A"]

    async def test_never_concurrent(self):
        """Mirrors must be attempted one at a time."""
        fetch = ScriptedFetch(
            {"A": TransportError("a"), "B": [], "C": TransportError("c"), "D": [AUDIO_ENTRY]}
        )

        await try_mirrors(["A", "B", "C", "D"], fetch)

        assert fetch.max_in_flight == 1
        assert fetch.calls == ["A", "B", "C", "D"]

    async def test_raises_last_error(self):
        """Exhaustion should raise the last mirror's error."""
        last = TransportError("last one")
        fetch = ScriptedFetch({"A": TransportError("first"), "B": last})

        with pytest.raises(TransportError) as exc_info:
            await try_mirrors(["A", "B"], fetch)

        assert exc_info.value is last

    async def test_last_error_may_be_empty_result(self):
        """An empty final mirror should surface as an empty-result error."""
        fetch = ScriptedFetch({"A": TransportError("first"), "B": {"adaptiveFormats": []}})

        with pytest.raises(EmptyResultError):
            await try_mirrors(["A", "B"], fetch)

    async def test_empty_mirror_list(self):
        """No mirrors should raise a generic error."""
        fetch = ScriptedFetch({})

        with pytest.raises(TransportError, match="All mirrors failed"):
            await try_mirrors([], fetch)

        assert fetch.calls == []

    async def test_custom_selector(self):
        """A custom selector should be applied to each mirror's descriptors."""
        fetch = ScriptedFetch({"A": [AUDIO_ENTRY]})

        with pytest.raises(EmptyResultError):
            await try_mirrors(["A"], fetch, select=lambda descriptors: None)
