"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from soundrex.config import SoundrexSettings
from soundrex.core.types import ProviderName
from soundrex.resolution.orchestrator import AudioResolver

# ============================================================================
# Resolver Fixtures
# ============================================================================


@pytest.fixture
def working_resolver(make_provider, source_failure, sample_audio_format) -> AudioResolver:
    """Resolver whose first provider fails and second succeeds."""
    return AudioResolver(
        [
            make_provider(ProviderName.LIBRARY, error=source_failure("extraction failed")),
            make_provider(ProviderName.PUBLIC_API, audio_format=sample_audio_format),
            make_provider(ProviderName.FEDERATED, audio_format=sample_audio_format),
        ]
    )


@pytest.fixture
def failing_resolver(make_provider, source_failure) -> AudioResolver:
    """Resolver whose providers all fail."""
    return AudioResolver(
        [
            make_provider(ProviderName.LIBRARY, error=source_failure("extraction failed")),
            make_provider(ProviderName.PUBLIC_API, error=source_failure("HTTP 500")),
            make_provider(ProviderName.FEDERATED, error=source_failure("All mirrors failed")),
        ]
    )


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


def _build_app(resolver: AudioResolver):
    from soundrex.api.app import create_app
    from soundrex.api.dependencies import get_audio_resolver

    app = create_app(SoundrexSettings(_env_file=None, cors_origins=[]))

    # ASGITransport does not run the lifespan, so state is set directly
    app.state.audio_resolver = resolver

    async def override_audio_resolver():
        return resolver

    app.dependency_overrides[get_audio_resolver] = override_audio_resolver
    return app


@pytest.fixture
async def test_app(working_resolver):
    """Create test FastAPI application backed by stub providers."""
    app = _build_app(working_resolver)

    yield app

    app.dependency_overrides.clear()
    await working_resolver.close()


@pytest.fixture
async def failing_app(failing_resolver):
    """Create test FastAPI application where every provider fails."""
    app = _build_app(failing_resolver)

    yield app

    app.dependency_overrides.clear()
    await failing_resolver.close()


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def failing_client(failing_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client for the failing application."""
    transport = ASGITransport(app=failing_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
