"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

from soundrex.resolution.base import ProviderConfig

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Provider Configuration Fixtures
# ============================================================================


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Create a provider config for testing."""
    return ProviderConfig(timeout=1.0)

