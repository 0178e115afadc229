"""Resolution layer for finding audio streams across providers."""

from soundrex.resolution.base import (
    BROWSER_HEADERS,
    AbstractProvider,
    ProviderConfig,
    ProviderResult,
)
from soundrex.resolution.mirrors import MirrorAttempt, attempt_mirror, try_mirrors
from soundrex.resolution.orchestrator import AudioResolver, ResolutionOutcome
from soundrex.resolution.providers import FederatedProvider, LibraryProvider, PublicApiProvider
from soundrex.resolution.registry import PROVIDER_CHAIN, create_providers

__all__ = [
    # Base
    "AbstractProvider",
    "BROWSER_HEADERS",
    "ProviderConfig",
    "ProviderResult",
    # Mirrors
    "MirrorAttempt",
    "attempt_mirror",
    "try_mirrors",
    # Providers
    "FederatedProvider",
    "LibraryProvider",
    "PublicApiProvider",
    "PROVIDER_CHAIN",
    "create_providers",
    # Orchestrator
    "AudioResolver",
    "ResolutionOutcome",
]
