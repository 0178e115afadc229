"""The fixed provider priority list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from soundrex.resolution.base import AbstractProvider, ProviderConfig
from soundrex.resolution.providers import FederatedProvider, LibraryProvider, PublicApiProvider

if TYPE_CHECKING:
    from soundrex.config import SoundrexSettings

# Highest priority first. Not configurable.
PROVIDER_CHAIN: tuple[type[AbstractProvider], ...] = (
    LibraryProvider,
    PublicApiProvider,
    FederatedProvider,
)


def create_providers(settings: "SoundrexSettings | None" = None) -> list[AbstractProvider]:
    """
    Instantiate the provider chain in priority order.

    Only per-call timeouts come from settings; order and endpoints are fixed.
    """
    if settings is None:
        return [provider_cls() for provider_cls in PROVIDER_CHAIN]

    timeouts = {
        LibraryProvider: settings.library_timeout,
        PublicApiProvider: settings.public_api_timeout,
        FederatedProvider: settings.mirror_timeout,
    }
    return [
        provider_cls(ProviderConfig(timeout=timeouts.get(provider_cls)))
        for provider_cls in PROVIDER_CHAIN
    ]
