"""Audio stream providers."""

from soundrex.resolution.providers.federated import FederatedProvider
from soundrex.resolution.providers.library import LibraryProvider
from soundrex.resolution.providers.public_api import PublicApiProvider

__all__ = [
    "FederatedProvider",
    "LibraryProvider",
    "PublicApiProvider",
]
