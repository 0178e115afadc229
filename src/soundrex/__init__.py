"""Soundrex - Audio stream resolution for external video identifiers."""

from soundrex.client import SoundrexClient, resolve_audio
from soundrex.core.exceptions import (
    AggregateResolutionError,
    EmptyResultError,
    ProviderError,
    TransportError,
    UnsupportedDataTypeError,
)
from soundrex.core.models import AudioFormat
from soundrex.core.types import DataType, ProviderName, ResolutionStatus
from soundrex.resolution.orchestrator import AudioResolver, ResolutionOutcome

__version__ = "0.1.0"
__all__ = [
    # Client
    "SoundrexClient",
    "resolve_audio",
    "AudioResolver",
    # Types
    "DataType",
    "ProviderName",
    "ResolutionStatus",
    # Models
    "AudioFormat",
    "ResolutionOutcome",
    # Errors
    "AggregateResolutionError",
    "EmptyResultError",
    "ProviderError",
    "TransportError",
    "UnsupportedDataTypeError",
    # Version
    "__version__",
]
