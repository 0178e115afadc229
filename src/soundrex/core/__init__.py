"""Core types, models, and utilities."""

from .exceptions import (
    AggregateResolutionError,
    EmptyResultError,
    InvalidIdentifierError,
    ProviderError,
    ResolutionError,
    SoundrexError,
    SourceError,
    TransportError,
    UnsupportedDataTypeError,
    ValidationError,
)
from .models import DEFAULT_CONTAINER, DEFAULT_MIME_TYPE, AudioFormat, RawStreamDescriptor
from .normalization import (
    coerce_bitrate,
    container_from_mime,
    descriptor_from_mapping,
    descriptors_from_list,
    truncate_url,
)
from .selection import filter_audio, select_best_audio
from .types import DataType, ProviderName, ResolutionStatus

__all__ = [
    # Exceptions
    "AggregateResolutionError",
    "EmptyResultError",
    "InvalidIdentifierError",
    "ProviderError",
    "ResolutionError",
    "SoundrexError",
    "SourceError",
    "TransportError",
    "UnsupportedDataTypeError",
    "ValidationError",
    # Models
    "AudioFormat",
    "DEFAULT_CONTAINER",
    "DEFAULT_MIME_TYPE",
    "RawStreamDescriptor",
    # Normalization
    "coerce_bitrate",
    "container_from_mime",
    "descriptor_from_mapping",
    "descriptors_from_list",
    "truncate_url",
    # Selection
    "filter_audio",
    "select_best_audio",
    # Types
    "DataType",
    "ProviderName",
    "ResolutionStatus",
]
