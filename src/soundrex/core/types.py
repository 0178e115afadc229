"""Core enums and type definitions."""

from enum import StrEnum


class DataType(StrEnum):
    """Kinds of stream a caller can ask for."""

    AUDIO = "audio"


class ProviderName(StrEnum):
    """Known audio stream providers."""

    LIBRARY = "library"
    PUBLIC_API = "public_api"
    FEDERATED = "federated"


class ResolutionStatus(StrEnum):
    """Status of a single provider attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"
    TIMEOUT = "timeout"
