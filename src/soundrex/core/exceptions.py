"""Custom exception hierarchy for soundrex."""

from __future__ import annotations

from typing import Any

from .types import ProviderName


class SoundrexError(Exception):
    """Base exception for all soundrex errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SoundrexError):
    """Input validation failed."""

    pass


class InvalidIdentifierError(ValidationError):
    """Video identifier is empty or blank."""

    pass


class UnsupportedDataTypeError(ValidationError):
    """Requested stream kind is not handled."""

    def __init__(
        self,
        message: str,
        data_type: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.data_type = data_type


class SourceError(SoundrexError):
    """A third-party source could not produce an audio stream."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class TransportError(SourceError):
    """Network, timeout or parse failure while reaching a source."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        status_code: int | None = None,
        timed_out: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, source, details)
        self.status_code = status_code
        self.timed_out = timed_out


class EmptyResultError(SourceError):
    """Source was reached but returned no usable audio entries."""

    pass


class ResolutionError(SoundrexError):
    """Failed to resolve an audio stream."""

    pass


class ProviderError(ResolutionError):
    """A single provider failed; fatal only to that provider's attempt."""

    def __init__(
        self,
        provider: ProviderName,
        cause: BaseException,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{provider.value}: {cause}", details)
        self.provider = provider
        self.cause = cause

    @property
    def is_empty_result(self) -> bool:
        """Whether the provider was reachable but found nothing."""
        return isinstance(self.cause, EmptyResultError)


class AggregateResolutionError(ResolutionError):
    """Every provider failed; wraps the last provider error."""

    def __init__(
        self,
        last_error: ProviderError | None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if last_error is None:
            message = "No providers available"
        else:
            message = f"Could not retrieve audio (last error from {last_error})"
        super().__init__(message, details)
        self.last_error = last_error

    @property
    def provider(self) -> ProviderName | None:
        """Provider that failed last, if any was tried."""
        return self.last_error.provider if self.last_error else None
