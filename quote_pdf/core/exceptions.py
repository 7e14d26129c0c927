"""
Exception hierarchy for the quote PDF service.

Provides the typed failure taxonomy of the rendering pipeline. Every
exception carries a stable `kind` string that is surfaced to callers
and a details dict for observability.

Dependencies: None (pure domain layer)
System role: Centralized error taxonomy across the pipeline
"""

from typing import Any


class QuotePdfError(Exception):
    """Base exception for all quote PDF pipeline errors."""

    kind = "InternalError"
    transient = False

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(QuotePdfError):
    """Raised when the request or the record content is missing or malformed."""

    kind = "ValidationError"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class RecordNotFound(QuotePdfError):
    """Raised when the primary quote record does not exist."""

    kind = "RecordNotFound"

    def __init__(self, quote_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["quote_id"] = quote_id
        super().__init__(f"Quote not found: {quote_id}", details)


class DataSourceError(QuotePdfError):
    """Raised when a fatal-tier lookup fails on the store side."""

    kind = "DataSourceError"

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if resource:
            details["resource"] = resource
        super().__init__(message, details)


class EngineUnavailable(QuotePdfError):
    """Raised when the render engine fails to start or dies mid-render."""

    kind = "EngineUnavailable"
    transient = True


class PhaseTimeout(QuotePdfError):
    """Raised when a single pipeline phase overruns its deadline."""

    kind = "PhaseTimeout"
    transient = True

    def __init__(
        self,
        phase: str,
        timeout: float,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize phase timeout.

        Args:
            phase: Name of the phase that expired (fetch, settle, paginate, upload)
            timeout: Deadline that was exceeded, in seconds
            details: Additional context
        """
        self.phase = phase
        self.timeout = timeout
        details = details or {}
        details.update({"phase": phase, "timeout_s": timeout})
        super().__init__(f"Phase '{phase}' exceeded its {timeout:g}s deadline", details)


class RequestTimeout(QuotePdfError):
    """Raised when the whole-request deadline fires before any phase deadline."""

    kind = "RequestTimeout"

    def __init__(self, timeout: float, details: dict[str, Any] | None = None) -> None:
        self.timeout = timeout
        details = details or {}
        details["timeout_s"] = timeout
        super().__init__(f"Request exceeded its {timeout:g}s deadline", details)


class EmptyArtifact(QuotePdfError):
    """Raised when rendering produced a zero-length document."""

    kind = "EmptyArtifact"


class UploadFailed(QuotePdfError):
    """Raised when the object store rejects or fails the artifact upload."""

    kind = "UploadFailed"

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


TRANSIENT_ERRORS: tuple[type[QuotePdfError], ...] = (EngineUnavailable, PhaseTimeout)
