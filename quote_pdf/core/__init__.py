"""
Core business logic module.

Contains the exception hierarchy and the quote rendering pipeline.
All business rules and domain-specific logic reside here.
"""

from quote_pdf.core.exceptions import (
    TRANSIENT_ERRORS,
    DataSourceError,
    EmptyArtifact,
    EngineUnavailable,
    PhaseTimeout,
    QuotePdfError,
    RecordNotFound,
    RequestTimeout,
    UploadFailed,
    ValidationError,
)

__all__ = [
    "DataSourceError",
    "EmptyArtifact",
    "EngineUnavailable",
    "PhaseTimeout",
    "QuotePdfError",
    "RecordNotFound",
    "RequestTimeout",
    "TRANSIENT_ERRORS",
    "UploadFailed",
    "ValidationError",
]
