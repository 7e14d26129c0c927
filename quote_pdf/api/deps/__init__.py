"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_document_pipeline,
    get_quote_pdf_service,
    get_service_cache,
)

__all__ = [
    "get_document_pipeline",
    "get_quote_pdf_service",
    "get_service_cache",
]
