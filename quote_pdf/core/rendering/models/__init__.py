"""
Models for the quote rendering pipeline.

Exports: RenderOptions, DocumentRequest, Lookup, LookupStatus, QuoteBundle,
DocumentModel and its parts, Artifact, PipelineResult variants
"""

from .artifact import Artifact
from .bundle import Lookup, LookupStatus, QuoteBundle
from .document import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_SECONDARY_COLOR,
    BrandingProfile,
    DocumentModel,
    LineEntry,
    Metric,
    PageOptions,
    QuoteHeader,
    Section,
    TitlePage,
    Totals,
)
from .options import DocumentRequest, RenderOptions
from .pipeline_result import DegradedInput, PipelineFailure, PipelineResult, PipelineSuccess

__all__ = [
    "Artifact",
    "BrandingProfile",
    "DEFAULT_ACCENT_COLOR",
    "DEFAULT_SECONDARY_COLOR",
    "DegradedInput",
    "DocumentModel",
    "DocumentRequest",
    "LineEntry",
    "Lookup",
    "LookupStatus",
    "Metric",
    "PageOptions",
    "PipelineFailure",
    "PipelineResult",
    "PipelineSuccess",
    "QuoteBundle",
    "QuoteHeader",
    "RenderOptions",
    "Section",
    "TitlePage",
    "Totals",
]
