"""
Quote rendering pipeline.

Exports: DocumentPipeline, RenderSession, ArtifactSink, PhaseTimeoutController,
normalize_quote, render_quote_markup
"""

from .artifact_sink import ArtifactSink, StoredArtifact, build_filename
from .markup import render_quote_markup
from .normalizer import NormalizationResult, NormalizerDefaults, normalize_quote
from .orchestrator import DocumentPipeline, QuoteSource
from .phase_timeout import Phase, PhaseTimeoutController
from .render_session import EngineFactory, EnginePage, RenderEngine, RenderSession

__all__ = [
    "ArtifactSink",
    "DocumentPipeline",
    "EngineFactory",
    "EnginePage",
    "NormalizationResult",
    "NormalizerDefaults",
    "Phase",
    "PhaseTimeoutController",
    "QuoteSource",
    "RenderEngine",
    "RenderSession",
    "StoredArtifact",
    "build_filename",
    "normalize_quote",
    "render_quote_markup",
]
