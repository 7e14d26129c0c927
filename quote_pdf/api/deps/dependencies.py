"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(settings, DB session factory, S3 client, token verifier) are built once
and cached; the pipeline itself is cheap and built per request.

Dependencies: quote_pdf.configs, quote_pdf.application, quote_pdf.boundary
System role: DI container for service injection
"""

from fastapi import Depends

from quote_pdf.api.auth import BearerTokenVerifier, StaticTokenVerifier
from quote_pdf.application.quote_pdf_service import QuotePdfService
from quote_pdf.boundary.aws import S3ArtifactClient
from quote_pdf.boundary.db import QuoteDataSource, get_async_engine, get_async_session_factory
from quote_pdf.boundary.render import playwright_engine_factory
from quote_pdf.configs import Settings, get_settings
from quote_pdf.core.rendering import ArtifactSink, DocumentPipeline


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._settings = None
        self._db_engine = None
        self._session_factory = None
        self._s3_client = None
        self._token_verifier = None

    def configure(self, settings: Settings) -> None:
        """
        Use explicit settings for every collaborator built from now on.

        Args:
            settings: Application settings handed to create_app
        """
        self.clear()
        self._settings = settings

    @property
    def settings(self) -> Settings:
        """Get cached settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_factory(self):
        """Get cached async session factory."""
        if self._session_factory is None:
            self._db_engine = get_async_engine(self.settings.database)
            self._session_factory = get_async_session_factory(self._db_engine)
        return self._session_factory

    @property
    def s3_client(self) -> S3ArtifactClient:
        """Get cached S3 artifact client."""
        if self._s3_client is None:
            self._s3_client = S3ArtifactClient(self.settings.storage)
        return self._s3_client

    @property
    def token_verifier(self) -> BearerTokenVerifier:
        """Get cached bearer token verifier."""
        if self._token_verifier is None:
            self._token_verifier = StaticTokenVerifier(self.settings.api.tokens)
        return self._token_verifier

    async def aclose(self) -> None:
        """Dispose the DB engine and clear all cached instances."""
        if self._db_engine is not None:
            await self._db_engine.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._settings = None
        self._db_engine = None
        self._session_factory = None
        self._s3_client = None
        self._token_verifier = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_document_pipeline() -> DocumentPipeline:
    """
    Build the document pipeline from cached collaborators.

    Returns:
        DocumentPipeline: Pipeline with Postgres source, Playwright engine and S3 sink
    """
    cache = get_service_cache()
    settings = cache.settings
    return DocumentPipeline(
        settings=settings.pipeline,
        data_source=QuoteDataSource(cache.session_factory),
        engine_factory=playwright_engine_factory(settings.pipeline.render),
        sink=ArtifactSink(cache.s3_client, key_prefix=settings.storage.key_prefix),
    )


def get_quote_pdf_service(
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> QuotePdfService:
    """
    Get quote PDF service instance.

    Args:
        pipeline: Document pipeline (injected via Depends)

    Returns:
        QuotePdfService: Quote PDF service instance
    """
    return QuotePdfService(pipeline=pipeline)
