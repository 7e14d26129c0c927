"""
Quote document pipeline orchestrator.

Sequences fetch -> normalize -> markup -> render -> upload for one quote,
retries whole attempts on transient infrastructure failures only, and
shapes every outcome into a PipelineResult. Domain errors never escape.

Dependencies: tenacity, quote_pdf.core.rendering
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import html
import logging
import time
from pathlib import Path
from typing import Protocol
from uuid import UUID

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from quote_pdf.configs.pipeline import PipelineSettings
from quote_pdf.core.exceptions import (
    TRANSIENT_ERRORS,
    PhaseTimeout,
    QuotePdfError,
    RequestTimeout,
    UploadFailed,
)
from quote_pdf.core.rendering.artifact_sink import ArtifactSink, StoredArtifact, build_filename
from quote_pdf.core.rendering.markup import render_quote_markup
from quote_pdf.core.rendering.models import (
    Artifact,
    DegradedInput,
    DocumentRequest,
    PipelineFailure,
    PipelineResult,
    PipelineSuccess,
    QuoteBundle,
)
from quote_pdf.core.rendering.normalizer import NormalizerDefaults, normalize_quote
from quote_pdf.core.rendering.phase_timeout import Phase, PhaseTimeoutController
from quote_pdf.core.rendering.render_session import EngineFactory, RenderSession
from quote_pdf.observability.correlation import get_correlation_id
from quote_pdf.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


class QuoteSource(Protocol):
    """Fetches every record needed to render one quote."""

    async def fetch(self, quote_id: UUID) -> QuoteBundle: ...


class DocumentPipeline:
    """Orchestrate quote rendering: fetch -> normalize -> render -> upload."""

    def __init__(
        self,
        settings: PipelineSettings,
        data_source: QuoteSource,
        engine_factory: EngineFactory,
        sink: ArtifactSink,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            settings: Deadlines, retry policy and image parameters
            data_source: Quote record source
            engine_factory: Builds a fresh render engine per attempt
            sink: Artifact upload adapter
        """
        self._settings = settings
        self._data_source = data_source
        self._engine_factory = engine_factory
        self._sink = sink
        self._timeouts = PhaseTimeoutController(settings)
        self._defaults = NormalizerDefaults(
            page_size=settings.render.default_page_size,
            page_margin=settings.render.page_margin,
            image_max_width=settings.image_max_width,
            image_quality=settings.image_quality,
        )

    @property
    def timeouts(self) -> PhaseTimeoutController:
        return self._timeouts

    async def generate(self, request: DocumentRequest) -> PipelineResult:
        """
        Render one quote to a stored PDF.

        Transient failures (engine unavailable, phase timeout) re-run the
        whole attempt with a fresh render session, up to max_retries times.

        Args:
            request: Quote identifier and render options

        Returns:
            PipelineResult: PipelineSuccess with the locator, or PipelineFailure
        """
        start_time = time.perf_counter()
        quote_id = str(request.quote_id)
        degraded: list[DegradedInput] = []
        attempts = 0

        def elapsed_ms() -> float:
            return round((time.perf_counter() - start_time) * 1000, 2)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._settings.max_retries + 1),
                wait=wait_fixed(self._settings.retry_wait),
                retry=retry_if_exception_type(TRANSIENT_ERRORS),
                reraise=True,
            ):
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    log_with_context(
                        logger,
                        logging.INFO,
                        "%s:generate - Attempt %d for quote %s",
                        __name__,
                        attempts,
                        quote_id,
                        quote_id=quote_id,
                        attempt=attempts,
                        correlation_id=get_correlation_id(),
                    )
                    degraded = []
                    stored = await self._run_attempt(request, degraded, attempts)

        except QuotePdfError as e:
            log_with_context(
                logger,
                logging.WARNING,
                "%s:generate - Quote %s failed after %d attempt(s): %s",
                __name__,
                quote_id,
                attempts,
                e.kind,
                quote_id=quote_id,
                error_kind=e.kind,
                details=e.details,
            )
            return PipelineFailure(
                error_kind=e.kind,
                message=e.message,
                elapsed_ms=elapsed_ms(),
                attempts=attempts,
                degraded=degraded,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:generate - Unexpected pipeline error",
                e,
                quote_id=quote_id,
                attempt=attempts,
            )
            return PipelineFailure(
                error_kind=QuotePdfError.kind,
                message="Unexpected error while rendering the quote",
                elapsed_ms=elapsed_ms(),
                attempts=attempts,
                degraded=degraded,
            )

        result = PipelineSuccess(
            locator=stored.locator,
            filename=stored.filename,
            size_bytes=stored.size_bytes,
            elapsed_ms=elapsed_ms(),
            attempts=attempts,
            degraded=degraded,
        )
        logger.info(
            "%s:generate - Quote %s rendered in %.0fms",
            __name__,
            quote_id,
            result.elapsed_ms,
            extra={"quote_id": quote_id, "key": stored.key, "attempts": attempts},
        )
        return result

    async def _run_attempt(
        self,
        request: DocumentRequest,
        degraded: list[DegradedInput],
        attempt: int,
    ) -> StoredArtifact:
        timeout = self._timeouts.request_deadline
        try:
            return await asyncio.wait_for(
                self._pipeline(request, degraded, attempt), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            raise RequestTimeout(timeout, details={"attempt": attempt}) from e

    async def _pipeline(
        self,
        request: DocumentRequest,
        degraded: list[DegradedInput],
        attempt: int,
    ) -> StoredArtifact:
        quote_id = str(request.quote_id)

        bundle = await self._timeouts.run(Phase.FETCH, self._data_source.fetch(request.quote_id))
        normalized = normalize_quote(bundle, request.options, quote_id, self._defaults)
        degraded.extend(normalized.degraded)
        model = normalized.model
        markup = render_quote_markup(model)

        async with RenderSession(
            self._engine_factory, self._settings.render, self._timeouts
        ) as session:
            content = await session.render(markup, model.page)

        artifact = Artifact(
            content=content,
            filename=build_filename(html.unescape(model.header.reference)),
        )
        if self._settings.diagnostics_dir:
            await self._write_diagnostics(artifact, attempt)

        try:
            return await self._timeouts.run(Phase.UPLOAD, self._sink.store(artifact))
        except PhaseTimeout as e:
            # Not retried: the worker thread may still finish the write
            raise UploadFailed(
                f"Upload did not finish within {e.timeout:g}s",
                key=self._sink.key_for(artifact.filename),
                details={"phase": e.phase},
            ) from e

    async def _write_diagnostics(self, artifact: Artifact, attempt: int) -> None:
        """Best-effort local copy of the artifact for debugging."""
        target = Path(self._settings.diagnostics_dir) / artifact.filename

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(artifact.content)

        try:
            await asyncio.to_thread(_write)
            logger.debug("%s:_write_diagnostics - Wrote %s", __name__, target)
        except OSError as e:
            logger.warning(
                "%s:_write_diagnostics - Could not write diagnostics copy: %s",
                __name__,
                e,
                extra={"attempt": attempt, "path": str(target)},
            )
