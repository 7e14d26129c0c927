"""
Quote PDF service.

Entry point of the application layer: turns an API request into a
pipeline run and returns the pipeline's result unchanged.

Dependencies: quote_pdf.core.rendering
System role: Application service behind POST /quotes/pdf
"""

import logging

from quote_pdf.core.rendering import DocumentPipeline
from quote_pdf.core.rendering.models import DocumentRequest, PipelineResult
from quote_pdf.models.quote import QuotePdfRequest

logger = logging.getLogger(__name__)


class QuotePdfService:
    """Renders quotes to stored PDFs."""

    def __init__(self, pipeline: DocumentPipeline) -> None:
        """
        Initialize service.

        Args:
            pipeline: Configured document pipeline
        """
        self._pipeline = pipeline

    async def render_quote(self, request: QuotePdfRequest) -> PipelineResult:
        """
        Render one quote.

        Args:
            request: Validated API request

        Returns:
            PipelineResult: Success with locator or typed failure
        """
        document_request = DocumentRequest(quote_id=request.quote_id, options=request.options)
        result = await self._pipeline.generate(document_request)
        logger.info(
            "%s:render_quote - Quote %s finished",
            __name__,
            request.quote_id,
            extra={"success": result.success, "elapsed_ms": result.elapsed_ms},
        )
        return result
