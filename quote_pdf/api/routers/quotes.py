"""
Quote PDF API endpoints.

Routes: POST /quotes/pdf

Dependencies: quote_pdf.application.quote_pdf_service, quote_pdf.models
System role: Quote rendering HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from quote_pdf.api.auth import require_bearer_token
from quote_pdf.api.deps import get_quote_pdf_service
from quote_pdf.application.quote_pdf_service import QuotePdfService
from quote_pdf.core.exceptions import (
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
from quote_pdf.core.rendering.models import PipelineFailure
from quote_pdf.models.common import ErrorResponse
from quote_pdf.models.quote import QuotePdfErrorResponse, QuotePdfRequest, QuotePdfResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])

STATUS_BY_ERROR_KIND: dict[str, int] = {
    ValidationError.kind: status.HTTP_400_BAD_REQUEST,
    RecordNotFound.kind: status.HTTP_404_NOT_FOUND,
    DataSourceError.kind: status.HTTP_502_BAD_GATEWAY,
    EngineUnavailable.kind: status.HTTP_503_SERVICE_UNAVAILABLE,
    PhaseTimeout.kind: status.HTTP_504_GATEWAY_TIMEOUT,
    RequestTimeout.kind: status.HTTP_504_GATEWAY_TIMEOUT,
    EmptyArtifact.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
    UploadFailed.kind: status.HTTP_502_BAD_GATEWAY,
    QuotePdfError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_failure(failure: PipelineFailure) -> int:
    """HTTP status for a pipeline failure kind (500 for unknown kinds)."""
    return STATUS_BY_ERROR_KIND.get(failure.error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post(
    "/pdf",
    response_model=QuotePdfResponse,
    responses={
        400: {"model": QuotePdfErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": QuotePdfErrorResponse},
        502: {"model": QuotePdfErrorResponse},
        503: {"model": QuotePdfErrorResponse},
        504: {"model": QuotePdfErrorResponse},
    },
)
async def generate_quote_pdf(
    request: QuotePdfRequest,
    _token: str = Depends(require_bearer_token),
    service: QuotePdfService = Depends(get_quote_pdf_service),
):
    """
    Render a quote to PDF, store it and return its URL.

    Args:
        request: Quote id and render options
        _token: Accepted bearer token (injected)
        service: Injected QuotePdfService

    Returns:
        QuotePdfResponse on success, QuotePdfErrorResponse with the mapped
        status code otherwise

    Example Response:
        {
            "success": true,
            "url": "https://quote-pdfs.s3.eu-west-2.amazonaws.com/quotes/quote-q-1001-<uuid>.pdf",
            "filename": "quote-q-1001-<uuid>.pdf",
            "size_bytes": 48213,
            "elapsed_ms": 2310.4,
            "attempts": 1,
            "degraded": []
        }
    """
    result = await service.render_quote(request)

    if result.success:
        return QuotePdfResponse(
            url=result.locator,
            filename=result.filename,
            size_bytes=result.size_bytes,
            elapsed_ms=result.elapsed_ms,
            attempts=result.attempts,
            degraded=result.degraded,
        )

    status_code = status_for_failure(result)
    logger.warning(
        "%s:generate_quote_pdf - %s -> %d",
        __name__,
        result.error_kind,
        status_code,
        extra={"quote_id": str(request.quote_id), "error_kind": result.error_kind},
    )
    body = QuotePdfErrorResponse(
        error_kind=result.error_kind,
        message=result.message,
        elapsed_ms=result.elapsed_ms,
        degraded=result.degraded,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
