"""
Quote PDF API schemas.

Request body and response shapes of POST /quotes/pdf.

Dependencies: pydantic, quote_pdf.core.rendering.models
System role: HTTP contract of the quote PDF endpoint
"""

from uuid import UUID

from pydantic import BaseModel, Field

from quote_pdf.core.rendering.models import DegradedInput, RenderOptions


class QuotePdfRequest(BaseModel):
    """Request body for rendering one quote."""

    quote_id: UUID = Field(description="Quote to render")
    options: RenderOptions = Field(
        default_factory=RenderOptions,
        description="Rendering options (unknown keys are ignored)",
    )


class QuotePdfResponse(BaseModel):
    """Successful render."""

    success: bool = True
    url: str = Field(description="Locator of the stored PDF")
    filename: str
    size_bytes: int
    elapsed_ms: float
    attempts: int = 1
    degraded: list[DegradedInput] = Field(default_factory=list)


class QuotePdfErrorResponse(BaseModel):
    """Failed render."""

    success: bool = False
    error_kind: str = Field(description="Error taxonomy kind")
    message: str
    elapsed_ms: float | None = None
    degraded: list[DegradedInput] = Field(default_factory=list)
