"""
Inbound request models for the rendering pipeline.

RenderOptions is the caller's option bag; unknown keys are ignored and
missing keys fall back to record-level or hard-coded defaults.

Dependencies: pydantic
System role: Immutable request contract for DocumentPipeline.generate()
"""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Per-request rendering options."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    page_size: Literal["A4", "Letter"] | None = Field(
        default=None,
        description="Paper size (falls back to the configured default)",
    )
    include_title_page: bool = Field(default=True, description="Render the title page")
    include_sections: bool = Field(default=True, description="Render grouped sections")
    include_metrics: bool = Field(default=True, description="Render per-section metrics")
    include_terms: bool = Field(default=True, description="Render terms and conditions")
    accent_color: str | None = Field(default=None, description="Accent colour override (#RRGGBB)")
    title_heading: str | None = Field(default=None, description="Title page heading override")
    title_subheading: str | None = Field(default=None, description="Title page subheading override")
    title_background_url: str | None = Field(
        default=None,
        description="Title page background image override",
    )
    optimize_images: bool = Field(
        default=False,
        description="Request resized image variants from the image host",
    )


class DocumentRequest(BaseModel):
    """A request to render one quote."""

    model_config = ConfigDict(frozen=True)

    quote_id: UUID = Field(description="Identifier of the source quote")
    options: RenderOptions = Field(default_factory=RenderOptions)
