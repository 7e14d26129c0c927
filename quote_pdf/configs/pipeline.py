"""
Pipeline configuration.

Per-phase deadlines, retry policy and image optimisation parameters for
the quote rendering pipeline. Passed explicitly to the orchestrator.

Dependencies: pydantic_settings, quote_pdf.configs.render
System role: Rendering pipeline configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from quote_pdf.configs.render import RenderSettings


class PipelineSettings(BaseSettings):
    """Settings for the quote PDF pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Phase deadlines (seconds)
    fetch_timeout: float = Field(default=10.0, description="Data fetch phase deadline")
    settle_timeout: float = Field(default=20.0, description="Content settle phase deadline")
    paginate_timeout: float = Field(default=30.0, description="Pagination phase deadline")
    upload_timeout: float = Field(default=30.0, description="Upload phase deadline")
    request_slack: float = Field(
        default=5.0,
        description="Slack added on top of the phase deadlines for the request deadline",
    )

    # Retry policy
    max_retries: int = Field(
        default=1,
        ge=0,
        le=5,
        description="Whole-pipeline retries for transient infrastructure failures",
    )
    retry_wait: float = Field(default=0.5, ge=0, description="Wait between attempts in seconds")

    # Image optimisation
    image_max_width: int = Field(default=1600, description="Width requested for optimised images")
    image_quality: int = Field(default=75, description="Quality requested for optimised images")

    diagnostics_dir: str | None = Field(
        default=None,
        description="Directory where rendered PDFs are also written for diagnostics",
    )

    render: RenderSettings = Field(default_factory=RenderSettings)
