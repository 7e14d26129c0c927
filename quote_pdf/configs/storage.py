"""
Artifact storage configuration.

Settings for the S3 bucket that receives rendered quote PDFs and for the
locator returned to callers.

Dependencies: pydantic_settings
System role: Object store configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for the quote PDF artifact bucket."""

    model_config = SettingsConfigDict(
        env_prefix="S3_ARTIFACTS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="quote-pdfs",
        description="S3 bucket for rendered quote PDFs",
    )
    region: str = Field(default="eu-west-2", description="AWS region for the bucket")
    key_prefix: str = Field(
        default="quotes",
        description="Key prefix under which artifacts are written",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Public base URL for artifacts (defaults to the bucket's virtual-hosted URL)",
    )
    locator_mode: Literal["public", "presigned"] = Field(
        default="public",
        description="Return a public URL or a presigned GET URL",
    )
    presigned_url_expiry: int = Field(
        default=3600,
        description="Presigned URL expiry in seconds (default 1 hour)",
    )
    connect_timeout: float = Field(default=5.0, description="S3 connect timeout in seconds")
    read_timeout: float = Field(default=20.0, description="S3 read timeout in seconds")
