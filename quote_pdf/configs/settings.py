"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides the cached factory used by FastAPI dependency injection.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from quote_pdf.configs.api import ApiSettings
from quote_pdf.configs.base import BaseSettings
from quote_pdf.configs.database import DatabaseSettings
from quote_pdf.configs.pipeline import PipelineSettings
from quote_pdf.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    @model_validator(mode="after")
    def upload_fits_phase_deadline(self) -> "Settings":
        """S3 socket timeouts must end inside the upload phase deadline."""
        socket_budget = self.storage.connect_timeout + self.storage.read_timeout
        if socket_budget > self.pipeline.upload_timeout:
            raise ValueError(
                f"S3 connect_timeout + read_timeout ({socket_budget:g}s) exceeds "
                f"pipeline upload_timeout ({self.pipeline.upload_timeout:g}s)"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once at startup. Only the FastAPI wiring
    uses this; pipeline components receive their settings explicitly.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
