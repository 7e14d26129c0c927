"""
Render engine configuration.

Named process-level deadlines and page defaults for the headless
Chromium engine.

Dependencies: pydantic_settings
System role: Render engine lifecycle configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseSettings):
    """Settings for the headless render engine."""

    model_config = SettingsConfigDict(
        env_prefix="RENDER_",
        case_sensitive=False,
        extra="ignore",
    )

    executable_path: str | None = Field(
        default=None,
        description="Chromium/Chrome binary (None uses the Playwright-managed build)",
    )
    engine_startup_timeout: float = Field(
        default=15.0,
        description="Deadline for launching the engine process, in seconds",
    )
    engine_shutdown_timeout: float = Field(
        default=5.0,
        description="Deadline for closing the engine process, in seconds",
    )
    context_timeout: float = Field(
        default=5.0,
        description="Deadline for opening a browser context and page, in seconds",
    )
    asset_timeout: float = Field(
        default=5.0,
        description="Per-image wait ceiling while settling content, in seconds",
    )
    page_margin: str = Field(default="12mm", description="Uniform page margin")
    default_page_size: Literal["A4", "Letter"] = Field(
        default="A4",
        description="Page size used when the request does not specify one",
    )
