"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from quote_pdf.configs.api import ApiSettings
from quote_pdf.configs.database import DatabaseSettings
from quote_pdf.configs.pipeline import PipelineSettings
from quote_pdf.configs.render import RenderSettings
from quote_pdf.configs.settings import Settings, get_settings
from quote_pdf.configs.storage import StorageSettings

__all__ = [
    "ApiSettings",
    "DatabaseSettings",
    "PipelineSettings",
    "RenderSettings",
    "Settings",
    "StorageSettings",
    "get_settings",
]
