"""
HTTP surface configuration.

Bearer tokens accepted by the default verifier and the CORS origins
allowed to call the service.

Dependencies: pydantic_settings
System role: API configuration
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Settings for the FastAPI surface."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    tokens: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Accepted bearer tokens (comma separated in the environment)",
    )
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Allowed CORS origins (comma separated in the environment)",
    )

    @field_validator("tokens", "cors_origins", mode="before")
    @classmethod
    def split_csv(cls, value):
        """Accept comma separated strings as well as lists."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value
