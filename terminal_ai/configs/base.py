"""
Root settings shared by the API process.

Only process-wide knobs live here; each external service keeps its own
prefixed settings class.

Dependencies: pydantic_settings
System role: Root of the aggregated Settings object
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-wide settings read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level applied at startup")
