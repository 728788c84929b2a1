"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from terminal_ai.configs.base import BaseSettings
from terminal_ai.configs.github import GitHubSettings
from terminal_ai.configs.notifications import NotificationSettings
from terminal_ai.configs.providers import HyperbolicSettings, OpenRouterSettings
from terminal_ai.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    openrouter: OpenRouterSettings = Field(default_factory=OpenRouterSettings)
    hyperbolic: HyperbolicSettings = Field(default_factory=HyperbolicSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from terminal_ai.configs import get_settings
        settings = get_settings()
    """
    return Settings()
