"""
Chat completion provider settings.

One settings class per upstream provider. OpenRouter backs the
memory-enabled completion endpoint; Hyperbolic backs the low-latency
edge endpoint.

Dependencies: pydantic, pydantic_settings
System role: Upstream model provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenRouterSettings(BaseSettings):
    """OpenRouter configuration for the memory-enabled completion endpoint."""

    model_config = SettingsConfigDict(
        env_prefix="OPENROUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="OpenRouter API key")
    base_url: str = Field(default="https://openrouter.ai/api", description="OpenRouter API base URL")

    chat_model: str = Field(default="openrouter/polaris-alpha", description="Model used in chat mode")
    command_model: str = Field(
        default="openrouter/polaris-alpha",
        description="Model used in command mode",
    )
    chat_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    command_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    top_p: float = Field(default=0.9, ge=0.0, le=1.0)
    max_tokens: int | None = Field(default=None, description="Optional completion token cap")

    timeout_seconds: float = Field(default=55.0, description="Upstream call deadline", gt=0)
    referer: str = Field(
        default="https://terminal-ai-api.vercel.app",
        description="HTTP-Referer header sent for OpenRouter attribution",
    )
    title: str = Field(default="Terminal AI Assistant", description="X-Title header value")


class HyperbolicSettings(BaseSettings):
    """Hyperbolic configuration for the edge completion endpoint."""

    model_config = SettingsConfigDict(
        env_prefix="HYPERBOLIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Hyperbolic API key")
    base_url: str = Field(default="https://api.hyperbolic.xyz", description="Hyperbolic API base URL")
    model: str = Field(default="deepseek-ai/DeepSeek-V3")
    max_tokens: int = Field(default=256, ge=1)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    top_p: float = Field(default=0.9, ge=0.0, le=1.0)
    timeout_seconds: float = Field(default=25.0, gt=0)
