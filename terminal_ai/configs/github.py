"""
GitHub OAuth device-flow settings.

Dependencies: pydantic_settings
System role: CLI login configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub OAuth application credentials."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str | None = Field(default=None, description="OAuth app client id")
    client_secret: str | None = Field(default=None, description="OAuth app client secret")
    scope: str = Field(default="repo read:user")
    device_code_url: str = Field(default="https://github.com/login/device/code")
    access_token_url: str = Field(default="https://github.com/login/oauth/access_token")
    timeout_seconds: float = Field(default=10.0, gt=0)
