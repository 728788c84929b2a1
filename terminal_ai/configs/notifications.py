"""
Operator notification settings.

Resend credentials and addresses for upstream failure e-mails.
Variables are read without a prefix (RESEND_API_KEY, NOTIFICATION_EMAIL_TO, ...).

Dependencies: pydantic_settings
System role: Failure notification configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationSettings(BaseSettings):
    """Resend e-mail configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    resend_api_key: str = Field(default="", description="Resend API key")
    resend_base_url: str = Field(default="https://api.resend.com")
    notification_email_to: str = Field(default="", description="Operator address")
    notification_email_from: str = Field(default="onboarding@resend.dev")

    @property
    def enabled(self) -> bool:
        """True when both the API key and the recipient are configured."""
        return bool(self.resend_api_key and self.notification_email_to)
