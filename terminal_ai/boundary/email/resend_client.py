"""
Resend e-mail client.

Sends operator notifications through the Resend REST API.

Dependencies: httpx, terminal_ai.configs, terminal_ai.core.exceptions
System role: Outbound e-mail adapter
"""

import logging

import httpx

from terminal_ai.configs.notifications import NotificationSettings
from terminal_ai.core.exceptions import NotificationError

logger = logging.getLogger(__name__)


class ResendEmailClient:
    """Resend client bound to the configured sender and recipient."""

    def __init__(
        self,
        config: NotificationSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.http = http_client or httpx.AsyncClient(timeout=10.0)

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    async def send(self, subject: str, html: str) -> None:
        """
        Send one e-mail to the operator.

        Args:
            subject: Subject line
            html: HTML body

        Raises:
            NotificationError: Missing configuration or delivery failure
        """
        if not self.enabled:
            raise NotificationError(
                "Resend variables not set",
                {
                    "resend_api_key_set": bool(self.config.resend_api_key),
                    "notification_email_to_set": bool(self.config.notification_email_to),
                },
            )

        body = {
            "from": self.config.notification_email_from,
            "to": [self.config.notification_email_to],
            "subject": subject,
            "html": html,
        }
        try:
            response = await self.http.post(
                f"{self.config.resend_base_url.rstrip('/')}/emails",
                headers={"Authorization": f"Bearer {self.config.resend_api_key}"},
                json=body,
            )
        except httpx.HTTPError as e:
            raise NotificationError(f"Resend request failed: {e}") from e

        if response.is_error:
            raise NotificationError(
                f"Resend rejected e-mail: {response.status_code}",
                {"status_code": response.status_code},
            )
        logger.info("Notification e-mail sent", extra={"to": self.config.notification_email_to})

    async def aclose(self) -> None:
        await self.http.aclose()
