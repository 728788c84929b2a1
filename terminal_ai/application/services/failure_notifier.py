"""
Operator failure notifier.

E-mails the operator when an upstream failure message looks like a provider
outage or misconfiguration. Delivery is best-effort: failures are logged,
never retried and never raised.

Dependencies: terminal_ai.boundary.email
System role: Upstream failure alerting
"""

import html
import logging

from terminal_ai.boundary.email.resend_client import ResendEmailClient
from terminal_ai.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

ALERT_SUBJECT = "URGENT: Terminal AI Model Failure"

NOTIFY_MARKERS = ("api error", "model not found", "404", "500", "503", "401")


class FailureNotifier:
    """Decide on and send upstream failure e-mails."""

    def __init__(self, email_client: ResendEmailClient) -> None:
        self.email_client = email_client

    @staticmethod
    def should_notify(message: str) -> bool:
        """True when the lowercased message contains a notify marker."""
        lowered = message.lower()
        return any(marker in lowered for marker in NOTIFY_MARKERS)

    @staticmethod
    def render(message: str, details: str) -> str:
        """Render the alert body."""
        return (
            "<h1>T-AI Model Alert</h1>"
            "<p>The API encountered a critical error when trying to reach the upstream model.</p>"
            "<hr>"
            "<p><strong>Error Message:</strong></p>"
            f"<pre>{html.escape(message)}</pre>"
            "<br>"
            "<p><strong>Full Error Details:</strong></p>"
            f"<pre>{html.escape(details)}</pre>"
        )

    async def notify(self, message: str, details: str) -> bool:
        """
        Send one alert e-mail.

        Returns:
            bool: True when the e-mail was accepted
        """
        try:
            await self.email_client.send(ALERT_SUBJECT, self.render(message, details))
            return True
        except NotificationError as e:
            logger.error(
                "Failure notification not sent",
                extra={"error": str(e), **e.details},
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("Failure notification raised", extra={"error": str(e)})
        return False
