"""
GitHub device-flow service.

Validates configuration and interprets GitHub's device-flow responses for
the CLI login endpoints.

Dependencies: terminal_ai.boundary.github
System role: CLI login orchestration
"""

import logging
from dataclasses import dataclass

from terminal_ai.boundary.github.device_flow_client import GitHubDeviceFlowClient
from terminal_ai.core.exceptions import ConfigurationError, GitHubAuthError, ValidationError
from terminal_ai.models.github import DeviceCodeResponse

logger = logging.getLogger(__name__)

AUTHORIZATION_PENDING = "authorization_pending"


@dataclass
class TokenPollResult:
    """Outcome of one token poll: either pending or a token."""

    pending: bool
    token: str | None = None


class GitHubAuthService:
    """Device-flow login for the terminal client."""

    def __init__(self, client: GitHubDeviceFlowClient) -> None:
        self.client = client
        self.config = client.config

    async def start(self) -> DeviceCodeResponse:
        """
        Issue a device/user code pair.

        Raises:
            ConfigurationError: GITHUB_CLIENT_ID unset
            GitHubAuthError: GitHub rejected the request
        """
        if not self.config.client_id:
            raise ConfigurationError(
                "Server misconfigured: GITHUB_CLIENT_ID is not set.",
                setting="GITHUB_CLIENT_ID",
            )
        data = await self.client.request_device_code()
        return DeviceCodeResponse.model_validate(data)

    async def check(self, device_code: str | None) -> TokenPollResult:
        """
        Poll GitHub for the token of a device authorization.

        Raises:
            ValidationError: Missing device code
            ConfigurationError: Client id or secret unset
            GitHubAuthError: GitHub returned an error other than pending
        """
        if not device_code:
            raise ValidationError("Missing 'code' parameter", field="code")
        if not self.config.client_id or not self.config.client_secret:
            raise ConfigurationError("Server misconfigured: GitHub secrets not set.")

        data = await self.client.poll_access_token(device_code)

        error = data.get("error")
        if error == AUTHORIZATION_PENDING:
            return TokenPollResult(pending=True)
        if error:
            logger.warning("GitHub device flow error", extra={"github_error": error})
            raise GitHubAuthError(data.get("error_description") or error)

        token = data.get("access_token")
        if token:
            return TokenPollResult(pending=False, token=token)
        raise GitHubAuthError("Unknown GitHub response")
