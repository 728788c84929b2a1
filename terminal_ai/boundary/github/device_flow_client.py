"""
GitHub OAuth device-flow client.

Pass-through calls to GitHub's device authorization and token endpoints.

Dependencies: httpx, terminal_ai.configs, terminal_ai.core.exceptions
System role: CLI login adapter
"""

from typing import Any

import httpx

from terminal_ai.configs.github import GitHubSettings
from terminal_ai.core.exceptions import GitHubAuthError

DEVICE_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"


class GitHubDeviceFlowClient:
    """Client for GitHub's OAuth device flow."""

    def __init__(
        self,
        config: GitHubSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.http = http_client or httpx.AsyncClient(timeout=config.timeout_seconds)

    async def request_device_code(self) -> dict[str, Any]:
        """Start a device authorization and return GitHub's response body."""
        return await self._post(
            self.config.device_code_url,
            {"client_id": self.config.client_id, "scope": self.config.scope},
            "GitHub API error",
        )

    async def poll_access_token(self, device_code: str) -> dict[str, Any]:
        """
        Poll for the access token of a pending device authorization.

        The body may carry either `access_token` or an OAuth `error` such as
        `authorization_pending`; interpreting it is left to the caller.
        """
        return await self._post(
            self.config.access_token_url,
            {
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "device_code": device_code,
                "grant_type": DEVICE_GRANT_TYPE,
            },
            "GitHub token API error",
        )

    async def _post(self, url: str, body: dict[str, Any], label: str) -> dict[str, Any]:
        try:
            response = await self.http.post(
                url,
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                json=body,
            )
        except httpx.HTTPError as e:
            raise GitHubAuthError(f"{label}: {e}") from e
        if response.is_error:
            raise GitHubAuthError(f"{label}: {response.text}", {"status_code": response.status_code})
        return response.json()

    async def aclose(self) -> None:
        await self.http.aclose()
