"""
Test suite for GitHubAuthService.

System role: Verification of CLI login orchestration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from terminal_ai.application.services.github_auth_service import GitHubAuthService
from terminal_ai.configs.github import GitHubSettings
from terminal_ai.core.exceptions import ConfigurationError, GitHubAuthError, ValidationError


def _client(config: GitHubSettings, device: dict | None = None, token: dict | None = None) -> MagicMock:
    client = MagicMock()
    client.config = config
    client.request_device_code = AsyncMock(return_value=device or {})
    client.poll_access_token = AsyncMock(return_value=token or {})
    return client


@pytest.fixture
def configured() -> GitHubSettings:
    return GitHubSettings(client_id="client-1", client_secret="secret-1")


class TestStart:
    """Test suite for starting the device flow."""

    @pytest.mark.asyncio
    async def test_start_should_return_device_code_fields(self, configured: GitHubSettings) -> None:
        # Arrange
        client = _client(configured, device={
            "device_code": "dc",
            "user_code": "ABCD-1234",
            "verification_uri": "https://github.com/login/device",
            "expires_in": 900,
            "interval": 5,
        })

        # Act
        response = await GitHubAuthService(client).start()

        # Assert
        assert response.user_code == "ABCD-1234"
        assert response.device_code == "dc"
        assert response.interval == 5

    @pytest.mark.asyncio
    async def test_start_should_require_client_id(self) -> None:
        client = _client(GitHubSettings(client_id=None, client_secret=None))

        with pytest.raises(ConfigurationError, match="GITHUB_CLIENT_ID is not set"):
            await GitHubAuthService(client).start()

        client.request_device_code.assert_not_awaited()


class TestCheck:
    """Test suite for polling the token."""

    @pytest.mark.asyncio
    async def test_check_should_require_code(self, configured: GitHubSettings) -> None:
        with pytest.raises(ValidationError, match="Missing 'code' parameter"):
            await GitHubAuthService(_client(configured)).check(None)

    @pytest.mark.asyncio
    async def test_check_should_require_secret(self) -> None:
        client = _client(GitHubSettings(client_id="client-1", client_secret=None))

        with pytest.raises(ConfigurationError, match="GitHub secrets not set"):
            await GitHubAuthService(client).check("dc")

    @pytest.mark.asyncio
    async def test_check_should_report_pending(self, configured: GitHubSettings) -> None:
        client = _client(configured, token={"error": "authorization_pending"})

        result = await GitHubAuthService(client).check("dc")

        assert result.pending is True
        assert result.token is None

    @pytest.mark.asyncio
    async def test_check_should_return_token(self, configured: GitHubSettings) -> None:
        client = _client(configured, token={"access_token": "gho_abc", "token_type": "bearer"})

        result = await GitHubAuthService(client).check("dc")

        assert result.pending is False
        assert result.token == "gho_abc"

    @pytest.mark.asyncio
    async def test_check_should_surface_error_description(self, configured: GitHubSettings) -> None:
        client = _client(configured, token={
            "error": "expired_token",
            "error_description": "The device code has expired.",
        })

        with pytest.raises(GitHubAuthError, match="The device code has expired."):
            await GitHubAuthService(client).check("dc")

    @pytest.mark.asyncio
    async def test_check_should_reject_unknown_response(self, configured: GitHubSettings) -> None:
        client = _client(configured, token={"unexpected": True})

        with pytest.raises(GitHubAuthError, match="Unknown GitHub response"):
            await GitHubAuthService(client).check("dc")
