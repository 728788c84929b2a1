"""
Test suite for ChatCompletionClient.

System role: Verification of the upstream provider transport
"""

import json
from typing import Any

import httpx
import pytest

from terminal_ai.boundary.llm.completion_client import ChatCompletionClient
from terminal_ai.core.exceptions import CompletionError, CompletionUpstreamError
from terminal_ai.models.chat import CompletionPayload
from tests.helpers import mock_http_client


@pytest.fixture
def payload() -> CompletionPayload:
    return CompletionPayload(
        model="openrouter/polaris-alpha",
        messages=[{"role": "user", "content": "list files"}],
        temperature=0.3,
        top_p=0.9,
    )


class TestChatCompletionClient:
    """Test suite for chat completion requests."""

    @pytest.mark.asyncio
    async def test_create_should_post_payload_with_bearer_auth(
        self, payload: CompletionPayload, completion_body: dict[str, Any]
    ) -> None:
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=completion_body)

        client = ChatCompletionClient(
            "https://openrouter.ai/api/",
            "secret",
            extra_headers={"X-Title": "Terminal AI Assistant"},
            http_client=mock_http_client(handler),
        )

        # Act
        data = await client.create(payload)

        # Assert
        assert data == completion_body
        request = seen[0]
        assert str(request.url) == "https://openrouter.ai/api/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["X-Title"] == "Terminal AI Assistant"
        assert json.loads(request.content) == {
            "model": "openrouter/polaris-alpha",
            "messages": [{"role": "user", "content": "list files"}],
            "temperature": 0.3,
            "top_p": 0.9,
            "stream": False,
        }

    @pytest.mark.asyncio
    async def test_create_should_raise_upstream_error_with_status_and_body(
        self, payload: CompletionPayload
    ) -> None:
        # Arrange
        client = ChatCompletionClient(
            "https://openrouter.ai/api",
            "secret",
            http_client=mock_http_client(lambda request: httpx.Response(404, text="model not found")),
        )

        # Act
        with pytest.raises(CompletionUpstreamError) as exc_info:
            await client.create(payload)

        # Assert
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == "model not found"
        assert str(exc_info.value) == "API Error (404): model not found"

    @pytest.mark.asyncio
    async def test_create_should_propagate_transport_errors(self, payload: CompletionPayload) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        client = ChatCompletionClient(
            "https://openrouter.ai/api", "secret", http_client=mock_http_client(handler)
        )

        with pytest.raises(httpx.ConnectError):
            await client.create(payload)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"json": ["unexpected"]},
            {"json": "plain string"},
            {"text": "<html>gateway</html>"},
        ],
    )
    async def test_create_should_reject_bodies_that_are_not_objects(
        self, payload: CompletionPayload, body: dict[str, Any]
    ) -> None:
        client = ChatCompletionClient(
            "https://openrouter.ai/api",
            "secret",
            http_client=mock_http_client(lambda request: httpx.Response(200, **body)),
        )

        with pytest.raises(CompletionError):
            await client.create(payload)
