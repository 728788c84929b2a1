"""
OpenAI-compatible chat completion client.

Posts one request to `{base_url}/v1/chat/completions` with bearer auth and
returns the decoded JSON body. Deadlines are enforced by the caller.

Dependencies: httpx, terminal_ai.core.exceptions
System role: Upstream model provider transport
"""

import logging
from typing import Any

import httpx

from terminal_ai.core.exceptions import CompletionError, CompletionUpstreamError
from terminal_ai.models.chat import CompletionPayload
from terminal_ai.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """Client for a single chat completion provider."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        extra_headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize provider client.

        Args:
            base_url: Provider API root (without /v1)
            api_key: Bearer token
            extra_headers: Provider-specific headers (attribution, titles)
            http_client: Optional shared AsyncClient (injected in tests)
        """
        self.endpoint = f"{base_url.rstrip('/')}/v1/chat/completions"
        self.api_key = api_key
        self.extra_headers = extra_headers or {}
        self.http = http_client or httpx.AsyncClient(timeout=None)

    async def create(self, payload: CompletionPayload) -> dict[str, Any]:
        """
        Request a completion.

        Args:
            payload: Provider request

        Returns:
            dict: Provider response body

        Raises:
            CompletionUpstreamError: Non-success HTTP status
            CompletionError: Success status with a body that is not a JSON object
            httpx.HTTPError: Transport failure
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            **self.extra_headers,
        }
        logger.info(
            "Sending request to AI model",
            extra={"model": payload.model, "message_count": len(payload.messages)},
        )
        response = await self.http.post(self.endpoint, headers=headers, json=payload.to_wire())

        if response.is_error:
            logger.warning(
                "Provider returned error status",
                extra={
                    "status_code": response.status_code,
                    "body": safe_log_value(response.text),
                },
            )
            raise CompletionUpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise CompletionError("Invalid JSON response from AI model") from e
        if not isinstance(data, dict):
            raise CompletionError(
                "Unexpected response shape from AI model",
                {"body": safe_log_value(response.text)},
            )

        logger.info("Received response from AI model", extra={"model": payload.model})
        return data

    async def aclose(self) -> None:
        await self.http.aclose()
