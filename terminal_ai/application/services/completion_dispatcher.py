"""
Completion request dispatcher.

Races one provider call against a deadline. When the deadline fires the
in-flight call is cancelled and a CompletionTimeoutError is raised. There is
no retry: a single attempt within the timeout budget.

Dependencies: asyncio, terminal_ai.boundary.llm
System role: Deadline enforcement for upstream completions
"""

import asyncio
import logging
from typing import Any

from terminal_ai.boundary.llm.completion_client import ChatCompletionClient
from terminal_ai.core.exceptions import CompletionTimeoutError
from terminal_ai.models.chat import CompletionPayload

logger = logging.getLogger(__name__)


class CompletionDispatcher:
    """Issue completion calls with a fixed deadline."""

    def __init__(self, client: ChatCompletionClient, timeout_seconds: float) -> None:
        self.client = client
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, payload: CompletionPayload) -> dict[str, Any]:
        """
        Send the payload and wait at most `timeout_seconds`.

        Raises:
            CompletionTimeoutError: Deadline reached, call cancelled
            CompletionUpstreamError: Provider returned a non-success status
        """
        try:
            return await asyncio.wait_for(self.client.create(payload), self.timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.warning(
                "Completion request timed out",
                extra={"model": payload.model, "timeout_seconds": self.timeout_seconds},
            )
            raise CompletionTimeoutError(self.timeout_seconds) from e
