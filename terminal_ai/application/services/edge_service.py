"""
Edge completion service.

Stateless low-latency variant: forwards client messages (or a wrapped
prompt) to the edge provider with its own deadline. No memory, no
conversation id, no operator e-mail.

Dependencies: terminal_ai.application.services.completion_dispatcher
System role: Stateless completion orchestration
"""

import logging
from typing import Any

from terminal_ai.application.services.completion_dispatcher import CompletionDispatcher
from terminal_ai.configs.providers import HyperbolicSettings
from terminal_ai.core.exceptions import CompletionError, CompletionTimeoutError, ValidationError
from terminal_ai.models.chat import CompletionPayload, EdgeCompletionRequest

logger = logging.getLogger(__name__)


class EdgeCompletionService:
    """Pass-through completion against the edge provider."""

    def __init__(self, dispatcher: CompletionDispatcher, config: HyperbolicSettings) -> None:
        self.dispatcher = dispatcher
        self.config = config

    def build_payload(self, request: EdgeCompletionRequest) -> CompletionPayload:
        """
        Build the provider payload.

        Raises:
            ValidationError: Neither messages nor prompt supplied
        """
        if request.messages:
            messages = [
                {"role": message.role, "content": message.content or ""}
                for message in request.messages
            ]
        elif request.prompt:
            messages = [{"role": "user", "content": request.prompt}]
        else:
            raise ValidationError("Prompt is required", field="prompt")

        return CompletionPayload(
            model=self.config.model,
            messages=messages,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            top_p=self.config.top_p,
        )

    async def complete(self, request: EdgeCompletionRequest) -> dict[str, Any]:
        """Dispatch and return the raw provider response."""
        payload = self.build_payload(request)
        try:
            return await self.dispatcher.dispatch(payload)
        except CompletionError:
            raise
        except Exception as e:
            logger.error("Edge completion failed", extra={"error_type": type(e).__name__, "error": str(e)})
            raise CompletionError(str(e) or type(e).__name__) from e
