"""
Completion service for memory-backed terminal requests.

Orchestrates full completion flow: history retrieval, prompt assembly,
deadline-bound dispatch, and background persistence of the new turn.

Dependencies: terminal_ai.application, terminal_ai.boundary, terminal_ai.core
System role: Completion orchestration layer
"""

import json
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from terminal_ai.application.conversation_store import ConversationStore
from terminal_ai.application.prompt_builder import PromptBuilder
from terminal_ai.application.services.completion_dispatcher import CompletionDispatcher
from terminal_ai.application.services.failure_notifier import FailureNotifier
from terminal_ai.core.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    CompletionUpstreamError,
    ValidationError,
)
from terminal_ai.models.chat import ChatMessage, CompletionRequest
from terminal_ai.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class TaskSubmitter(Protocol):
    """Anything that schedules work after the response (FastAPI BackgroundTasks)."""

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None: ...


@dataclass
class CompletionResult:
    """Provider response plus the conversation it belongs to."""

    conversation_id: str
    response: dict[str, Any]


def extract_reply(response: dict[str, Any]) -> str | None:
    """Return choices[0].message.content when present."""
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) and content else None


def describe_failure(exc: Exception) -> str:
    """Serialize an exception for the operator e-mail."""
    details: dict[str, Any] = {"type": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, CompletionUpstreamError):
        details["status_code"] = exc.status_code
    return json.dumps(details, indent=2)


class CompletionService:
    """
    Completion service for terminal requests.

    Coordinates conversation memory, prompt building, provider dispatch and
    failure notification.
    """

    def __init__(
        self,
        dispatcher: CompletionDispatcher,
        prompt_builder: PromptBuilder,
        conversation_store: ConversationStore,
        notifier: FailureNotifier,
    ) -> None:
        """
        Initialize completion service.

        Args:
            dispatcher: Deadline-bound provider dispatcher
            prompt_builder: Payload assembly
            conversation_store: Best-effort conversation memory
            notifier: Operator failure e-mails
        """
        self.dispatcher = dispatcher
        self.prompt_builder = prompt_builder
        self.conversation_store = conversation_store
        self.notifier = notifier

    async def load_history(self, conversation_id: str) -> list[ChatMessage]:
        """Fetch prior turns; any failure degrades to no history."""
        try:
            history = await self.conversation_store.retrieve(conversation_id)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "Error retrieving history, continuing without it",
                extra={"conversation_id": conversation_id, "error": str(e)},
            )
            return []
        logger.info(
            f"Retrieved {len(history)} messages from conversation history",
            extra={"conversation_id": conversation_id},
        )
        return history

    async def complete(
        self,
        request: CompletionRequest,
        tasks: TaskSubmitter,
    ) -> CompletionResult:
        """
        Process a completion request.

        Flow:
        1. Resolve prompt and conversation id
        2. Load history when memory is available
        3. Build payload for the requested mode and dispatch it
        4. Schedule persistence of the new turn
        5. Return provider response with conversationId

        Args:
            request: Inbound request
            tasks: Background task submitter

        Returns:
            CompletionResult: Response payload and conversation id

        Raises:
            ValidationError: No prompt could be resolved
            CompletionTimeoutError: Provider deadline reached
            CompletionError: Any other provider failure
        """
        user_prompt = request.resolve_prompt()
        if not user_prompt:
            raise ValidationError("Prompt is required", field="prompt")

        conversation_id = request.conversation_id or str(uuid.uuid4())
        logger.info(
            f"Received request for mode: {request.mode.value}",
            extra={"conversation_id": conversation_id, "prompt": safe_log_value(user_prompt, 200)},
        )

        memory_enabled = await self.conversation_store.is_available()
        history = await self.load_history(conversation_id) if memory_enabled else []

        payload = self.prompt_builder.build(request.mode, user_prompt, history)

        try:
            data = await self.dispatcher.dispatch(payload)
        except CompletionTimeoutError:
            raise
        except Exception as e:
            self._report_failure(e, tasks)
            if isinstance(e, CompletionError):
                raise
            raise CompletionError(str(e) or type(e).__name__) from e

        reply = extract_reply(data)
        if memory_enabled and reply:
            tasks.add_task(self.persist_turn, conversation_id, user_prompt, reply)

        return CompletionResult(
            conversation_id=conversation_id,
            response={**data, "conversationId": conversation_id},
        )

    async def persist_turn(self, conversation_id: str, user_text: str, ai_text: str) -> None:
        """Background persistence; failures are logged and dropped."""
        try:
            saved = await self.conversation_store.save(conversation_id, user_text, ai_text)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception(
                "Non-blocking save failed",
                extra={"conversation_id": conversation_id, "error": str(e)},
            )
            return
        if not saved:
            logger.warning("Conversation turn not persisted", extra={"conversation_id": conversation_id})

    def _report_failure(self, exc: Exception, tasks: TaskSubmitter) -> None:
        message = str(exc)
        logger.error("API Error", extra={"error_type": type(exc).__name__, "error": safe_log_value(message)})
        if self.notifier.should_notify(message):
            tasks.add_task(self.notifier.notify, message, describe_failure(exc))
