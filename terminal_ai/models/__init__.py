"""API and domain data contracts."""

from terminal_ai.models.chat import (
    ChatMessage,
    CompletionMode,
    CompletionPayload,
    CompletionRequest,
    EdgeCompletionRequest,
    MessageRole,
)
from terminal_ai.models.common import ErrorResponse

__all__ = [
    "ChatMessage",
    "CompletionMode",
    "CompletionPayload",
    "CompletionRequest",
    "EdgeCompletionRequest",
    "ErrorResponse",
    "MessageRole",
]
