"""Chat completion provider clients."""

from terminal_ai.boundary.llm.completion_client import ChatCompletionClient

__all__ = ["ChatCompletionClient"]
