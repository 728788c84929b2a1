"""
Chat domain models and schemas.

Request schemas for the completion endpoints, the conversation message
record, and the outbound provider payload.

Dependencies: pydantic
System role: Chat API contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """Conversation participant."""

    USER = "user"
    ASSISTANT = "assistant"


class CompletionMode(str, Enum):
    """Prompt style requested by the terminal client."""

    COMMAND = "command"
    CHAT = "chat"


class ChatMessage(BaseModel):
    """Single conversation turn."""

    role: MessageRole = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    timestamp: int | None = Field(default=None, description="Epoch milliseconds")


class InboundMessage(BaseModel):
    """Loosely-typed message accepted from clients (any role, optional content)."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    role: str = Field(default="user")
    content: str | None = Field(default=None)


class CompletionRequest(BaseModel):
    """Request body for the memory-backed completion endpoint."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    prompt: str | None = Field(default=None, description="User input")
    messages: list[InboundMessage] | None = Field(
        default=None,
        description="Alternative input; the first message content is used when prompt is absent",
    )
    mode: CompletionMode = Field(default=CompletionMode.COMMAND)
    conversation_id: str | None = Field(default=None, alias="conversationId")

    @field_validator("mode", mode="before")
    @classmethod
    def _default_mode(cls, value):
        """Anything other than "chat" selects command mode."""
        if value == CompletionMode.CHAT.value:
            return CompletionMode.CHAT
        return CompletionMode.COMMAND

    def resolve_prompt(self) -> str | None:
        """Return the prompt, falling back to the first message content."""
        if self.prompt:
            return self.prompt
        if self.messages and self.messages[0].content:
            return self.messages[0].content
        return None


class EdgeCompletionRequest(BaseModel):
    """Request body for the stateless edge completion endpoint."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    prompt: str | None = Field(default=None)
    messages: list[InboundMessage] | None = Field(default=None)


class CompletionPayload(BaseModel):
    """Outbound OpenAI-compatible chat completion request."""

    model: str
    messages: list[dict[str, str]]
    temperature: float
    top_p: float
    max_tokens: int | None = None
    stream: bool = False

    def to_wire(self) -> dict:
        """Serialize for the provider, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)
