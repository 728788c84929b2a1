"""
Prompt builder.

Turns a user prompt, a completion mode and retrieved history into the
outbound provider payload.

- command mode: one user message holding the instructional prompt with the
  history rendered as a transcript.
- chat mode: persona system message, the last 10 history turns (role and
  content only), then the new user message.

Dependencies: langchain_core, terminal_ai.core.prompts, terminal_ai.configs
System role: Outbound request assembly
"""

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from terminal_ai.configs.providers import OpenRouterSettings
from terminal_ai.core.prompts.chat_prompt import CHAT_PROMPT
from terminal_ai.core.prompts.command_prompt import COMMAND_PROMPT, NO_HISTORY_TEXT
from terminal_ai.models.chat import ChatMessage, CompletionMode, CompletionPayload, MessageRole

CHAT_HISTORY_WINDOW = 10

_WIRE_ROLES = {"human": "user", "ai": "assistant", "system": "system"}


def format_history_transcript(history: list[ChatMessage]) -> str:
    """Render history as `role: content` lines, or a placeholder when empty."""
    if not history:
        return NO_HISTORY_TEXT
    lines = "\n".join(f"{message.role.value}: {message.content}" for message in history)
    return f"Previous conversation:\n{lines}"


def build_command_prompt(user_prompt: str, history: list[ChatMessage] | None = None) -> str:
    """Build the single instructional prompt for command mode."""
    return COMMAND_PROMPT.format(
        history=format_history_transcript(history or []),
        user_prompt=user_prompt,
    )


def _to_langchain(message: ChatMessage) -> BaseMessage:
    if message.role == MessageRole.ASSISTANT:
        return AIMessage(content=message.content)
    return HumanMessage(content=message.content)


def build_chat_messages(
    user_prompt: str,
    history: list[ChatMessage] | None = None,
) -> list[dict[str, str]]:
    """Build the chat-mode message sequence in provider wire format."""
    recent = (history or [])[-CHAT_HISTORY_WINDOW:]
    messages = CHAT_PROMPT.format_messages(
        history=[_to_langchain(message) for message in recent],
        user_prompt=user_prompt,
    )
    return [
        {"role": _WIRE_ROLES[message.type], "content": message.content}
        for message in messages
    ]


class PromptBuilder:
    """Assemble completion payloads with provider defaults."""

    def __init__(self, config: OpenRouterSettings) -> None:
        self.config = config

    def build(
        self,
        mode: CompletionMode,
        user_prompt: str,
        history: list[ChatMessage] | None = None,
    ) -> CompletionPayload:
        """
        Build the provider payload for a mode.

        Args:
            mode: command or chat
            user_prompt: New user input
            history: Retrieved conversation (may be empty)

        Returns:
            CompletionPayload: Provider request
        """
        if mode == CompletionMode.CHAT:
            return CompletionPayload(
                model=self.config.chat_model,
                messages=build_chat_messages(user_prompt, history),
                temperature=self.config.chat_temperature,
                top_p=self.config.top_p,
                max_tokens=self.config.max_tokens,
            )

        return CompletionPayload(
            model=self.config.command_model,
            messages=[{"role": "user", "content": build_command_prompt(user_prompt, history)}],
            temperature=self.config.command_temperature,
            top_p=self.config.top_p,
            max_tokens=self.config.max_tokens,
        )
