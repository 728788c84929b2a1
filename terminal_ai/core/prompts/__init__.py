"""Prompt templates for command and chat modes."""

from terminal_ai.core.prompts.chat_prompt import CHAT_PROMPT, CHAT_SYSTEM_PROMPT
from terminal_ai.core.prompts.command_prompt import COMMAND_PROMPT

__all__ = ["CHAT_PROMPT", "CHAT_SYSTEM_PROMPT", "COMMAND_PROMPT"]
