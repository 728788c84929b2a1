"""
Command mode prompt.

Single instructional prompt asking the model for a step-by-step plan and
exactly one shell command, returned as JSON. Prior conversation is embedded
as a plain transcript.

Dependencies: langchain_core.prompts
System role: Prompt template for shell command generation
"""

from langchain_core.prompts import PromptTemplate

NO_HISTORY_TEXT = "No previous conversation"

COMMAND_TEMPLATE = """Task: Analyze the user's request, formulate a step-by-step reasoning plan, and produce exactly one shell command that accomplishes it.

## Instructions
1. Think through the request before answering and describe each step briefly
2. Produce a single command that can be pasted into a POSIX shell
3. Prefer safe, non-destructive commands; never chain unrelated operations
4. If the request cannot be fulfilled with a command, explain why in the reasoning and return an empty command

## Conversation Context
{history}

User request: {user_prompt}

Respond ONLY with a JSON object of the form:
{{"reasoning": "<step-by-step plan>", "command": "<single shell command>"}}

Your JSON response:"""

COMMAND_PROMPT = PromptTemplate.from_template(COMMAND_TEMPLATE)
