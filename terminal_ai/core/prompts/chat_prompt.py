"""
Chat mode prompt.

Conversational persona followed by recent history and the new user turn.

Dependencies: langchain_core.prompts
System role: Prompt template for conversational replies
"""

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

CHAT_SYSTEM_PROMPT = """You are T-AI, a helpful AI assistant that lives in the user's terminal.

## Instructions
1. Answer conversationally and concisely
2. Do not generate shell commands unless the user explicitly asks for one
3. Use the conversation history to resolve follow-up questions
4. Say so plainly when you do not know something"""

CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", CHAT_SYSTEM_PROMPT),
    MessagesPlaceholder("history"),
    ("human", "{user_prompt}"),
])
