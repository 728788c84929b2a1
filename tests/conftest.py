"""
Shared test fixtures and configuration for entire test suite.

Provides: settings objects, in-memory vector index, background task recorder
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from typing import Any

import pytest

from terminal_ai.configs.notifications import NotificationSettings
from terminal_ai.configs.providers import HyperbolicSettings, OpenRouterSettings
from terminal_ai.configs.vector_store import VectorStoreSettings
from tests.helpers import InMemoryVectorIndex, RecordingTasks


@pytest.fixture
def vector_settings() -> VectorStoreSettings:
    """Vector store settings with a fixed host (no control-plane lookup)."""
    return VectorStoreSettings(
        api_key="test-pinecone-key",
        index_name="test-index",
        index_host="test-index.svc.pinecone.io",
        init_backoff_seconds=0.5,
    )


@pytest.fixture
def openrouter_settings() -> OpenRouterSettings:
    return OpenRouterSettings(api_key="test-openrouter-key", timeout_seconds=5)


@pytest.fixture
def hyperbolic_settings() -> HyperbolicSettings:
    return HyperbolicSettings(api_key="test-hyperbolic-key", timeout_seconds=5)


@pytest.fixture
def notification_settings() -> NotificationSettings:
    return NotificationSettings(
        resend_api_key="test-resend-key",
        notification_email_to="ops@example.com",
        notification_email_from="alerts@example.com",
    )


@pytest.fixture
def vector_index() -> InMemoryVectorIndex:
    return InMemoryVectorIndex()


@pytest.fixture
def tasks() -> RecordingTasks:
    return RecordingTasks()


@pytest.fixture
def completion_body() -> dict[str, Any]:
    """Typical provider success body."""
    return {
        "id": "gen-123",
        "object": "chat.completion",
        "model": "openrouter/polaris-alpha",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": '{"reasoning": "List directory entries.", "command": "ls -la"}',
                },
                "finish_reason": "stop",
            }
        ],
    }
