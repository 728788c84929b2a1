"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: terminal_ai.configs, terminal_ai.application, terminal_ai.boundary
System role: DI container for service injection
"""

from terminal_ai.configs import Settings, get_settings
from terminal_ai.application.services import (
    CompletionDispatcher,
    CompletionService,
    EdgeCompletionService,
    FailureNotifier,
    GitHubAuthService,
)


class ServiceCache:
    """Container for cached client instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._pinecone_client = None
        self._openrouter_client = None
        self._hyperbolic_client = None
        self._email_client = None
        self._github_client = None

    @property
    def settings(self) -> Settings:
        """Settings the cached clients are built from."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def pinecone_client(self):
        """Get cached Pinecone client."""
        if self._pinecone_client is None:
            from terminal_ai.boundary.vdb.pinecone_client import PineconeClient
            self._pinecone_client = PineconeClient(self.settings.vector_store)
        return self._pinecone_client

    @property
    def openrouter_client(self):
        """Get cached OpenRouter completion client."""
        if self._openrouter_client is None:
            from terminal_ai.boundary.llm.completion_client import ChatCompletionClient

            config = self.settings.openrouter
            self._openrouter_client = ChatCompletionClient(
                base_url=config.base_url,
                api_key=config.api_key,
                extra_headers={"HTTP-Referer": config.referer, "X-Title": config.title},
            )
        return self._openrouter_client

    @property
    def hyperbolic_client(self):
        """Get cached Hyperbolic completion client."""
        if self._hyperbolic_client is None:
            from terminal_ai.boundary.llm.completion_client import ChatCompletionClient

            config = self.settings.hyperbolic
            self._hyperbolic_client = ChatCompletionClient(
                base_url=config.base_url,
                api_key=config.api_key,
            )
        return self._hyperbolic_client

    @property
    def email_client(self):
        """Get cached Resend client."""
        if self._email_client is None:
            from terminal_ai.boundary.email.resend_client import ResendEmailClient
            self._email_client = ResendEmailClient(self.settings.notifications)
        return self._email_client

    @property
    def github_client(self):
        """Get cached GitHub device-flow client."""
        if self._github_client is None:
            from terminal_ai.boundary.github.device_flow_client import GitHubDeviceFlowClient
            self._github_client = GitHubDeviceFlowClient(self.settings.github)
        return self._github_client

    async def aclose(self) -> None:
        """Close every client that was created."""
        for client in (
            self._pinecone_client,
            self._openrouter_client,
            self._hyperbolic_client,
            self._email_client,
            self._github_client,
        ):
            if client is not None:
                await client.aclose()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._settings = None
        self._pinecone_client = None
        self._openrouter_client = None
        self._hyperbolic_client = None
        self._email_client = None
        self._github_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_completion_service() -> CompletionService:
    """
    Get memory-backed completion service.

    Returns:
        CompletionService: Service wired to OpenRouter, Pinecone and Resend
    """
    from terminal_ai.application.conversation_store import ConversationStore
    from terminal_ai.application.prompt_builder import PromptBuilder

    cache = get_service_cache()
    settings = cache.settings
    return CompletionService(
        dispatcher=CompletionDispatcher(
            cache.openrouter_client,
            timeout_seconds=settings.openrouter.timeout_seconds,
        ),
        prompt_builder=PromptBuilder(settings.openrouter),
        conversation_store=ConversationStore(cache.pinecone_client, settings.vector_store),
        notifier=FailureNotifier(cache.email_client),
    )


def get_edge_completion_service() -> EdgeCompletionService:
    """
    Get stateless edge completion service.

    Returns:
        EdgeCompletionService: Service wired to Hyperbolic
    """
    cache = get_service_cache()
    settings = cache.settings
    return EdgeCompletionService(
        dispatcher=CompletionDispatcher(
            cache.hyperbolic_client,
            timeout_seconds=settings.hyperbolic.timeout_seconds,
        ),
        config=settings.hyperbolic,
    )


def get_github_auth_service() -> GitHubAuthService:
    """
    Get GitHub device-flow service.

    Returns:
        GitHubAuthService: Service wired to GitHub's OAuth endpoints
    """
    return GitHubAuthService(get_service_cache().github_client)
