"""Service orchestrators."""

from .completion_dispatcher import CompletionDispatcher
from .completion_service import CompletionResult, CompletionService
from .edge_service import EdgeCompletionService
from .failure_notifier import FailureNotifier
from .github_auth_service import GitHubAuthService, TokenPollResult

__all__ = [
    "CompletionDispatcher",
    "CompletionResult",
    "CompletionService",
    "EdgeCompletionService",
    "FailureNotifier",
    "GitHubAuthService",
    "TokenPollResult",
]
