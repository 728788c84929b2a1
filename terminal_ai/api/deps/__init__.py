"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_completion_service,
    get_edge_completion_service,
    get_github_auth_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_completion_service",
    "get_edge_completion_service",
    "get_github_auth_service",
    "get_service_cache",
]
