"""API routers."""

from .completions import router as completions_router
from .github import router as github_router
from .health import router as health_router

__all__ = [
    "completions_router",
    "github_router",
    "health_router",
]
