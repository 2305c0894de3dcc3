"""API route modules."""

from .health import router as health_router
from .auth import router as auth_router
from .posts import router as posts_router

__all__ = [
    "health_router",
    "auth_router",
    "posts_router",
]
