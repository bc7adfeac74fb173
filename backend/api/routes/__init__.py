"""API route modules."""

from .health import router as health_router
from .media import router as media_router
from .plan import router as plan_router

__all__ = [
    "health_router",
    "media_router",
    "plan_router",
]
