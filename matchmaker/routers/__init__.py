"""API Routers package

Routers are organized by feature domain.
"""

from . import matches_router, profiles_router, queue_router

__all__ = [
    "matches_router",
    "profiles_router",
    "queue_router",
]
