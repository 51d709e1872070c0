"""Services layer - matchmaking business logic

Services are created once per application in the lifespan and
accessed by routers through dependency injection.
"""

from .match_queue import MatchQueue

__all__ = [
    "MatchQueue",
]
