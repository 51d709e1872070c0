"""Data models for profiles, matches and queue outcomes."""

from .match import Match
from .profile import Profile
from .queue import JoinResult, JoinStatus

__all__ = [
    "JoinResult",
    "JoinStatus",
    "Match",
    "Profile",
]
