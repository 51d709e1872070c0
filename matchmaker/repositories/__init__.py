"""In-memory repository layer for profiles and matches."""

from .match import MatchRepository
from .profile import ProfileRepository

__all__ = [
    "MatchRepository",
    "ProfileRepository",
]
