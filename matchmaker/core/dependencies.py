"""Dependency injection utilities for FastAPI

The stores and the match queue are created once per application
in the lifespan and kept on ``app.state``.
"""

from fastapi import HTTPException, Request

from ..repositories import MatchRepository, ProfileRepository
from ..services import MatchQueue


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return value


def get_profile_repo(request: Request) -> ProfileRepository:
    """Get the shared ProfileRepository"""
    return _state_attr(request, "profiles")


def get_match_repo(request: Request) -> MatchRepository:
    """Get the shared MatchRepository"""
    return _state_attr(request, "matches")


def get_match_queue(request: Request) -> MatchQueue:
    """Get the shared MatchQueue"""
    return _state_attr(request, "match_queue")
