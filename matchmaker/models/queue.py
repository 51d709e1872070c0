"""Outcome model for queue joins."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .match import Match


class JoinStatus(str, Enum):
    MATCHED = "matched"
    ENQUEUED = "enqueued"
    ALREADY_QUEUED = "already_queued"


@dataclass(frozen=True)
class JoinResult:
    """Result of a join: a new match, a new wait-list entry, or a no-op."""

    status: JoinStatus
    match: Match | None = None
