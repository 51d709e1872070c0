"""Repository for created matches.

Matches are write-once: each pairing records exactly one match and
no record is ever replaced or removed. Methods never suspend, so each
call is atomic on the event loop; callers needing a wider critical
section (the match queue) hold their own lock around ``record``.
"""

from __future__ import annotations

import logging
from uuid import UUID

from ..models.match import Match

logger = logging.getLogger(__name__)


class MatchRepository:
    """Process-lifetime match storage keyed by match id."""

    def __init__(self) -> None:
        self._matches: dict[UUID, Match] = {}

    async def record(self, match: Match) -> None:
        """Store a new match. Raises ValueError if the id is already recorded."""
        if match.id in self._matches:
            raise ValueError(f"Match {match.id} already recorded")
        self._matches[match.id] = match
        logger.debug(f"Recorded match {match.id}")

    async def get(self, match_id: UUID) -> Match | None:
        return self._matches.get(match_id)

    async def list_all(self) -> list[Match]:
        """All recorded matches in creation order."""
        return list(self._matches.values())

    def count(self) -> int:
        return len(self._matches)
