"""Match queue — wait list and the enqueue-or-pair decision.

A join either pairs the caller with a randomly chosen waiting profile,
appends the caller to the wait list, or does nothing if the caller is
already waiting. The whole decision, including recording the match,
runs under a single lock shared with ``leave`` and ``snapshot``.
"""

from __future__ import annotations

import asyncio
import logging
import random
import uuid
from uuid import UUID

from ..errors import NotQueuedError, UnknownProfileError
from ..models import JoinResult, JoinStatus, Match
from ..repositories import MatchRepository, ProfileRepository

logger = logging.getLogger(__name__)


class MatchQueue:
    """Wait list of profile ids with atomic random pairing."""

    def __init__(
        self,
        profiles: ProfileRepository,
        matches: MatchRepository,
        rng: random.Random | None = None,
    ) -> None:
        self.profiles = profiles
        self.matches = matches
        # OS entropy unless a seeded generator is injected
        self._rng = rng if rng is not None else random.SystemRandom()
        self._waiting: list[UUID] = []
        self._lock = asyncio.Lock()

    async def join_or_pair(self, profile_id: UUID) -> JoinResult:
        """Pair ``profile_id`` with a random waiting profile, or enqueue it.

        Raises UnknownProfileError if the profile was never registered.
        """
        # Profiles are never removed, so checking outside the lock is safe
        if not await self.profiles.exists(profile_id):
            raise UnknownProfileError(profile_id)

        async with self._lock:
            if profile_id in self._waiting:
                logger.debug(f"Profile {profile_id} already in queue")
                return JoinResult(JoinStatus.ALREADY_QUEUED)

            if not self._waiting:
                self._waiting.append(profile_id)
                logger.info(f"Profile {profile_id} enqueued (queue size={len(self._waiting)})")
                return JoinResult(JoinStatus.ENQUEUED)

            idx = self._rng.randrange(len(self._waiting))
            opponent_id = self._waiting[idx]
            match = Match(id=uuid.uuid4(), player1=opponent_id, player2=profile_id)
            # Opponent stays waiting if recording fails
            await self.matches.record(match)
            del self._waiting[idx]

        logger.info(f"Match {match.id} created: {opponent_id} vs {profile_id}")
        return JoinResult(JoinStatus.MATCHED, match)

    async def leave(self, profile_id: UUID) -> None:
        """Remove a waiting profile. Raises NotQueuedError if it is not waiting."""
        async with self._lock:
            try:
                self._waiting.remove(profile_id)
            except ValueError:
                raise NotQueuedError(profile_id) from None
        logger.info(f"Profile {profile_id} left queue")

    async def snapshot(self) -> list[UUID]:
        """Current wait list, oldest first. Pairing order is random, not FIFO."""
        async with self._lock:
            return list(self._waiting)

    def size(self) -> int:
        return len(self._waiting)
