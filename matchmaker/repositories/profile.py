"""Repository for registered player profiles."""

from __future__ import annotations

import logging
import uuid
from uuid import UUID

from ..models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileRepository:
    """Process-lifetime profile storage keyed by profile id.

    Profiles are never updated or deleted. No method suspends, so each
    call runs atomically on the event loop without a lock.
    """

    def __init__(self) -> None:
        self._profiles: dict[UUID, Profile] = {}

    async def register(self, name: str) -> Profile:
        """Create a profile under a fresh id. Names need not be unique."""
        profile = Profile(id=uuid.uuid4(), name=name)
        self._profiles[profile.id] = profile
        logger.debug(f"Registered profile {profile.id} ({name!r})")
        return profile

    async def get(self, profile_id: UUID) -> Profile | None:
        """Get a profile by id, or None if it was never registered."""
        return self._profiles.get(profile_id)

    async def exists(self, profile_id: UUID) -> bool:
        return profile_id in self._profiles

    def count(self) -> int:
        return len(self._profiles)
