"""Domain exceptions raised by the matchmaking core."""

from uuid import UUID


class MatchmakingError(Exception):
    """Base class for matchmaking failures surfaced to the caller."""


class UnknownProfileError(MatchmakingError):
    """Referenced profile id has no registered profile."""

    def __init__(self, profile_id: UUID):
        super().__init__(f"Profile {profile_id} does not exist")
        self.profile_id = profile_id


class NotQueuedError(MatchmakingError):
    """Leave requested for a profile that is not waiting."""

    def __init__(self, profile_id: UUID):
        super().__init__(f"Profile {profile_id} is not in queue")
        self.profile_id = profile_id
