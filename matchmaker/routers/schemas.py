"""Request/response models shared by the routers."""

from uuid import UUID

from pydantic import BaseModel

from ..models import Match, Profile


class ProfileResponse(BaseModel):
    id: UUID
    name: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(id=profile.id, name=profile.name)


class MatchResponse(BaseModel):
    id: UUID
    player1: UUID
    player2: UUID

    @classmethod
    def from_match(cls, match: Match) -> "MatchResponse":
        return cls(id=match.id, player1=match.player1, player2=match.player2)


class QueueStatusResponse(BaseModel):
    status: str
    profile_id: UUID
