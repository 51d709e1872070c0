"""Profile registration and lookup routes"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ..core.dependencies import get_profile_repo
from ..repositories import ProfileRepository
from .schemas import ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["profiles"])


class CreateProfileRequest(BaseModel):
    name: str


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    body: CreateProfileRequest,
    profiles: ProfileRepository = Depends(get_profile_repo),
) -> ProfileResponse:
    """Register a new player profile."""
    try:
        profile = await profiles.register(body.name)
    except Exception as e:
        logger.exception(f"Failed to register profile: {e}")
        raise HTTPException(status_code=500, detail="Failed to register profile") from None
    logger.info(f"Profile {profile.id} registered")
    return ProfileResponse.from_profile(profile)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: UUID,
    profiles: ProfileRepository = Depends(get_profile_repo),
) -> ProfileResponse:
    """Fetch a profile by id."""
    try:
        profile = await profiles.get(profile_id)
    except Exception as e:
        logger.exception(f"Failed to fetch profile {profile_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch profile") from None
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileResponse.from_profile(profile)
