"""Match listing routes"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from ..core.dependencies import get_match_repo
from ..repositories import MatchRepository
from .schemas import MatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=list[MatchResponse])
async def list_matches(
    matches: MatchRepository = Depends(get_match_repo),
) -> list[MatchResponse]:
    """List every recorded match."""
    try:
        recorded = await matches.list_all()
    except Exception as e:
        logger.exception(f"Failed to list matches: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch matches") from None
    return [MatchResponse.from_match(m) for m in recorded]


@router.get("/{match_id}", response_model=MatchResponse)
async def get_match(
    match_id: UUID,
    matches: MatchRepository = Depends(get_match_repo),
) -> MatchResponse:
    try:
        match = await matches.get(match_id)
    except Exception as e:
        logger.exception(f"Failed to fetch match {match_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch match") from None
    if match is None:
        raise HTTPException(status_code=404, detail="Match not found")
    return MatchResponse.from_match(match)
