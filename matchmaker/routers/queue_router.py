"""Match queue routes: join, leave and wait-list inspection"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.dependencies import get_match_queue
from ..errors import NotQueuedError, UnknownProfileError
from ..models import JoinStatus
from ..services import MatchQueue
from .schemas import MatchResponse, QueueStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/queue", tags=["queue"])


# ============================================
# Request Models
# ============================================


class QueueRequest(BaseModel):
    profile_id: UUID


# ============================================
# Endpoints
# ============================================


@router.get("", response_model=list[UUID])
async def get_queue(
    match_queue: MatchQueue = Depends(get_match_queue),
) -> list[UUID]:
    """Current wait list, oldest first."""
    try:
        return await match_queue.snapshot()
    except Exception as e:
        logger.exception(f"Failed to read queue: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch queue") from None


@router.post(
    "/enqueue",
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        201: {"model": MatchResponse, "description": "Paired with a waiting opponent"},
        200: {"model": QueueStatusResponse, "description": "Already in queue"},
        202: {"model": QueueStatusResponse, "description": "Added to the wait list"},
        400: {"description": "Profile does not exist"},
    },
)
async def enqueue(
    body: QueueRequest,
    match_queue: MatchQueue = Depends(get_match_queue),
) -> JSONResponse:
    """Join the queue, pairing immediately if someone is already waiting."""
    try:
        result = await match_queue.join_or_pair(body.profile_id)
    except UnknownProfileError:
        logger.warning(f"Enqueue rejected: unknown profile {body.profile_id}")
        raise HTTPException(status_code=400, detail="Profile does not exist") from None
    except Exception as e:
        logger.exception(f"Failed to enqueue {body.profile_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to join queue") from None

    if result.status is JoinStatus.MATCHED:
        payload = MatchResponse.from_match(result.match)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED, content=payload.model_dump(mode="json")
        )

    payload = QueueStatusResponse(status=result.status.value, profile_id=body.profile_id)
    code = (
        status.HTTP_202_ACCEPTED
        if result.status is JoinStatus.ENQUEUED
        else status.HTTP_200_OK
    )
    return JSONResponse(status_code=code, content=payload.model_dump(mode="json"))


@router.post("/leave", response_model=QueueStatusResponse)
async def leave_queue(
    body: QueueRequest,
    match_queue: MatchQueue = Depends(get_match_queue),
) -> QueueStatusResponse:
    """Withdraw a waiting profile from the queue."""
    try:
        await match_queue.leave(body.profile_id)
    except NotQueuedError:
        logger.warning(f"Leave rejected: {body.profile_id} not in queue")
        raise HTTPException(status_code=400, detail="Not in queue") from None
    except Exception as e:
        logger.exception(f"Failed to remove {body.profile_id} from queue: {e}")
        raise HTTPException(status_code=500, detail="Failed to leave queue") from None
    return QueueStatusResponse(status="removed", profile_id=body.profile_id)
