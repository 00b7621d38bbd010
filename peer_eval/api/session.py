"""
Session endpoints polled by peers and driven by the admin
"""
import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from peer_eval.core.session import get_current_session, update_session
from peer_eval.models import SessionUpdate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("")
async def read_session():
    """Current session (created with defaults on first read)"""
    try:
        return get_current_session()
    except Exception as e:
        logger.error(f"❌ Failed to fetch session: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch session")


@router.patch("")
async def patch_session(request: dict):
    """
    Admin: Merge partial fields into the session

    Request (any subset):
        {
            "currentTeam": "Team Alpha",
            "screenShareActive": true,
            "evaluationActive": false,
            "streamCallId": "admin-1700000000000"
        }

    Unknown keys are ignored. The merge is shallow: fields not sent keep
    their current value.
    """
    try:
        changes = SessionUpdate.model_validate(request).changes()
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Invalid session data") from exc

    try:
        return update_session(**changes)
    except Exception as e:
        logger.error(f"❌ Failed to update session with {request}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update session")
