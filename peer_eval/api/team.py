"""Team and peer listing endpoints"""
import logging

from fastapi import APIRouter, HTTPException

from peer_eval.services.roster import get_all_peers
from peer_eval.services.team_registry import get_all_teams


logger = logging.getLogger(__name__)

router = APIRouter(tags=["teams"])


@router.get("/teams")
async def list_teams():
    try:
        return get_all_teams()
    except Exception as e:
        logger.error(f"❌ Failed to fetch teams: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch teams")


@router.get("/peers")
async def list_peers():
    try:
        return get_all_peers()
    except Exception as e:
        logger.error(f"❌ Failed to fetch peers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch peers")
