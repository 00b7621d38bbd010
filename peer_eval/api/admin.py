"""
Admin endpoints for roster and team management
"""
from fastapi import APIRouter, HTTPException
import logging

from peer_eval import state
from peer_eval.errors import ValidationFailure
from peer_eval.services.roster import replace_peers
from peer_eval.services.team_registry import replace_teams


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/upload-peers")
async def upload_peers(request: dict):
    """
    Admin: Replace the eligible peer list

    Request:
        {"peers": ["1RV21CS001", "1RV21CS002", ...]}

    The previous list is discarded only if the whole batch is valid.
    """
    try:
        peers = replace_peers(request.get("peers"))
    except ValidationFailure as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as e:
        logger.error(f"❌ Peer upload failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload peers")

    return {
        "message": f"{len(peers)} peers uploaded successfully",
        "peers": peers
    }


@router.post("/upload-teams")
async def upload_teams(request: dict):
    """
    Admin: Replace the team list

    Request:
        {
            "teams": [
                {"name": "Team Alpha", "members": ["1RV21CS001", "1RV21CS002"]},
                ...
            ]
        }
    """
    try:
        teams = replace_teams(request.get("teams"))
    except ValidationFailure as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as e:
        logger.error(f"❌ Team upload failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload teams")

    return {
        "message": f"{len(teams)} teams uploaded successfully",
        "teams": teams
    }


@router.post("/reset")
async def reset_all():
    """Clear peers, teams, evaluations and the live session"""
    state.clear()
    logger.info("🔄 All in-memory records reset")

    return {
        "success": True,
        "message": "Peers, teams, evaluations and session reset"
    }
