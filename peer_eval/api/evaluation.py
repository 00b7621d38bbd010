"""
Evaluation submission and listing endpoints
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from peer_eval.errors import ValidationFailure
from peer_eval.services.evaluation_log import (
    create_evaluation, get_all_evaluations, get_evaluations_by_team
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/evaluations", tags=["evaluations"])


@router.post("")
async def submit_evaluation(request: dict):
    """
    Peer: Submit a rubric evaluation for the team on stage

    Request:
        {
            "evaluatorUsn": "1RV21CS001",
            "teamName": "Team Alpha",
            "clarity": true,
            "organization": true,
            "engagement": true,
            "feedback": "Great demo"
        }
    """
    try:
        return create_evaluation(request)
    except ValidationFailure as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as e:
        logger.error(f"❌ Failed to submit evaluation {request}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to submit evaluation")


@router.get("")
async def list_evaluations(teamName: Optional[str] = None):
    """All evaluations, or only those for ?teamName="""
    try:
        if teamName:
            return get_evaluations_by_team(teamName)
        return get_all_evaluations()
    except Exception as e:
        logger.error(f"❌ Failed to fetch evaluations: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch evaluations")
