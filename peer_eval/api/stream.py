"""
Video SDK token endpoint
"""
import logging

from fastapi import APIRouter, HTTPException

from peer_eval.services.stream_tokens import create_user_token


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stream", tags=["stream"])


@router.post("/token")
async def issue_token(request: dict):
    """
    Issue a user token for the hosted video SDK

    Request:
        {"userId": "peer-1RV21CS001", "userName": "1RV21CS001"}
    """
    user_id = request.get("userId")
    user_name = request.get("userName")
    if not user_id or not user_name:
        raise HTTPException(status_code=400, detail="userId and userName are required")

    try:
        token = create_user_token(user_id)
    except Exception as e:
        logger.error(f"❌ Failed to generate token for {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate token")

    return {"token": token}
