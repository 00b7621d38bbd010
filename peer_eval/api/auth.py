"""
Login endpoints for the admin and for peers
"""
import logging

from fastapi import APIRouter, HTTPException

from peer_eval.errors import AuthenticationFailure
from peer_eval.services.accounts import authenticate_admin, authenticate_peer


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/admin/login")
async def admin_login(payload: dict):
    """
    Admin: Log in with username/password

    Request:
        {"username": "admin", "password": "..."}
    """
    try:
        user = authenticate_admin(payload.get("username"), payload.get("password"))
    except AuthenticationFailure as exc:
        logger.info(f"🔒 Admin login rejected for '{payload.get('username')}'")
        raise HTTPException(status_code=401, detail=str(exc))
    except Exception as e:
        logger.error(f"❌ Admin login failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Login failed")

    return {"user": user.public()}


@router.post("/peer/login")
async def peer_login(payload: dict):
    """
    Peer: Log in with a USN from the uploaded roster

    Request:
        {"usn": "1rv21cs001"}  # case-insensitive
    """
    usn = payload.get("usn")
    if not isinstance(usn, str) or not usn.strip():
        raise HTTPException(status_code=400, detail="usn is required")

    try:
        peer = authenticate_peer(usn)
    except AuthenticationFailure as exc:
        raise HTTPException(status_code=401, detail=str(exc))
    except Exception as e:
        logger.error(f"❌ Peer login failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Login failed")

    logger.info(f"👋 Peer {peer.usn} logged in")
    return {"peer": peer}
