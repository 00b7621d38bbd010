"""
Health check and system status endpoints
"""
from fastapi import APIRouter

from peer_eval import __version__, state
from peer_eval.core.session import peek_session


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    session = peek_session()
    return {
        "status": "ok",
        "message": "Peer Evaluation Server",
        "version": __version__,
        "total_peers": len(state.PEERS),
        "total_teams": len(state.TEAMS),
        "total_evaluations": len(state.EVALUATIONS),
        "current_team": session.current_team if session else None,
        "poll_interval": state.SETTINGS.poll_interval,
    }
