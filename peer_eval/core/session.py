"""
Live session state for the presentation/evaluation phase

A single Session record is shared by the admin (writer) and every peer
(readers polling GET /api/session). Updates are shallow merges guarded by
state.LOCK; the last writer wins per call.
"""
import logging
from typing import Optional

from peer_eval import state
from peer_eval.models import Session, utcnow


logger = logging.getLogger(__name__)

_SESSION_FIELDS = ("current_team", "screen_share_active", "evaluation_active", "stream_call_id")


def _create_session(**fields) -> Session:
    session = Session(id=state.next_id("session"), **fields)
    state.CURRENT_SESSION = session
    return session


def get_current_session() -> Session:
    """Return the session, creating a default one on first read"""
    with state.LOCK:
        if state.CURRENT_SESSION is None:
            return _create_session()
        return state.CURRENT_SESSION


def peek_session() -> Optional[Session]:
    """Return the session without creating it"""
    return state.CURRENT_SESSION


def update_session(**fields) -> Session:
    """
    Merge partial fields into the session

    Args:
        **fields: Any subset of current_team, screen_share_active,
            evaluation_active, stream_call_id. No cross-field validation is
            performed (e.g. evaluation_active without a current team is kept).

    Returns:
        The full updated Session

    Raises:
        ValueError: If an unknown field name is passed
    """
    unknown = set(fields) - set(_SESSION_FIELDS)
    if unknown:
        raise ValueError(f"Unknown session fields: {sorted(unknown)}")

    with state.LOCK:
        if state.CURRENT_SESSION is None:
            session = _create_session(**fields)
        else:
            session = state.CURRENT_SESSION.model_copy(update={**fields, "updated_at": utcnow()})
            state.CURRENT_SESSION = session

    logger.info(f"🔄 Session updated: {fields}")
    return session

