"""
Global application state
Shared in-memory resources accessible across all modules (lost on restart)
"""
import threading
from typing import Dict, List, Optional

from peer_eval.models import Evaluation, Peer, Session, Settings, Team, User

# Loaded at startup from config/settings.yaml
SETTINGS: Settings = Settings()

# Admin accounts: username -> User
USERS: Dict[str, User] = {}

# Peer directory: upper-cased USN -> Peer
PEERS: Dict[str, Peer] = {}

# Team registry: team name -> Team
TEAMS: Dict[str, Team] = {}

# Append-only evaluation log
EVALUATIONS: List[Evaluation] = []

# The singleton session, created lazily on first read
CURRENT_SESSION: Optional[Session] = None

# Guards every read-modify-write of the containers above
LOCK = threading.Lock()

# Id counters: name -> next id
_COUNTERS: Dict[str, int] = {}


def next_id(kind: str) -> int:
    """Return the next serial id for a record kind (caller holds LOCK)"""
    value = _COUNTERS.get(kind, 1)
    _COUNTERS[kind] = value + 1
    return value


def clear(users: bool = False) -> None:
    """Drop all records; admin accounts survive unless users=True"""
    global CURRENT_SESSION
    with LOCK:
        PEERS.clear()
        TEAMS.clear()
        EVALUATIONS.clear()
        CURRENT_SESSION = None
        for kind in ("peer", "team", "evaluation", "session"):
            _COUNTERS.pop(kind, None)
        if users:
            USERS.clear()
            _COUNTERS.pop("user", None)
