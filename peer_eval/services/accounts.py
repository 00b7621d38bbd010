"""Admin accounts and login checks"""
import hmac
import logging
from typing import Optional

from peer_eval import state
from peer_eval.errors import AuthenticationFailure
from peer_eval.models import Peer, Settings, User
from peer_eval.services.roster import get_peer_by_usn


logger = logging.getLogger(__name__)


def create_user(username: str, password: str, role: str = "admin") -> User:
    with state.LOCK:
        user = User(id=state.next_id("user"), username=username, password=password, role=role)
        state.USERS[username] = user
    return user


def get_user_by_username(username: str) -> Optional[User]:
    return state.USERS.get(username)


def seed_admin(settings: Settings) -> User:
    """Create the configured admin account unless it already exists"""
    user = get_user_by_username(settings.admin_username)
    if user is None:
        user = create_user(settings.admin_username, settings.admin_password)
        logger.info(f"👤 Seeded admin account '{user.username}'")
    return user


def authenticate_admin(username: str, password: str) -> User:
    """
    Check admin credentials

    Raises:
        AuthenticationFailure: Unknown user, wrong password or non-admin role
    """
    if not isinstance(username, str) or not isinstance(password, str):
        raise AuthenticationFailure("Invalid credentials")

    user = get_user_by_username(username)
    if (
        user is None
        or not hmac.compare_digest(user.password.encode(), password.encode())
        or user.role != "admin"
    ):
        raise AuthenticationFailure("Invalid credentials")
    return user


def authenticate_peer(usn: str) -> Peer:
    """
    Look up a peer by USN (case-insensitive)

    Raises:
        AuthenticationFailure: USN not in the peer directory
    """
    peer = get_peer_by_usn(usn)
    if peer is None:
        raise AuthenticationFailure("USN not found in eligible peers list")
    return peer
