"""
Call tokens for the hosted video SDK

The SDK authenticates users with an HS256 JWT carrying {"user_id": ...},
signed with the application's API secret.
"""
import jwt

from peer_eval import state


JWT_ALGORITHM = "HS256"


def create_user_token(user_id: str, secret: str = None) -> str:
    """
    Sign a video SDK user token

    Args:
        user_id: SDK user id (e.g. "peer-1RV21CS001")
        secret: API secret (default: configured stream_api_secret)
    """
    if not user_id:
        raise ValueError("user_id required")
    payload = {"user_id": user_id}
    return jwt.encode(payload, secret or state.SETTINGS.stream_api_secret, algorithm=JWT_ALGORITHM)
