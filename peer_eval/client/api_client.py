"""
HTTP client for the peer evaluation API

Thin wrapper over httpx. Every non-2xx response becomes an ApiError carrying
the server's generic message, and transport failures become
ApiError(0, "Network error"). No request is retried.
"""
from typing import Dict, List, Optional

import httpx
from pydantic.alias_generators import to_camel

from peer_eval.errors import ApiError
from peer_eval.models import Evaluation, Peer, Session, Team


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("detail"):
        message = body["detail"]
    else:
        message = response.text or response.reason_phrase
    raise ApiError(response.status_code, str(message))


def parse_session(response: httpx.Response) -> Session:
    _raise_for_status(response)
    return Session.model_validate(response.json())


class PeerEvalClient:
    """Synchronous client used by the admin console and peer view"""

    def __init__(self, base_url: str = "http://localhost:8000", http: httpx.Client = None, timeout: float = 10.0):
        # `http` may be any httpx.Client, e.g. fastapi.testclient.TestClient
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return self.http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            # Server down or timed out: no status code to report
            raise ApiError(0, "Network error") from exc

    def _request(self, method: str, path: str, **kwargs):
        response = self._send(method, path, **kwargs)
        _raise_for_status(response)
        return response.json()

    # ---- auth ----

    def admin_login(self, username: str, password: str) -> Dict:
        return self._request("POST", "/api/admin/login", json={"username": username, "password": password})["user"]

    def peer_login(self, usn: str) -> Peer:
        data = self._request("POST", "/api/peer/login", json={"usn": usn})
        return Peer.model_validate(data["peer"])

    # ---- roster ----

    def upload_peers(self, usns: List[str]) -> Dict:
        return self._request("POST", "/api/admin/upload-peers", json={"peers": usns})

    def upload_teams(self, teams: List[Dict]) -> Dict:
        return self._request("POST", "/api/admin/upload-teams", json={"teams": teams})

    def list_peers(self) -> List[Peer]:
        return [Peer.model_validate(p) for p in self._request("GET", "/api/peers")]

    def list_teams(self) -> List[Team]:
        return [Team.model_validate(t) for t in self._request("GET", "/api/teams")]

    # ---- session ----

    def get_session(self) -> Session:
        return parse_session(self._send("GET", "/api/session"))

    def update_session(self, **fields) -> Session:
        """PATCH /api/session with snake_case field names"""
        body = {to_camel(name): value for name, value in fields.items()}
        return parse_session(self._send("PATCH", "/api/session", json=body))

    # ---- evaluations ----

    def submit_evaluation(self, payload: Dict) -> Evaluation:
        return Evaluation.model_validate(self._request("POST", "/api/evaluations", json=payload))

    def list_evaluations(self, team_name: Optional[str] = None) -> List[Evaluation]:
        params = {"teamName": team_name} if team_name else None
        return [Evaluation.model_validate(e) for e in self._request("GET", "/api/evaluations", params=params)]

    # ---- video SDK ----

    def stream_token(self, user_id: str, user_name: str) -> str:
        return self._request("POST", "/api/stream/token", json={"userId": user_id, "userName": user_name})["token"]
