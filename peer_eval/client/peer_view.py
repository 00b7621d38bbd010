"""
Peer view - what a logged-in peer's screen does between login and logout
"""
import logging
from typing import Callable, Optional

import httpx

from peer_eval.client.api_client import PeerEvalClient
from peer_eval.client.evaluation_form import EvaluationForm
from peer_eval.client.sync_loop import POLL_INTERVAL, ActionKind, SessionSyncLoop, SyncAction
from peer_eval.models import Peer


logger = logging.getLogger(__name__)


class PeerView:
    """
    Owns a peer's sync loop and reacts to its actions

    Joining the video call is delegated to ``join_call(call_id, token)`` (the
    hosted SDK), with the user token fetched at login;
    opening the evaluation builds an EvaluationForm for the team on stage.
    """

    def __init__(
        self,
        client: PeerEvalClient,
        http: httpx.AsyncClient,
        join_call: Callable[[str, str], None] = None,
        interval: float = POLL_INTERVAL,
    ):
        self.client = client
        self.http = http
        self.join_call = join_call
        self.interval = interval
        self.peer: Optional[Peer] = None
        self.call_id: Optional[str] = None
        self.stream_token: Optional[str] = None
        self.form: Optional[EvaluationForm] = None
        self.loop: Optional[SessionSyncLoop] = None

    def login(self, usn: str) -> Peer:
        self.peer = self.client.peer_login(usn)
        self.stream_token = self.client.stream_token(self.sdk_user_id, self.peer.usn)
        return self.peer

    @property
    def sdk_user_id(self) -> str:
        return f"peer-{self.peer.usn}"

    def handle(self, action: SyncAction) -> None:
        if action.kind == ActionKind.JOIN_CALL:
            self.call_id = action.call_id
            logger.info(f"📺 {self.peer.usn} joining call {action.call_id}")
            if self.join_call:
                self.join_call(action.call_id, self.stream_token)
        elif action.kind == ActionKind.OPEN_EVALUATION:
            self.form = EvaluationForm(self.peer.usn, action.team_name or "")
            logger.info(f"📋 {self.peer.usn} prompted to evaluate {action.team_name}")

    def start(self) -> SessionSyncLoop:
        """Start polling (call from inside a running event loop)"""
        if self.peer is None:
            raise RuntimeError("login() first")
        self.loop = SessionSyncLoop.over_http(self.http, self.handle, interval=self.interval)
        self.loop.start()
        return self.loop

    async def logout(self) -> None:
        if self.loop is not None:
            await self.loop.stop()
        logger.info(f"👋 {self.peer.usn if self.peer else 'peer'} logged out")
        self.peer = None
        self.form = None
        self.call_id = None
        self.stream_token = None
        self.loop = None
