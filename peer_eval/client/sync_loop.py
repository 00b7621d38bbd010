"""
Peer-side session sync loop

A peer polls GET /api/session every ``interval`` seconds and turns session
changes into UI actions:

- screen share active with a call id the peer has not joined -> JOIN_CALL
- evaluation active and not yet prompted for this activation -> OPEN_EVALUATION

Actions are edge-triggered: SessionWatcher remembers what it already acted
on, so a flag that stays true across many polls fires once. The evaluation
prompt re-arms when the admin closes the evaluation window.
"""
import asyncio
import inspect
import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional

import httpx
from pydantic import BaseModel

from peer_eval.client.api_client import parse_session
from peer_eval.models import Session


logger = logging.getLogger(__name__)

POLL_INTERVAL = 2.0  # seconds


class ActionKind(str, Enum):
    JOIN_CALL = "join_call"
    OPEN_EVALUATION = "open_evaluation"


class SyncAction(BaseModel):
    kind: ActionKind
    call_id: Optional[str] = None
    team_name: Optional[str] = None


class SessionWatcher:
    """Edge detector over successive session snapshots (one per peer)"""

    def __init__(self):
        self.joined_call_id: Optional[str] = None
        self.evaluation_prompted = False

    def observe(self, session: Session) -> List[SyncAction]:
        actions = []

        if (
            session.screen_share_active
            and session.stream_call_id
            and session.stream_call_id != self.joined_call_id
        ):
            self.joined_call_id = session.stream_call_id
            actions.append(SyncAction(kind=ActionKind.JOIN_CALL, call_id=session.stream_call_id))

        if session.evaluation_active:
            if not self.evaluation_prompted:
                self.evaluation_prompted = True
                actions.append(SyncAction(kind=ActionKind.OPEN_EVALUATION, team_name=session.current_team))
        else:
            # Re-arm for the next evaluation window
            self.evaluation_prompted = False

        return actions


ActionHandler = Callable[[SyncAction], Optional[Awaitable[None]]]


class SessionSyncLoop:
    """
    Poll the session on a single asyncio task and dispatch watcher actions

    Args:
        fetch_session: Coroutine function returning the current Session
        on_action: Called for every action; may be sync or async
        interval: Seconds between polls
        watcher: Edge state (a fresh SessionWatcher by default)

    Fetch and handler errors are logged and polling continues at the same
    cadence. ``stop()`` cancels the task.
    """

    def __init__(
        self,
        fetch_session: Callable[[], Awaitable[Session]],
        on_action: ActionHandler,
        interval: float = POLL_INTERVAL,
        watcher: SessionWatcher = None,
    ):
        self.fetch_session = fetch_session
        self.on_action = on_action
        self.interval = interval
        self.watcher = watcher or SessionWatcher()
        self.polls = 0
        self._task: Optional[asyncio.Task] = None

    @classmethod
    def over_http(cls, http: httpx.AsyncClient, on_action: ActionHandler, **kwargs) -> "SessionSyncLoop":
        """Build a loop that polls GET /api/session through ``http``"""

        async def fetch() -> Session:
            return parse_session(await http.get("/api/session"))

        return cls(fetch, on_action, **kwargs)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def poll_once(self) -> List[SyncAction]:
        self.polls += 1
        try:
            session = await self.fetch_session()
        except Exception as e:
            logger.warning(f"⚠️ Session poll #{self.polls} failed: {e}")
            return []

        actions = self.watcher.observe(session)
        for action in actions:
            try:
                result = self.on_action(action)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"❌ Handler failed for {action.kind.value}: {e}", exc_info=True)
        return actions

    async def run(self) -> None:
        while True:
            await self.poll_once()
            await asyncio.sleep(self.interval)

    def start(self) -> asyncio.Task:
        if not self.running:
            self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
