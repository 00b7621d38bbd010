"""
Tests for the peer-side session sync loop
"""
import asyncio

import httpx
import jwt
from fastapi.testclient import TestClient

from peer_eval.client.api_client import PeerEvalClient
from peer_eval.client.peer_view import PeerView
from peer_eval.client.sync_loop import ActionKind, SessionSyncLoop, SessionWatcher
from peer_eval.core.session import update_session
from peer_eval.main import app
from peer_eval.models import Session


def _kinds(actions):
    return [a.kind for a in actions]


def test_idle_session_triggers_nothing():
    watcher = SessionWatcher()
    assert watcher.observe(Session()) == []


def test_evaluation_prompt_fires_once_per_activation():
    watcher = SessionWatcher()
    open_session = Session(current_team="Team Alpha", evaluation_active=True)

    first = watcher.observe(open_session)
    assert _kinds(first) == [ActionKind.OPEN_EVALUATION]
    assert first[0].team_name == "Team Alpha"
    for _ in range(5):
        assert watcher.observe(open_session) == []


def test_evaluation_prompt_rearms_after_window_closes():
    watcher = SessionWatcher()
    watcher.observe(Session(current_team="Team Alpha", evaluation_active=True))
    watcher.observe(Session(current_team="Team Beta", evaluation_active=False))
    again = watcher.observe(Session(current_team="Team Beta", evaluation_active=True))
    assert _kinds(again) == [ActionKind.OPEN_EVALUATION]
    assert again[0].team_name == "Team Beta"


def test_join_call_once():
    watcher = SessionWatcher()
    sharing = Session(screen_share_active=True, stream_call_id="X")
    actions = watcher.observe(sharing)
    assert _kinds(actions) == [ActionKind.JOIN_CALL]
    assert actions[0].call_id == "X"
    assert watcher.observe(sharing) == []


def test_already_joined_peer_does_not_rejoin_same_call():
    watcher = SessionWatcher()
    watcher.joined_call_id = "X"
    assert watcher.observe(Session(screen_share_active=True, stream_call_id="X")) == []


def test_screen_share_without_call_id_is_ignored():
    watcher = SessionWatcher()
    assert watcher.observe(Session(screen_share_active=True)) == []


def test_new_call_id_is_joined():
    watcher = SessionWatcher()
    watcher.observe(Session(screen_share_active=True, stream_call_id="X"))
    watcher.observe(Session(screen_share_active=False))
    actions = watcher.observe(Session(screen_share_active=True, stream_call_id="Y"))
    assert [a.call_id for a in actions] == ["Y"]


def test_loop_keeps_polling_after_fetch_failure():
    calls = []
    seen = []

    async def fetch():
        calls.append(1)
        if len(calls) == 1:
            raise httpx.ConnectError("server down")
        return Session(evaluation_active=True)

    async def scenario():
        loop = SessionSyncLoop(fetch, seen.append, interval=0)
        await loop.poll_once()
        await loop.poll_once()
        await loop.poll_once()
        return loop

    loop = asyncio.run(scenario())
    assert loop.polls == 3
    assert _kinds(seen) == [ActionKind.OPEN_EVALUATION]


def test_handler_errors_do_not_stop_dispatch():
    seen = []

    def handler(action):
        seen.append(action.kind)
        raise RuntimeError("ui crashed")

    async def fetch():
        return Session(screen_share_active=True, stream_call_id="X", evaluation_active=True)

    asyncio.run(SessionSyncLoop(fetch, handler, interval=0).poll_once())
    assert seen == [ActionKind.JOIN_CALL, ActionKind.OPEN_EVALUATION]


def test_loop_over_http_prompts_once_and_stops():
    update_session(current_team="Team Alpha", evaluation_active=True)
    seen = []

    async def scenario():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            loop = SessionSyncLoop.over_http(http, seen.append, interval=0.01)
            loop.start()
            while loop.polls < 5:
                await asyncio.sleep(0.01)
            await loop.stop()
            return loop

    loop = asyncio.run(scenario())
    assert loop.running is False
    assert loop.polls >= 5
    assert _kinds(seen) == [ActionKind.OPEN_EVALUATION]


def test_peer_view_follows_admin_phases():
    api = PeerEvalClient(http=TestClient(app))
    api.upload_peers(["1RV21CS001"])
    joined = []
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
    # Long interval: the test drives polls itself after the first automatic one
    view = PeerView(api, http, join_call=lambda call_id, token: joined.append((call_id, token)), interval=60)
    view.login("1rv21cs001")

    async def scenario():
        async with http:
            view.start()
            loop = view.loop

            update_session(current_team="Team Alpha", screen_share_active=True, stream_call_id="call-7")
            await loop.poll_once()
            update_session(screen_share_active=False, stream_call_id=None, evaluation_active=True)
            await loop.poll_once()
            form = view.form

            await view.logout()
            return loop, form, view

    loop, form, view = asyncio.run(scenario())
    assert [call_id for call_id, _ in joined] == ["call-7"]
    token = joined[0][1]
    assert jwt.decode(token, "test-secret", algorithms=["HS256"]) == {"user_id": "peer-1RV21CS001"}
    assert view.stream_token is None
    assert form.team_name == "Team Alpha"
    assert form.evaluator_usn == "1RV21CS001"
    assert loop.running is False
    assert view.peer is None
