"""
Tests for the shared session store and its endpoints
"""
import pytest

from peer_eval import state
from peer_eval.core.session import get_current_session, update_session


def test_first_read_creates_default_session():
    assert state.CURRENT_SESSION is None
    session = get_current_session()
    assert session.current_team is None
    assert session.screen_share_active is False
    assert session.evaluation_active is False
    assert session.stream_call_id is None
    assert state.CURRENT_SESSION is session


def test_repeated_reads_return_same_record():
    assert get_current_session().id == get_current_session().id


def test_update_merges_partial_fields():
    update_session(current_team="Team Alpha")
    session = update_session(screen_share_active=True, stream_call_id="call-1")
    assert session.current_team == "Team Alpha"
    assert session.screen_share_active is True
    assert session.stream_call_id == "call-1"
    assert session.evaluation_active is False


def test_update_refreshes_timestamp():
    before = get_current_session().updated_at
    after = update_session(current_team="Team Alpha").updated_at
    assert after >= before


def test_update_without_prior_read_creates_session():
    session = update_session(evaluation_active=True)
    assert session.evaluation_active is True
    assert get_current_session().evaluation_active is True


def test_inconsistent_combination_is_accepted():
    """Evaluation may be opened with nobody on stage"""
    session = update_session(evaluation_active=True, current_team=None)
    assert session.evaluation_active is True
    assert session.current_team is None


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        update_session(volume=11)


def test_get_session_endpoint_uses_camel_case(client):
    response = client.get("/api/session")
    assert response.status_code == 200
    data = response.json()
    assert data["currentTeam"] is None
    assert data["screenShareActive"] is False
    assert data["evaluationActive"] is False
    assert data["streamCallId"] is None
    assert "updatedAt" in data


def test_patch_session_endpoint(client):
    response = client.patch("/api/session", json={"screenShareActive": True, "streamCallId": "X"})
    assert response.status_code == 200
    assert response.json()["screenShareActive"] is True
    assert client.get("/api/session").json()["streamCallId"] == "X"


def test_patch_accepts_snake_case(client):
    response = client.patch("/api/session", json={"current_team": "Team Beta"})
    assert response.json()["currentTeam"] == "Team Beta"


def test_patch_null_clears_call_id(client):
    client.patch("/api/session", json={"screenShareActive": True, "streamCallId": "X"})
    data = client.patch("/api/session", json={"screenShareActive": False, "streamCallId": None}).json()
    assert data["screenShareActive"] is False
    assert data["streamCallId"] is None


def test_disjoint_patches_both_apply(client):
    client.patch("/api/session", json={"currentTeam": "Team Alpha"})
    client.patch("/api/session", json={"evaluationActive": True})
    data = client.get("/api/session").json()
    assert data["currentTeam"] == "Team Alpha"
    assert data["evaluationActive"] is True


def test_overlapping_patch_last_writer_wins(client):
    client.patch("/api/session", json={"currentTeam": "Team Alpha"})
    client.patch("/api/session", json={"currentTeam": "Team Beta"})
    assert client.get("/api/session").json()["currentTeam"] == "Team Beta"


def test_patch_with_bad_type_rejected(client):
    response = client.patch("/api/session", json={"evaluationActive": "maybe"})
    assert response.status_code == 400
    assert client.get("/api/session").json()["evaluationActive"] is False
