"""
Pytest configuration: fresh in-memory state for every test
"""
import pytest
from fastapi.testclient import TestClient

from peer_eval import state
from peer_eval.main import app
from peer_eval.models import Settings
from peer_eval.services.accounts import seed_admin


@pytest.fixture(autouse=True)
def fresh_state():
    """Empty directory/registry/log/session plus the default admin account"""
    state.clear(users=True)
    state.SETTINGS = Settings(stream_api_secret="test-secret")
    seed_admin(state.SETTINGS)
    yield
    state.clear(users=True)


@pytest.fixture
def client():
    """FastAPI test client (lifespan not run; state comes from fresh_state)"""
    return TestClient(app)


@pytest.fixture
def roster(client):
    """Three peers and two teams uploaded through the API"""
    client.post("/api/admin/upload-peers", json={"peers": ["1rv21cs001", "1RV21CS002", "1RV21CS003"]})
    client.post("/api/admin/upload-teams", json={"teams": [
        {"name": "Team Alpha", "members": ["1RV21CS001", "1RV21CS002"]},
        {"name": "Team Beta", "members": ["1RV21CS003"]},
    ]})
