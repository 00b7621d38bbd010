"""
Data models for the peer evaluation server
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, snake_case accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(CamelModel):
    """Admin account"""
    id: int
    username: str
    password: str
    role: str = "admin"

    def public(self) -> dict:
        # Never echo the password back to clients
        return {"id": self.id, "username": self.username, "role": self.role}


class Peer(CamelModel):
    """Eligible participant, keyed by upper-cased USN"""
    id: int
    usn: str
    created_at: datetime = Field(default_factory=utcnow)


class TeamIn(CamelModel):
    """One row of a team upload"""
    name: str
    members: List[str]


class Team(CamelModel):
    id: int
    name: str
    members: List[str]  # ordered USNs
    created_at: datetime = Field(default_factory=utcnow)


class EvaluationIn(CamelModel):
    """Evaluation payload as submitted by a peer"""
    evaluator_usn: str
    team_name: str
    clarity: bool = False
    organization: bool = False
    engagement: bool = False
    feedback: Optional[str] = None


class Evaluation(EvaluationIn):
    id: int
    created_at: datetime = Field(default_factory=utcnow)


class Session(CamelModel):
    """Singleton record describing the live presentation/evaluation phase"""
    id: int = 1
    current_team: Optional[str] = None
    screen_share_active: bool = False
    evaluation_active: bool = False
    stream_call_id: Optional[str] = None
    updated_at: datetime = Field(default_factory=utcnow)


class SessionUpdate(CamelModel):
    """Partial session fields accepted by PATCH /api/session"""
    current_team: Optional[str] = None
    screen_share_active: Optional[bool] = None
    evaluation_active: Optional[bool] = None
    stream_call_id: Optional[str] = None

    def changes(self) -> dict:
        """
        Fields explicitly sent by the caller

        An explicit null clears currentTeam / streamCallId; the boolean flags
        cannot be nulled, so a null flag is ignored.
        """
        data = self.model_dump(exclude_unset=True)
        for flag in ("screen_share_active", "evaluation_active"):
            if flag in data and data[flag] is None:
                del data[flag]
        return data


class Settings(BaseModel):
    """Server configuration (config/settings.yaml)"""
    admin_username: str = "admin"
    admin_password: str = "admin123"
    stream_api_key: str = "demo_key"
    stream_api_secret: str = "demo_secret"
    poll_interval: float = 2.0  # seconds between peer session polls
