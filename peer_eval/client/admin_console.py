"""
Admin console - the admin's side of a presentation round

Each phase change is a PATCH of the shared session; peers only see it on
their next poll.
"""
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional, Union

from peer_eval.client.api_client import PeerEvalClient
from peer_eval.client.csv_import import parse_peers_csv, parse_teams_csv, read_csv_file
from peer_eval.errors import NotFound
from peer_eval.models import Evaluation, Session, Team


logger = logging.getLogger(__name__)


class AdminConsole:
    """Drives uploads and the stage -> screen share -> evaluation cycle"""

    def __init__(self, client: PeerEvalClient, username: str = "admin"):
        self.client = client
        self.username = username
        self.user: Optional[Dict] = None
        self.call_id: Optional[str] = None
        self.stream_token: Optional[str] = None

    @property
    def sdk_user_id(self) -> str:
        return f"admin-{self.user['id']}"

    def login(self, password: str) -> Dict:
        self.user = self.client.admin_login(self.username, password)
        self.stream_token = self.client.stream_token(self.sdk_user_id, self.username)
        logger.info(f"🔑 Admin '{self.username}' logged in")
        return self.user

    # ==================== UPLOADS ====================

    def upload_peers_csv(self, text: str) -> Dict:
        result = self.client.upload_peers(parse_peers_csv(text))
        logger.info(result["message"])
        return result

    def upload_teams_csv(self, text: str) -> Dict:
        result = self.client.upload_teams(parse_teams_csv(text))
        logger.info(result["message"])
        return result

    def upload_peers_file(self, path: Union[str, Path]) -> Dict:
        return self.upload_peers_csv(read_csv_file(path))

    def upload_teams_file(self, path: Union[str, Path]) -> Dict:
        return self.upload_teams_csv(read_csv_file(path))

    # ==================== PHASES ====================

    def bring_to_stage(self, team_name: str) -> Session:
        """Put a team on stage and close any open evaluation window"""
        teams: List[Team] = self.client.list_teams()
        if not any(t.name == team_name for t in teams):
            raise NotFound(f"Team '{team_name}' not found")
        if self.call_id is None:
            self.call_id = self.new_call_id()
        logger.info(f"🎤 {team_name} is now presenting")
        return self.client.update_session(current_team=team_name, evaluation_active=False)

    def new_call_id(self) -> str:
        return f"admin-{self.user['id'] if self.user else self.username}-{int(time.time() * 1000)}"

    def start_screen_share(self, call_id: Optional[str] = None) -> Session:
        """Publish the call id so peers join it"""
        self.call_id = call_id or self.call_id or self.new_call_id()
        logger.info(f"🖥️ Screen sharing started on call {self.call_id}")
        return self.client.update_session(screen_share_active=True, stream_call_id=self.call_id)

    def stop_screen_share(self) -> Session:
        logger.info("🖥️ Screen sharing stopped")
        return self.client.update_session(screen_share_active=False, stream_call_id=None)

    def start_evaluation(self) -> Session:
        logger.info("📋 Evaluation started")
        return self.client.update_session(evaluation_active=True)

    def end_evaluation(self) -> Session:
        logger.info("📋 Evaluation closed")
        return self.client.update_session(evaluation_active=False)

    def results(self, team_name: Optional[str] = None) -> List[Evaluation]:
        return self.client.list_evaluations(team_name)
