"""Team registration utilities"""
import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from peer_eval import state
from peer_eval.errors import ValidationFailure
from peer_eval.models import Team, TeamIn
from peer_eval.services.roster import normalize_usn


logger = logging.getLogger(__name__)


def _validate_team(row, idx: int) -> TeamIn:
    try:
        team = TeamIn.model_validate(row)
    except ValidationError as exc:
        raise ValidationFailure(f"Invalid team data format at row {idx + 1}") from exc

    clean_name = team.name.strip()
    if not clean_name:
        raise ValidationFailure(f"Team at row {idx + 1}: name required")
    if not team.members:
        raise ValidationFailure(f"Team '{clean_name}': at least one member required")
    if any(not member.strip() for member in team.members):
        raise ValidationFailure(f"Team '{clean_name}': empty member identifier")

    return TeamIn(name=clean_name, members=[normalize_usn(m) for m in team.members])


def replace_teams(teams: List[dict]) -> List[Team]:
    """
    Replace the whole team registry

    Every row must carry a non-empty name and a non-empty list of non-empty
    member USNs. One bad row rejects the batch and the old registry stays.
    A repeated team name keeps the later row.

    Raises:
        ValidationFailure: If the batch is not a list or any row is invalid
    """
    if not isinstance(teams, list):
        raise ValidationFailure("Invalid teams data")

    rows = [_validate_team(row, idx) for idx, row in enumerate(teams)]

    with state.LOCK:
        staged: Dict[str, Team] = {}
        for row in rows:
            staged[row.name] = Team(id=state.next_id("team"), name=row.name, members=row.members)
        state.TEAMS.clear()
        state.TEAMS.update(staged)

    logger.info(f"✅ Team registry replaced with {len(staged)} teams")
    return list(staged.values())


def get_all_teams() -> List[Team]:
    return list(state.TEAMS.values())


def get_team_by_name(name: str) -> Optional[Team]:
    return state.TEAMS.get(name)
