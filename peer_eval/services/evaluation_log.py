"""
Evaluation log - append-only record of submitted rubric responses
"""
import logging
from typing import List

from pydantic import ValidationError

from peer_eval import state
from peer_eval.errors import ValidationFailure
from peer_eval.models import Evaluation, EvaluationIn


logger = logging.getLogger(__name__)


def create_evaluation(payload: dict) -> Evaluation:
    """
    Append an evaluation to the log

    Only the payload shape is checked here; rubric completeness is enforced
    by the peer-side form. Repeated submissions for the same
    (evaluator, team) pair are all kept.

    Args:
        payload: evaluatorUsn, teamName, clarity, organization, engagement,
            feedback (camelCase or snake_case keys)

    Returns:
        The stored Evaluation

    Raises:
        ValidationFailure: If required fields are missing or mistyped
    """
    try:
        data = EvaluationIn.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailure("Invalid evaluation data format") from exc

    with state.LOCK:
        evaluation = Evaluation(id=state.next_id("evaluation"), **data.model_dump())
        state.EVALUATIONS.append(evaluation)

    logger.info(
        f"📝 Evaluation #{evaluation.id} | {evaluation.evaluator_usn} -> {evaluation.team_name}"
    )
    return evaluation


def get_evaluations_by_team(team_name: str) -> List[Evaluation]:
    return [e for e in state.EVALUATIONS if e.team_name == team_name]


def get_all_evaluations() -> List[Evaluation]:
    return list(state.EVALUATIONS)
