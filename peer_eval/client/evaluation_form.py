"""
Peer-side evaluation form

The form is the only gate on rubric completeness: every flag must be ticked
and feedback written before anything is sent. A failed submission keeps the
entered values so the peer can retry by hand; a successful one clears them.
"""
import logging
from typing import Dict, List

from peer_eval.client.api_client import PeerEvalClient
from peer_eval.errors import ApiError, ValidationFailure
from peer_eval.models import Evaluation


logger = logging.getLogger(__name__)

RUBRIC_FLAGS = ("clarity", "organization", "engagement")


class EvaluationForm:

    def __init__(self, evaluator_usn: str, team_name: str):
        self.evaluator_usn = evaluator_usn
        self.team_name = team_name
        self.reset()

    def reset(self) -> None:
        self.clarity = False
        self.organization = False
        self.engagement = False
        self.feedback = ""
        self.submitted = False
        self.last_error = None

    def missing(self) -> List[str]:
        """Names of the fields still blocking submission"""
        missing = [flag for flag in RUBRIC_FLAGS if not getattr(self, flag)]
        if not self.feedback.strip():
            missing.append("feedback")
        return missing

    def validate(self) -> None:
        missing = self.missing()
        if missing:
            raise ValidationFailure(f"Please complete: {', '.join(missing)}")

    def payload(self) -> Dict:
        return {
            "evaluatorUsn": self.evaluator_usn,
            "teamName": self.team_name,
            "clarity": self.clarity,
            "organization": self.organization,
            "engagement": self.engagement,
            "feedback": self.feedback,
        }

    def submit(self, client: PeerEvalClient) -> Evaluation:
        """
        Validate and send the evaluation

        Raises:
            ValidationFailure: Form incomplete (nothing is sent)
            ApiError: Server rejected or failed the request (form kept)
        """
        self.validate()
        try:
            evaluation = client.submit_evaluation(self.payload())
        except ApiError as exc:
            self.last_error = exc.message
            logger.warning(f"⚠️ Submission failed for {self.team_name}: {exc}")
            raise

        self.reset()
        self.submitted = True
        logger.info(f"✅ Evaluation for {self.team_name} submitted by {self.evaluator_usn}")
        return evaluation
