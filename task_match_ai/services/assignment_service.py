"""Pick an assignee from a ranked candidate list. Persisting the decision is up to the caller."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from task_match_ai.schemas.ranked import RankedCandidate
from task_match_ai.schemas.task import TaskDescriptor
from task_match_ai.utils.logger import get_logger

logger = get_logger(__name__)


class CandidateNotFoundError(LookupError):
    """Selected worker is not among the ranked (active) candidates."""


@dataclass(frozen=True)
class AssignmentDecision:
    task_id: Optional[str]
    worker_id: str
    compatibility_score: float
    rank: int  # 1-based position in the ranking

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the task assign endpoint."""
        return {"assignedTo": self.worker_id}


def select_assignee(
    task: TaskDescriptor,
    ranked: Sequence[RankedCandidate],
    worker_id: Optional[str] = None,
) -> Optional[AssignmentDecision]:
    """
    Choose who gets the task.
    Without worker_id: the top-ranked candidate, or None if nobody is available.
    With worker_id: that candidate; raises CandidateNotFoundError if it was not ranked
    (unknown or inactive worker).
    """
    if worker_id is None:
        if not ranked:
            logger.info("No active candidates available for task %s", task.id)
            return None
        position, chosen = 1, ranked[0]
    else:
        for position, chosen in enumerate(ranked, start=1):
            if chosen.id == worker_id:
                break
        else:
            logger.warning("Worker %s is not an eligible candidate for task %s", worker_id, task.id)
            raise CandidateNotFoundError(f"Worker {worker_id} is not an eligible candidate for task {task.id}")

    decision = AssignmentDecision(
        task_id=task.id,
        worker_id=chosen.id,
        compatibility_score=chosen.compatibility_score,
        rank=position,
    )
    logger.info(
        "Selected worker %s (rank %d, score %.1f) for task %s",
        decision.worker_id,
        decision.rank,
        decision.compatibility_score,
        decision.task_id,
    )
    return decision
