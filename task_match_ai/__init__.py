"""Task Match AI: rank marketplace workers by compatibility with a task."""

from task_match_ai.ranking import rank
from task_match_ai.schemas import CandidateWorker, RankedCandidate, TaskDescriptor

__all__ = ["rank", "TaskDescriptor", "CandidateWorker", "RankedCandidate"]
