"""Boundary validation: raw marketplace records -> schema objects.

Records arrive in the backend's document shape (camelCase keys, `_id`,
task skills nested under `taskData`). Malformed records are rejected here
so that the ranker only ever sees well-typed data.
"""

from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from task_match_ai.schemas.task import TaskDescriptor
from task_match_ai.schemas.worker import CandidateWorker
from task_match_ai.utils.logger import get_logger

logger = get_logger(__name__)


class RecordValidationError(ValueError):
    """A task or worker record failed validation. `index` is its position in the batch, if any."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


def _required_skills(record: Mapping[str, Any]) -> Any:
    task_data = record.get("taskData") or {}
    if isinstance(task_data, Mapping) and task_data.get("requiredSkills") is not None:
        return task_data["requiredSkills"]
    return record.get("requiredSkills") or []


def load_task(record: Mapping[str, Any]) -> TaskDescriptor:
    """Build a TaskDescriptor. Required skills come from taskData.requiredSkills, else top-level."""
    data = {k: v for k, v in record.items() if k != "taskData"}
    data["requiredSkills"] = _required_skills(record)
    try:
        return TaskDescriptor.model_validate(data)
    except ValidationError as e:
        logger.error("Invalid task record %s: %s", record.get("_id"), e)
        raise RecordValidationError(f"Invalid task record: {e}") from e


def load_candidate(record: Mapping[str, Any], index: Optional[int] = None) -> CandidateWorker:
    """Validate one worker record; raises RecordValidationError instead of coercing bad values."""
    try:
        return CandidateWorker.model_validate(record)
    except ValidationError as e:
        where = f" at index {index}" if index is not None else ""
        logger.error("Invalid worker record%s (%s): %s", where, record.get("_id"), e)
        raise RecordValidationError(f"Invalid worker record{where}: {e}", index=index) from e


def load_candidates(records: Iterable[Mapping[str, Any]]) -> List[CandidateWorker]:
    """Validate a batch of worker records in order. Fails fast on the first bad record."""
    return [load_candidate(r, index=i) for i, r in enumerate(records)]
