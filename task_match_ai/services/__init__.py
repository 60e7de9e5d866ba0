"""Service exports."""

from .assignment_service import AssignmentDecision, CandidateNotFoundError, select_assignee
from .filter_service import SkillBreakdown, filter_active, split_skills
from .record_loader import RecordValidationError, load_candidate, load_candidates, load_task

__all__ = [
    "load_task",
    "load_candidate",
    "load_candidates",
    "RecordValidationError",
    "filter_active",
    "split_skills",
    "SkillBreakdown",
    "select_assignee",
    "AssignmentDecision",
    "CandidateNotFoundError",
]
