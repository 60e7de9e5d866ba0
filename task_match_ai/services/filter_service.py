"""Filter candidates and split skills for display. No UI logic; used by the caller."""

from typing import List, NamedTuple, Optional, Sequence

from task_match_ai.config import OTHER_SKILLS_DISPLAY_LIMIT
from task_match_ai.schemas.ranked import RankedCandidate
from task_match_ai.schemas.worker import CandidateWorker


class SkillBreakdown(NamedTuple):
    """Matching skills, the first few other skills, and how many others were cut off."""

    matching: List[str]
    other: List[str]
    hidden_count: int


def filter_active(candidates: Sequence[CandidateWorker]) -> List[CandidateWorker]:
    """
    Keep only candidates eligible for assignment. Does not mutate the input list.
    Input order is preserved.
    """
    return [c for c in candidates if c.is_active]


def split_skills(ranked: RankedCandidate, limit: Optional[int] = None) -> SkillBreakdown:
    """
    Split a ranked candidate's skills into matching and other skills.
    Other skills keep their original order; only the first `limit` are listed
    (default OTHER_SKILLS_DISPLAY_LIMIT) and the rest are counted in hidden_count.
    """
    if limit is None:
        limit = OTHER_SKILLS_DISPLAY_LIMIT
    matched = set(ranked.matching_skills)
    others = [s for s in ranked.skills if s not in matched]
    return SkillBreakdown(
        matching=list(ranked.matching_skills),
        other=others[:limit],
        hidden_count=max(0, len(others) - limit),
    )
