"""Task/worker compatibility ranking: loose skill overlap blended with track record."""

from __future__ import annotations

from typing import List, Sequence

from task_match_ai.schemas.ranked import RankedCandidate
from task_match_ai.schemas.task import TaskDescriptor
from task_match_ai.schemas.worker import CandidateWorker
from task_match_ai.services.filter_service import filter_active
from task_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Skill score when the task states no requirements
NEUTRAL_SKILL_SCORE = 50.0

# Experience: 2 points per completed task capped at 50, plus 10 points per rating star
COMPLETED_TASK_POINTS = 2
COMPLETED_TASKS_CAP = 50
RATING_POINTS = 10

# Weights for final score
WEIGHT_SKILL = 0.6
WEIGHT_EXPERIENCE = 0.4


def skills_match(candidate_skill: str, required_skill: str) -> bool:
    """Case-insensitive containment in either direction ("java" ~ "javascript")."""
    s = candidate_skill.lower()
    r = required_skill.lower()
    return r in s or s in r


def matching_skills(skills: Sequence[str], required_skills: Sequence[str]) -> List[str]:
    """Candidate skills matching at least one required skill, in candidate order.

    A skill that matches several required skills is still listed once.
    """
    return [s for s in skills if any(skills_match(s, r) for r in required_skills)]


def skill_score(match_count: int, required_count: int) -> float:
    """Matches per required skill as a percentage; neutral 50 when nothing is required.

    The denominator is the number of required skills, so the score can pass 100
    when several candidate skills hit the same requirement.
    """
    if required_count == 0:
        return NEUTRAL_SKILL_SCORE
    return (match_count / required_count) * 100


def experience_score(completed_tasks: int, rating: float) -> float:
    return min(completed_tasks * COMPLETED_TASK_POINTS, COMPLETED_TASKS_CAP) + rating * RATING_POINTS


def compatibility_score(skill: float, experience: float) -> float:
    return skill * WEIGHT_SKILL + experience * WEIGHT_EXPERIENCE


def score_candidate(task: TaskDescriptor, candidate: CandidateWorker) -> RankedCandidate:
    """Annotate one candidate with its score breakdown. Does not look at is_active."""
    matched = matching_skills(candidate.skills, task.required_skills)
    skill = skill_score(len(matched), len(task.required_skills))
    experience = experience_score(candidate.completed_tasks, candidate.rating)
    # Candidate was validated on the way in; carry its fields over as-is.
    return RankedCandidate.model_construct(
        **candidate.model_dump(include=set(CandidateWorker.model_fields)),
        matching_skills=matched,
        skill_score=skill,
        experience_score=experience,
        compatibility_score=compatibility_score(skill, experience),
    )


def rank(task: TaskDescriptor, candidates: Sequence[CandidateWorker]) -> List[RankedCandidate]:
    """
    Rank active candidates for a task, best match first.
    Score = 0.6 * skill_score + 0.4 * experience_score. Inactive candidates are dropped,
    not sorted last. Equal scores keep their input order (stable sort).
    Pure function: inputs are not mutated. Callers should pass snapshots, not collections
    other threads are still writing to.
    """
    active = filter_active(candidates)
    scored = [score_candidate(task, c) for c in active]
    # sorted() is stable and reverse=True keeps equal items in input order
    ranked = sorted(scored, key=lambda c: c.compatibility_score, reverse=True)
    logger.debug(
        "Ranked %d candidates for task %s (%d inactive skipped)",
        len(ranked),
        task.id or task.title or "<unnamed>",
        len(candidates) - len(active),
    )
    return ranked
