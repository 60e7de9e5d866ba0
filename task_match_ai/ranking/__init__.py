"""Ranking: task/worker compatibility scoring."""

from task_match_ai.ranking.compatibility_ranker import (
    compatibility_score,
    experience_score,
    matching_skills,
    rank,
    score_candidate,
    skill_score,
    skills_match,
)

__all__ = [
    "rank",
    "score_candidate",
    "skills_match",
    "matching_skills",
    "skill_score",
    "experience_score",
    "compatibility_score",
]
