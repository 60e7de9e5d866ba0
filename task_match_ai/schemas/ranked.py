"""Ranked candidate: a worker annotated with its compatibility breakdown."""

from typing import List

from pydantic import Field, computed_field

from task_match_ai.schemas.worker import CandidateWorker


class RankedCandidate(CandidateWorker):
    """Output of the ranker. Worker fields are carried over unchanged."""

    matching_skills: List[str] = Field(
        default_factory=list,
        alias="matchingSkills",
        description="Candidate skills that match at least one required skill, in skill order",
    )
    skill_score: float = Field(default=0.0, alias="skillScore", description="Skill fit, 0-100 for typical input")
    experience_score: float = Field(default=0.0, alias="experienceScore", description="Track record score")
    compatibility_score: float = Field(default=0.0, alias="compatibilityScore", description="Weighted composite used for ordering")

    @computed_field(alias="skillMatches")
    @property
    def skill_matches(self) -> int:
        return len(self.matching_skills)
