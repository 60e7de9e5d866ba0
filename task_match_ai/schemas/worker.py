"""Candidate worker schema: a marketplace user who may be assigned a task."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CandidateWorker(BaseModel):
    """Worker record validated at the boundary before ranking. Values are never coerced."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    id: str = Field(..., alias="_id", min_length=1, description="Stable opaque worker identifier")
    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Contact email")
    skills: List[str] = Field(default_factory=list, description="Skills in insertion order, case-insensitive")
    completed_tasks: int = Field(default=0, ge=0, alias="completedTasks", description="Prior completed tasks")
    rating: float = Field(default=0.0, ge=0.0, le=5.0, description="Average rating, 0 to 5")
    is_active: bool = Field(default=True, alias="isActive", description="Eligible for assignment")
