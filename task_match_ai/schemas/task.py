"""Task descriptor schema as supplied by the marketplace backend."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskDescriptor(BaseModel):
    """Task to be assigned. Only required_skills takes part in scoring; it is kept exactly as given."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    id: Optional[str] = Field(default=None, alias="_id", description="Task identifier")
    title: Optional[str] = Field(default=None, description="Task title")
    category: Optional[str] = Field(default=None, description="Task category (e.g. data_labeling)")
    hourly_rate: Optional[float] = Field(default=None, alias="hourlyRate", description="Pay per hour")
    estimated_hours: Optional[float] = Field(default=None, alias="estimatedHours", description="Estimated effort in hours")
    required_skills: List[str] = Field(
        default_factory=list,
        alias="requiredSkills",
        description="Case-insensitive skill tags the task needs; may be empty",
    )
