# app/schemas/milestone_schema.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.data.milestone_catalog import get_milestone
from app.schemas.validators import not_in_future

class MilestoneOut(BaseModel):
    id: int
    title: str
    description: str
    expected_month: int
    icon: str
    category: str

    @classmethod
    def from_catalog(cls, milestone) -> "MilestoneOut":
        return cls(
            id=milestone.id,
            title=milestone.title,
            description=milestone.description,
            expected_month=milestone.expected_month,
            icon=milestone.icon.value,
            category=milestone.category.value,
        )

class AchievedMilestoneCreate(BaseModel):
    milestone_id: int
    achieved_at: date
    photo_url: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator("milestone_id")
    @classmethod
    def validate_milestone_id(cls, v: int) -> int:
        if get_milestone(v) is None:
            raise ValueError("Unknown milestone.")
        return v

    @field_validator("achieved_at")
    @classmethod
    def validate_achieved_at(cls, v: date) -> date:
        return not_in_future(v, "achieved_at")

class AchievedMilestoneRead(BaseModel):
    id: int
    baby_id: int
    milestone_id: int
    achieved_at: date
    photo_url: Optional[str]
    notes: Optional[str]

    model_config = ConfigDict(from_attributes=True)

class MilestoneStatusOut(BaseModel):
    milestone: MilestoneOut
    status: str
    achieved: Optional[AchievedMilestoneRead] = None

class MilestoneProgressResponse(BaseModel):
    statuses: List[MilestoneStatusOut]
    next_milestone: Optional[MilestoneOut]
    all_complete: bool
    achieved_count: int
    total: int
    progress: int

    @classmethod
    def from_progress(cls, result) -> "MilestoneProgressResponse":
        next_milestone = result.next_milestone
        return cls(
            statuses=[
                MilestoneStatusOut(
                    milestone=MilestoneOut.from_catalog(item.milestone),
                    status=item.status,
                    achieved=(
                        AchievedMilestoneRead.model_validate(item.achieved)
                        if item.achieved is not None else None
                    ),
                )
                for item in result.statuses
            ],
            next_milestone=MilestoneOut.from_catalog(next_milestone) if next_milestone else None,
            all_complete=result.all_complete,
            achieved_count=result.achieved_count,
            total=result.total,
            progress=result.progress,
        )
