from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date
from typing import Optional

from app.schemas.validators import not_in_future
from app.schemas.growth_schema import GrowthRead
from app.schemas.milestone_schema import MilestoneOut

class BabyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    gender: str = Field(..., min_length=1)
    birth_date: date
    theme_color: str = Field(..., min_length=1)
    avatar_url: Optional[str] = None

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        return not_in_future(v, "birth_date")

class BabyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    theme_color: Optional[str] = Field(None, min_length=1)
    avatar_url: Optional[str] = None

class BabyResponse(BaseModel):
    id: int
    name: str
    gender: str
    birth_date: date
    theme_color: str
    avatar_url: Optional[str]

    model_config = ConfigDict(from_attributes=True)

class AgeResponse(BaseModel):
    main_age: str
    detailed_age: str
    remaining_days: int
    show_remaining_days: bool

class DashboardResponse(BaseModel):
    baby: BabyResponse
    age: AgeResponse
    latest_growth: Optional[GrowthRead] = None
    previous_growth: Optional[GrowthRead] = None
    weight_increased: bool
    next_milestone: Optional[MilestoneOut] = None
    all_milestones_achieved: bool
    milestone_progress: int
