# app/schemas/growth_schema.py

from datetime import date
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.validators import not_in_future

class GrowthCreate(BaseModel):
    baby_id: int
    weight: Decimal = Field(..., gt=0)
    height: Decimal = Field(..., gt=0)
    recorded_at: date

    @field_validator("recorded_at")
    @classmethod
    def validate_recorded_at(cls, v: date) -> date:
        return not_in_future(v, "recorded_at")

class GrowthRead(BaseModel):
    id: int
    baby_id: int
    # decimal strings on the wire, as the mobile client expects
    weight: Decimal
    height: Decimal
    recorded_at: date

    model_config = ConfigDict(from_attributes=True)

class ChartPointOut(BaseModel):
    value: float
    label: str
    date: date

class GrowthChartResponse(BaseModel):
    metric: str
    points: List[ChartPointOut]
    history: List[ChartPointOut]
