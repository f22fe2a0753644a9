from __future__ import annotations
import datetime as dt

from pydantic import BaseModel, Field, field_validator

from core.models.meal import Impact, MealAnalysis, MealSlot, RiskLevel


class RecordCreate(BaseModel):
    item: MealAnalysis
    meal_type: MealSlot = MealSlot.lunch
    date: dt.date | None = Field(None, description="YYYY-MM-DD; stamped at local noon")


class RecordUpdate(BaseModel):
    """Partial update – only the fields sent are merged."""
    date: dt.datetime | None = None
    input: str | None = None
    result: str | None = None
    meal_type: MealSlot | None = None
    risk: RiskLevel | None = None
    calories: float | None = None
    protein: float | None = None
    fat: float | None = None
    carbohydrates: float | None = None
    saturated_fat: float | None = None
    dietary_fiber: float | None = None
    sodium: float | None = None
    calcium: float | None = None
    iron: float | None = None
    vitamin_c: float | None = None
    vitamin_d: float | None = None
    cholesterol_impact: Impact | None = None
    neutral_fat_impact: Impact | None = None

    # nutrition fields may be cleared; these must stay set on a stored record
    @field_validator("date", "input", "result", "meal_type", mode="before")
    @classmethod
    def _required_not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class BulkDeleteIn(BaseModel):
    ids: list[str]


class BulkDeleteOut(BaseModel):
    deleted: int
