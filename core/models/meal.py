from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, field_validator

RiskLevel = Literal["High", "Medium", "Low"]
ImpactLevel = Literal["High", "Medium", "Low", "None"]


class MealSlot(str, Enum):
    breakfast = "Breakfast"
    lunch = "Lunch"
    dinner = "Dinner"
    snack = "Snack"


class Impact(BaseModel):
    level: ImpactLevel = "None"
    reason: str = ""


class NutritionTip(BaseModel):
    nutrient: str
    status: str          # rich / adequate / slightly low / slightly high
    advice: str = ""


class MealAnalysis(BaseModel):
    """One food item as assessed by the model."""

    name: str
    risk: RiskLevel
    reason: str = ""
    alternatives: str = ""
    frequency: str = ""
    calories: float = 0
    protein: float = 0
    fat: float = 0
    carbohydrates: float = 0
    saturated_fat: float = 0
    dietary_fiber: float = 0
    sodium: float | None = None       # mg
    calcium: float | None = None      # mg
    iron: float | None = None         # mg
    vitamin_c: float | None = None    # mg
    vitamin_d: float | None = None    # ug
    cholesterol_impact: Impact | None = None
    neutral_fat_impact: Impact | None = None
    nutrition_tips: list[NutritionTip] = []
    overall_advice: str | None = None

    @field_validator(
        "calories", "protein", "fat", "carbohydrates", "saturated_fat", "dietary_fiber",
        mode="before",
    )
    @classmethod
    def _null_is_zero(cls, v):
        return 0 if v is None else v

    def result_text(self) -> str:
        return (
            f"[Risk] {self.risk}\n"
            f"[Reason] {self.reason}\n"
            f"[Alternatives] {self.alternatives}\n"
            f"[Frequency] {self.frequency}"
        )


class MealRecord(BaseModel):
    id: str
    date: datetime
    input: str
    result: str
    meal_type: MealSlot
    risk: RiskLevel | None = None
    # nutrition
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
    # lipid impact
    cholesterol_impact: Impact | None = None
    neutral_fat_impact: Impact | None = None

    @field_validator("date")
    @classmethod
    def _aware(cls, v: datetime) -> datetime:
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)
