from __future__ import annotations

from pydantic import BaseModel, Field

from core.models.user import ActivityLevel, Gender


class ProfileIn(BaseModel):
    age: int = Field(30, ge=1, le=130)
    gender: Gender = Gender.male
    height_cm: float = Field(170, gt=0)
    weight_kg: float = Field(65, gt=0)
    activity_level: ActivityLevel = ActivityLevel.light
    target_calories: int | None = Field(
        None, ge=0, description="custom daily target; omit to use TDEE"
    )


class EnergyEstimate(BaseModel):
    bmr: float
    tdee: int
    target_calories: int


class ProfileOut(BaseModel):
    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    target_calories: int
    bmr: float
    tdee: int
    custom_target: bool
