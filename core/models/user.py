from enum import Enum

from pydantic import BaseModel, Field


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"


class UserProfile(BaseModel):
    age: int = Field(30, ge=1, le=130)
    gender: Gender = Gender.male
    height_cm: float = Field(170, gt=0)
    weight_kg: float = Field(65, gt=0)
    activity_level: ActivityLevel = ActivityLevel.light
    target_calories: int = Field(2000, ge=0)
