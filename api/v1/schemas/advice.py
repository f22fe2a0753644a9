from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from core.models.meal import MealAnalysis


class AdviceRequest(BaseModel):
    text: str | None = None
    model_name: str | None = Field(None, alias="modelName")
    meal_type: str | None = Field(None, alias="mealType")
    image: str | None = Field(None, description="data URL or bare base64")

    model_config = ConfigDict(populate_by_name=True)


class AdviceResponse(BaseModel):
    result: list[MealAnalysis]


class ErrorResponse(BaseModel):
    error: str
