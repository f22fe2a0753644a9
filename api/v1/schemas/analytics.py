# api/v1/schemas/analytics.py
from __future__ import annotations
import datetime as dt
from typing import Dict, List, Literal

from pydantic import BaseModel

RatioStatus = Literal["low", "ok", "high"]
CalorieStatus = Literal["none", "under", "ok", "over"]


class MacroShare(BaseModel):
    grams: float
    ratio: float
    status: RatioStatus
    min: float
    max: float


class PfcBalance(BaseModel):
    macro_calories: float
    protein: MacroShare
    fat: MacroShare
    carbs: MacroShare


class DayCalories(BaseModel):
    date: dt.date
    calories: float
    status: CalorieStatus


class NutrientTotals(BaseModel):
    calories: float
    protein: float
    fat: float
    carbohydrates: float
    saturated_fat: float
    dietary_fiber: float
    sodium: float
    calcium: float
    iron: float
    vitamin_c: float
    vitamin_d: float


class WeeklyReport(BaseModel):
    start: dt.datetime
    end: dt.datetime
    record_count: int
    totals: NutrientTotals
    target_calories: float
    target_percentage: float
    target_status: Literal["under", "ok", "over"]
    daily_average: int
    pfc: PfcBalance
    daily: List[DayCalories]


class PeriodSummary(BaseModel):
    start: dt.date
    end: dt.date
    record_count: int
    totals: NutrientTotals
    target_calories: float
    daily_average: int
    pfc: PfcBalance
    daily: List[DayCalories]


class CalendarDay(BaseModel):
    date: dt.date
    record_count: int
    calories: float
    risk_counts: Dict[str, int]
    status: CalorieStatus


class CalendarMonth(BaseModel):
    year: int
    month: int
    target_calories: float
    record_count: int
    weeks: List[List[CalendarDay | None]]


class HighRiskInsight(BaseModel):
    count: int
    top_items: List[str]


class RiskSummary(BaseModel):
    counts: Dict[str, int]
    weekly_high_risk: HighRiskInsight | None
