# api/v1/analytics.py
from __future__ import annotations
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from core import analytics, history, meal_calendar
from core.models.meal import RiskLevel
from services import store
from services.db import get_session
from api.v1.schemas import CalendarMonth, PeriodSummary, RiskSummary, WeeklyReport

router = APIRouter()


async def _target(db: AsyncSession) -> int:
    profile = await store.load_profile(db)
    if profile and profile.target_calories:
        return profile.target_calories
    return settings.default_target_calories


@router.get("/weekly", response_model=WeeklyReport, summary="Last-7-days report")
async def weekly(db: AsyncSession = Depends(get_session)) -> WeeklyReport:
    records = await store.load_history(db)
    report = analytics.weekly_report(records, await _target(db), tz=settings.tz)
    return WeeklyReport.model_validate(report)


@router.get("/summary", response_model=PeriodSummary, summary="Totals over a date range")
async def summary(
    start: date = Query(..., description="YYYY-MM-DD"),
    end: date = Query(..., description="YYYY-MM-DD"),
    db: AsyncSession = Depends(get_session),
) -> PeriodSummary:
    records = await store.load_history(db)
    try:
        data = analytics.period_summary(records, start, end, await _target(db), tz=settings.tz)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return PeriodSummary.model_validate(data)


@router.get("/calendar", response_model=CalendarMonth, summary="Month grid of daily totals")
async def calendar_month(
    year: int = Query(..., ge=2, le=9998),
    month: int = Query(..., ge=1, le=12),
    db: AsyncSession = Depends(get_session),
) -> CalendarMonth:
    records = await store.load_history(db)
    grid = meal_calendar.month_calendar(
        records, year, month, tz=settings.tz, target_calories=await _target(db)
    )
    return CalendarMonth.model_validate(grid)


@router.get("/risk", response_model=RiskSummary, summary="Risk-label counts and weekly insight")
async def risk(
    label: list[RiskLevel] | None = Query(None, description="restrict counts to these labels"),
    db: AsyncSession = Depends(get_session),
) -> RiskSummary:
    records = await store.load_history(db)
    if label:
        wanted = set(label)
        records = [r for r in records if r.risk in wanted]
    return RiskSummary(
        counts=history.risk_counts(records),
        weekly_high_risk=history.high_risk_insight(records),
    )
