"""
core/meal_calendar.py
────────────────────────────────────────────────────────────────────────
Group meal records by local day and lay them out as a month grid
(weeks start on Sunday; padding days are None).
"""

from __future__ import annotations

import calendar as _cal
from collections import defaultdict
from datetime import date, timezone, tzinfo
from typing import Any, Dict, List

from core.analytics import daily_calorie_status, resolve_target
from core.history import risk_counts
from core.models.meal import MealRecord


def group_by_day(records: List[MealRecord], tz: tzinfo = timezone.utc) -> Dict[date, List[MealRecord]]:
    """Local date -> records of that day, keeping the incoming (newest-first) order."""
    days: Dict[date, List[MealRecord]] = defaultdict(list)
    for r in records:
        days[r.date.astimezone(tz).date()].append(r)
    return dict(days)


def _cell(day: date, recs: List[MealRecord], target: float) -> Dict[str, Any]:
    kcal = sum(r.calories or 0.0 for r in recs)
    counts = risk_counts(recs)
    return {
        "date": day,
        "record_count": counts.pop("total"),
        "calories": kcal,
        "risk_counts": counts,
        "status": daily_calorie_status(kcal, target),
    }


def month_calendar(
    records: List[MealRecord],
    year: int,
    month: int,
    tz: tzinfo = timezone.utc,
    target_calories: float | None = None,
) -> Dict[str, Any]:
    target = resolve_target(target_calories)
    by_day = group_by_day(records, tz)

    weeks: List[List[Dict[str, Any] | None]] = []
    for week in _cal.Calendar(firstweekday=_cal.SUNDAY).monthdatescalendar(year, month):
        weeks.append([
            _cell(d, by_day.get(d, []), target) if d.month == month else None
            for d in week
        ])

    in_month = [r for d, recs in by_day.items() if (d.year, d.month) == (year, month) for r in recs]
    return {
        "year": year,
        "month": month,
        "target_calories": target,
        "record_count": len(in_month),
        "weeks": weeks,
    }
