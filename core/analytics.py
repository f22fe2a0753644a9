"""
core/analytics.py
────────────────────────────────────────────────────────────────────────
Period nutrition aggregation over the stored meal records.

* totals of every numeric field over a date-filtered subset
* PFC balance: share of protein / fat / carbohydrate in macro calories,
  each checked against a reference band
* daily calories against the user's (or default) target

Records are flattened into a pandas DataFrame once per call; missing
numbers count as 0.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, List

import pandas as pd

from core.models.meal import MealRecord
from core.nutrition_calc import round_half_up

_LOG = logging.getLogger(__name__)

# ──────────────── constants ──────────────────
KCAL_PER_G = {"protein": 4, "fat": 9, "carbs": 4}

# reference bands in percent of macro calories
PFC_RANGES: Dict[str, tuple[float, float]] = {
    "protein": (13, 20),
    "fat": (20, 30),
    "carbs": (50, 65),
}

DEFAULT_TARGET_CALORIES = 2000
DAILY_OVER = 1.2
DAILY_UNDER = 0.7
WEEKLY_OVER_PCT = 110
WEEKLY_UNDER_PCT = 80
WEEK = timedelta(days=7)
MAX_PERIOD_DAYS = 366

NUTRIENTS = [
    "calories", "protein", "fat", "carbohydrates", "saturated_fat",
    "dietary_fiber", "sodium", "calcium", "iron", "vitamin_c", "vitamin_d",
]


# ─────────────────── formulas ───────────────────

def macro_calories(protein_g: float, fat_g: float, carbs_g: float) -> float:
    return (
        protein_g * KCAL_PER_G["protein"]
        + fat_g * KCAL_PER_G["fat"]
        + carbs_g * KCAL_PER_G["carbs"]
    )


def ratio_status(value: float, low: float, high: float) -> str:
    if value < low:
        return "low"
    if value > high:
        return "high"
    return "ok"


def pfc_balance(protein_g: float, fat_g: float, carbs_g: float) -> Dict[str, Any]:
    """Macro-calorie shares in percent; all zero when there are no macros."""
    grams = {"protein": protein_g, "fat": fat_g, "carbs": carbs_g}
    total = macro_calories(protein_g, fat_g, carbs_g)
    out: Dict[str, Any] = {"macro_calories": total}
    for key, g in grams.items():
        ratio = g * KCAL_PER_G[key] / total * 100 if total > 0 else 0.0
        low, high = PFC_RANGES[key]
        out[key] = {
            "grams": g,
            "ratio": ratio,
            "status": ratio_status(ratio, low, high),
            "min": low,
            "max": high,
        }
    return out


def daily_calorie_status(calories: float, target: float) -> str:
    if calories == 0:
        return "none"
    if calories > target * DAILY_OVER:
        return "over"
    if calories < target * DAILY_UNDER:
        return "under"
    return "ok"


def weekly_calorie_status(percentage: float) -> str:
    if percentage > WEEKLY_OVER_PCT:
        return "over"
    if percentage < WEEKLY_UNDER_PCT:
        return "under"
    return "ok"


def resolve_target(target_calories: float | None) -> float:
    # a stored target of 0 means "not set"
    return target_calories or DEFAULT_TARGET_CALORIES


# ─────────────────── DataFrame helpers ───────────────────

def records_frame(records: List[MealRecord], tz: tzinfo = timezone.utc) -> pd.DataFrame:
    """One row per record: id, timestamp (UTC), local day, risk, nutrients."""
    rows = [
        r.model_dump(include={"id", "date", "risk", *NUTRIENTS}) for r in records
    ]
    df = pd.DataFrame(rows, columns=["id", "date", "risk", *NUTRIENTS])
    for col in NUTRIENTS:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0).astype(float)
    df["date"] = pd.to_datetime(df["date"], utc=True)
    df["day"] = df["date"].dt.tz_convert(tz).dt.date
    return df


def totals(df: pd.DataFrame) -> Dict[str, float]:
    return {col: float(df[col].sum()) for col in NUTRIENTS}


def _daily_series(df: pd.DataFrame, days: List[date], target: float) -> List[Dict[str, Any]]:
    per_day = df.groupby("day")["calories"].sum() if not df.empty else pd.Series(dtype=float)
    out = []
    for d in days:
        kcal = float(per_day.get(d, 0.0))
        out.append({"date": d, "calories": kcal, "status": daily_calorie_status(kcal, target)})
    return out


def _aware(now: datetime | None, tz: tzinfo) -> datetime:
    now = now or datetime.now(tz)
    return now if now.tzinfo else now.replace(tzinfo=tz)


# ─────────────────── reports ───────────────────

def weekly_report(
    records: List[MealRecord],
    target_calories: float | None = None,
    now: datetime | None = None,
    tz: tzinfo = timezone.utc,
) -> Dict[str, Any]:
    """
    Last-7-days report.

    The summary window is every record stamped at or after `now - 7 days`;
    the chart series covers the seven local dates ending today.
    """
    now = _aware(now, tz)
    since = now - WEEK
    target = resolve_target(target_calories)

    df = records_frame(records, tz)
    week = df[df["date"] >= pd.Timestamp(since)]
    tot = totals(week)

    weekly_target = target * 7
    pct = tot["calories"] / weekly_target * 100 if weekly_target > 0 else 0.0

    today = now.astimezone(tz).date()
    days = [today - timedelta(days=6 - i) for i in range(7)]

    _LOG.debug("weekly report: %d of %d records in window", len(week), len(df))
    return {
        "start": since,
        "end": now,
        "record_count": int(len(week)),
        "totals": tot,
        "target_calories": target,
        "target_percentage": pct,
        "target_status": weekly_calorie_status(pct),
        "daily_average": round_half_up(tot["calories"] / 7),
        "pfc": pfc_balance(tot["protein"], tot["fat"], tot["carbohydrates"]),
        "daily": _daily_series(df, days, target),
    }


def period_summary(
    records: List[MealRecord],
    start: date,
    end: date,
    target_calories: float | None = None,
    tz: tzinfo = timezone.utc,
) -> Dict[str, Any]:
    """Totals, PFC balance and a per-day series over local dates [start, end]."""
    if end < start:
        raise ValueError("end date is before start date")
    if (end - start).days + 1 > MAX_PERIOD_DAYS:
        raise ValueError(f"period longer than {MAX_PERIOD_DAYS} days")
    target = resolve_target(target_calories)

    df = records_frame(records, tz)
    sub = df[(df["day"] >= start) & (df["day"] <= end)] if not df.empty else df
    tot = totals(sub)
    n_days = (end - start).days + 1
    days = [start + timedelta(days=i) for i in range(n_days)]

    return {
        "start": start,
        "end": end,
        "record_count": int(len(sub)),
        "totals": tot,
        "target_calories": target,
        "daily_average": round_half_up(tot["calories"] / n_days),
        "pfc": pfc_balance(tot["protein"], tot["fat"], tot["carbohydrates"]),
        "daily": _daily_series(sub, days, target),
    }
