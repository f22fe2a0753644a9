"""
core/history.py
────────────────────────────────────────────────────────────────────────
Pure operations over the meal-record list (newest first).

Nothing here touches storage: callers load the list, apply one of these
functions and write the returned list back.
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Iterable

from core.models.meal import MealAnalysis, MealRecord, MealSlot

_LOG = logging.getLogger(__name__)

RISK_LEVELS = ("High", "Medium", "Low")
INSIGHT_WINDOW = timedelta(days=7)
_NAME_SPLIT = re.compile(r"[、,]")
_NUTRITION_FIELDS = (
    "calories", "protein", "fat", "carbohydrates", "saturated_fat",
    "dietary_fiber", "sodium", "calcium", "iron", "vitamin_c", "vitamin_d",
)


# ─────────────────────────── create ───────────────────────────────── #
def build_record(
    item: MealAnalysis,
    meal_type: MealSlot,
    custom_date: date | None = None,
    now: datetime | None = None,
    tz: tzinfo = timezone.utc,
) -> MealRecord:
    """
    Turn one analysed item into a stored record.

    A back-dated entry is stamped at local noon of `custom_date` so it
    stays on that day whatever the viewer's offset.
    """
    if custom_date is not None:
        stamp = datetime.combine(custom_date, time(12, 0), tzinfo=tz)
    else:
        stamp = now or datetime.now(timezone.utc)

    impact_none = {"level": "None", "reason": ""}
    return MealRecord(
        id=str(uuid.uuid4()),
        date=stamp.astimezone(timezone.utc),
        input=item.name,
        result=item.result_text(),
        meal_type=meal_type,
        risk=item.risk,
        **{f: getattr(item, f) for f in _NUTRITION_FIELDS},
        cholesterol_impact=item.cholesterol_impact or impact_none,
        neutral_fat_impact=item.neutral_fat_impact or impact_none,
    )


def prepend(records: list[MealRecord], record: MealRecord) -> list[MealRecord]:
    return [record, *records]


# ─────────────────────────── lookup / update ──────────────────────── #
def find_record(records: Iterable[MealRecord], record_id: str) -> MealRecord | None:
    return next((r for r in records if r.id == record_id), None)


def merge_record(
    records: list[MealRecord], record_id: str, updates: dict[str, Any]
) -> list[MealRecord]:
    """Shallow-merge `updates` into the matching record; `id` is immutable."""
    updates = {k: v for k, v in updates.items() if k != "id"}
    out = []
    for r in records:
        if r.id == record_id:
            r = MealRecord.model_validate({**r.model_dump(), **updates})
        out.append(r)
    return out


# ─────────────────────────── delete ───────────────────────────────── #
def delete_record(records: list[MealRecord], record_id: str) -> list[MealRecord]:
    return [r for r in records if r.id != record_id]


def delete_records(records: list[MealRecord], record_ids: Iterable[str]) -> list[MealRecord]:
    ids = set(record_ids)
    return [r for r in records if r.id not in ids]


# ─────────────────────────── filters ──────────────────────────────── #
def filter_by_risk(records: Iterable[MealRecord], label: str) -> list[MealRecord]:
    return [r for r in records if r.risk == label]


def filter_by_meal_type(records: Iterable[MealRecord], meal_type: MealSlot) -> list[MealRecord]:
    return [r for r in records if r.meal_type == meal_type]


def _date_strings(d: date) -> tuple[str, str]:
    return f"{d.year}/{d.month}/{d.day}", d.isoformat()


def search(records: Iterable[MealRecord], query: str, tz: tzinfo = timezone.utc) -> list[MealRecord]:
    """Case-insensitive match on food name, result text or local date."""
    q = query.lower()
    out = []
    for r in records:
        local_day = r.date.astimezone(tz).date()
        haystack = (r.input.lower(), r.result.lower(), *_date_strings(local_day))
        if any(q in h for h in haystack):
            out.append(r)
    return out


# ─────────────────────────── risk stats ───────────────────────────── #
def risk_counts(records: Iterable[MealRecord]) -> dict[str, int]:
    counts = {level: 0 for level in RISK_LEVELS}
    total = 0
    for r in records:
        total += 1
        if r.risk in counts:
            counts[r.risk] += 1
    counts["total"] = total
    return counts


def high_risk_insight(
    records: Iterable[MealRecord], now: datetime | None = None, top: int = 3
) -> dict[str, Any] | None:
    """
    Count last week's High-risk records and name the most frequent items.

    The item name is the text before the first comma, so
    "fried chicken, rice" counts as "fried chicken".
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    since = now - INSIGHT_WINDOW
    recent = [r for r in records if r.date >= since and r.risk == "High"]
    if not recent:
        return None

    counts: dict[str, int] = {}
    for r in recent:
        name = _NAME_SPLIT.split(r.input)[0].strip()
        counts[name] = counts.get(name, 0) + 1

    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    _LOG.debug("high-risk insight: %d records, %d distinct items", len(recent), len(counts))
    return {"count": len(recent), "top_items": [name for name, _ in ranked[:top]]}
