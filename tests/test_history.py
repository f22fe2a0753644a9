from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from core import history
from core.models.meal import Impact, MealAnalysis, MealSlot
from conftest import NOW, make_record

ITEM = MealAnalysis(
    name="Karaage",
    risk="High",
    reason="deep fried",
    alternatives="grilled chicken",
    frequency="once a week",
    calories="480",          # models sometimes send numbers as strings
    protein=25,
    fat=30,
    carbohydrates=20,
    saturated_fat=8,
    dietary_fiber=1,
    cholesterol_impact=Impact(level="Medium", reason="skin"),
)

RECORDS = [
    make_record("r1", NOW, risk="High", input="fried chicken, rice"),
    make_record("r2", NOW - timedelta(hours=5), risk="Low", input="miso soup"),
    make_record("r3", NOW - timedelta(days=1), risk="Medium", input="ramen"),
    make_record("r4", NOW - timedelta(days=2), risk="High", input="fried chicken"),
    make_record("r5", NOW - timedelta(days=9), risk="High", input="tonkatsu"),
]


# ── create ───────────────────────────────────────────────────────────
def test_build_record_copies_item():
    rec = history.build_record(ITEM, MealSlot.dinner, now=NOW)
    assert rec.input == "Karaage"
    assert rec.date == NOW
    assert rec.calories == 480
    assert rec.risk == "High"
    assert rec.meal_type is MealSlot.dinner
    assert rec.result.startswith("[Risk] High\n[Reason] deep fried")
    assert rec.neutral_fat_impact.level == "None"
    assert rec.cholesterol_impact.level == "Medium"


def test_build_record_custom_date_is_local_noon():
    tokyo = ZoneInfo("Asia/Tokyo")
    rec = history.build_record(ITEM, MealSlot.lunch, custom_date=date(2025, 1, 5), tz=tokyo)
    assert rec.date.tzinfo is not None
    assert rec.date.astimezone(tokyo) == datetime(2025, 1, 5, 12, 0, tzinfo=tokyo)
    assert rec.date.utcoffset() == timedelta(0)


def test_ids_are_unique():
    a = history.build_record(ITEM, MealSlot.lunch, now=NOW)
    b = history.build_record(ITEM, MealSlot.lunch, now=NOW)
    assert a.id != b.id


def test_prepend_newest_first():
    rec = history.build_record(ITEM, MealSlot.lunch, now=NOW)
    out = history.prepend(RECORDS, rec)
    assert out[0] is rec
    assert out[1:] == RECORDS


# ── delete ───────────────────────────────────────────────────────────
def test_delete_removes_exactly_one_and_keeps_order():
    out = history.delete_record(RECORDS, "r3")
    assert [r.id for r in out] == ["r1", "r2", "r4", "r5"]
    assert len(RECORDS) == 5


def test_delete_unknown_id_is_noop():
    assert history.delete_record(RECORDS, "nope") == RECORDS


def test_bulk_delete():
    out = history.delete_records(RECORDS, ["r1", "r5", "missing"])
    assert [r.id for r in out] == ["r2", "r3", "r4"]


# ── merge ────────────────────────────────────────────────────────────
def test_merge_updates_one_record_only():
    out = history.merge_record(RECORDS, "r2", {"risk": "Medium", "id": "hijack"})
    assert out[1].id == "r2"
    assert out[1].risk == "Medium"
    assert out[1].input == "miso soup"
    assert out[0] == RECORDS[0]


# ── filters ──────────────────────────────────────────────────────────
def test_filter_by_risk_exact_match():
    assert [r.id for r in history.filter_by_risk(RECORDS, "High")] == ["r1", "r4", "r5"]
    assert history.filter_by_risk(RECORDS, "high") == []


def test_filter_by_meal_type():
    recs = [make_record("b", NOW, meal_type="Breakfast"), *RECORDS]
    assert [r.id for r in history.filter_by_meal_type(recs, MealSlot.breakfast)] == ["b"]


def test_search_food_and_date():
    assert [r.id for r in history.search(RECORDS, "FRIED")] == ["r1", "r4"]
    assert [r.id for r in history.search(RECORDS, "2025/3/11")] == ["r3"]
    assert [r.id for r in history.search(RECORDS, "2025-03-10")] == ["r4"]


def test_search_uses_local_day():
    late = make_record("late", datetime(2025, 3, 11, 20, 0, tzinfo=timezone.utc))
    tokyo = ZoneInfo("Asia/Tokyo")
    assert history.search([late], "2025/3/12", tokyo) == [late]
    assert history.search([late], "2025/3/12") == []


# ── risk stats ───────────────────────────────────────────────────────
def test_risk_counts():
    assert history.risk_counts(RECORDS) == {"High": 3, "Medium": 1, "Low": 1, "total": 5}


def test_high_risk_insight_last_week():
    insight = history.high_risk_insight(RECORDS, now=NOW)
    assert insight == {"count": 2, "top_items": ["fried chicken"]}


def test_high_risk_insight_none():
    assert history.high_risk_insight(RECORDS[1:3], now=NOW) is None


def test_high_risk_insight_ranking_ties_keep_first_seen():
    recs = [
        make_record("1", NOW, risk="High", input="pizza"),
        make_record("2", NOW, risk="High", input="donut"),
        make_record("3", NOW, risk="High", input="donut、coffee"),
        make_record("4", NOW, risk="High", input="fries"),
        make_record("5", NOW, risk="High", input="burger"),
    ]
    assert history.high_risk_insight(recs, now=NOW)["top_items"] == ["donut", "pizza", "fries"]
