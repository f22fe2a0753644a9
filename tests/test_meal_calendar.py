from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from core.meal_calendar import group_by_day, month_calendar
from conftest import make_record

UTC = timezone.utc

RECORDS = [
    make_record("a", datetime(2025, 3, 12, 19, 0, tzinfo=UTC), calories=800, risk="High"),
    make_record("b", datetime(2025, 3, 12, 7, 0, tzinfo=UTC), calories=400, risk="Low"),
    make_record("c", datetime(2025, 3, 1, 12, 0, tzinfo=UTC), calories=3000, risk="Medium"),
    make_record("d", datetime(2025, 2, 28, 12, 0, tzinfo=UTC), calories=500),
]


def test_group_by_day_keeps_order():
    days = group_by_day(RECORDS)
    assert [r.id for r in days[date(2025, 3, 12)]] == ["a", "b"]
    assert set(days) == {date(2025, 3, 12), date(2025, 3, 1), date(2025, 2, 28)}


def test_group_by_day_local_timezone():
    days = group_by_day(RECORDS, ZoneInfo("Asia/Tokyo"))
    # 19:00 UTC is already the next morning in Tokyo
    assert [r.id for r in days[date(2025, 3, 13)]] == ["a"]
    assert [r.id for r in days[date(2025, 3, 12)]] == ["b"]


def test_month_grid_shape():
    cal = month_calendar(RECORDS, 2025, 3, target_calories=2000)
    weeks = cal["weeks"]
    assert all(len(w) == 7 for w in weeks)
    # 1 March 2025 is a Saturday: six padding days precede it
    assert weeks[0][:6] == [None] * 6
    assert weeks[0][6]["date"] == date(2025, 3, 1)
    assert cal["record_count"] == 3


def test_month_grid_cells():
    cal = month_calendar(RECORDS, 2025, 3, target_calories=2000)
    cells = {c["date"]: c for w in cal["weeks"] for c in w if c}
    mar12 = cells[date(2025, 3, 12)]
    assert mar12["record_count"] == 2
    assert mar12["calories"] == 1200
    assert mar12["risk_counts"] == {"High": 1, "Medium": 0, "Low": 1}
    assert mar12["status"] == "under"
    assert cells[date(2025, 3, 1)]["status"] == "over"
    assert cells[date(2025, 3, 2)]["status"] == "none"
