"""
Shared fixtures.

The API tests run against a throw-away SQLite file per test and never
reach Gemini: `services.gemini.generate` is monkeypatched where needed.
"""

import os
from datetime import datetime, timezone

import pytest

# settings are read once at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./.pytest-lipid.db")
os.environ.pop("GEMINI_API_KEY", None)

from fastapi.testclient import TestClient  # noqa: E402

from config import settings  # noqa: E402
from core.models.meal import MealRecord  # noqa: E402

NOW = datetime(2025, 3, 12, 9, 0, tzinfo=timezone.utc)   # a Wednesday


def make_record(rid: str, when: datetime, **kw) -> MealRecord:
    data = dict(
        id=rid,
        date=when,
        input=kw.pop("input", f"food {rid}"),
        result=kw.pop("result", "[Risk] Low"),
        meal_type=kw.pop("meal_type", "Lunch"),
    )
    data.update(kw)
    return MealRecord(**data)


@pytest.fixture
def client(tmp_path, monkeypatch):
    from main import app

    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'lipid.db'}")
    monkeypatch.setattr(settings, "gemini_api_key", None)
    with TestClient(app) as c:
        yield c
