"""
services/store.py decoding, with the DAO helpers stubbed out.
"""
import asyncio

from conftest import NOW, make_record
from core.models.user import UserProfile
from services import store


def _blobs(monkeypatch, initial=None):
    blobs = dict(initial or {})

    async def read_blob(db, key):
        return blobs.get(key)

    async def write_blob(db, key, value):
        blobs[key] = value

    async def remove_blob(db, key):
        blobs.pop(key, None)

    monkeypatch.setattr(store, "read_blob", read_blob)
    monkeypatch.setattr(store, "write_blob", write_blob)
    monkeypatch.setattr(store, "remove_blob", remove_blob)
    return blobs


def test_history_roundtrip(monkeypatch):
    blobs = _blobs(monkeypatch)
    recs = [make_record("a", NOW, calories=100), make_record("b", NOW, risk="Low")]
    asyncio.run(store.save_history(None, recs))
    assert "lipid-ai-history" in blobs
    assert asyncio.run(store.load_history(None)) == recs

    asyncio.run(store.clear_history(None))
    assert asyncio.run(store.load_history(None)) == []


def test_corrupt_history_reads_empty(monkeypatch):
    _blobs(monkeypatch, {"lipid-ai-history": "{not json"})
    assert asyncio.run(store.load_history(None)) == []


def test_profile_missing_and_corrupt(monkeypatch):
    blobs = _blobs(monkeypatch)
    assert asyncio.run(store.load_profile(None)) is None

    blobs["lipid-ai-user-profile"] = '{"age": "old"}'
    assert asyncio.run(store.load_profile(None)) is None

    asyncio.run(store.save_profile(None, UserProfile(target_calories=1800)))
    assert asyncio.run(store.load_profile(None)).target_calories == 1800
