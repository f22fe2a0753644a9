"""
services/store.py
────────────────────────────────────────────────────────────────────────
Load / save the two JSON blobs the app keeps:

* HISTORY_KEY → list of MealRecord (newest first)
* PROFILE_KEY → UserProfile

A blob that cannot be decoded reads as empty; it is not repaired.
"""
from __future__ import annotations

import logging
from typing import List

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.meal import MealRecord
from core.models.user import UserProfile
from services.db import HISTORY_KEY, PROFILE_KEY, read_blob, remove_blob, write_blob

_LOG = logging.getLogger(__name__)

_HISTORY = TypeAdapter(List[MealRecord])


# ───────────────────────── history ──────────────────────────
async def load_history(db: AsyncSession) -> List[MealRecord]:
    raw = await read_blob(db, HISTORY_KEY)
    if not raw:
        return []
    try:
        return _HISTORY.validate_json(raw)
    except ValidationError as exc:
        _LOG.warning("stored history unreadable, treating as empty: %s", exc)
        return []


async def save_history(db: AsyncSession, records: List[MealRecord]) -> None:
    await write_blob(db, HISTORY_KEY, _HISTORY.dump_json(records).decode())


async def clear_history(db: AsyncSession) -> None:
    await remove_blob(db, HISTORY_KEY)


# ───────────────────────── profile ──────────────────────────
async def load_profile(db: AsyncSession) -> UserProfile | None:
    raw = await read_blob(db, PROFILE_KEY)
    if not raw:
        return None
    try:
        return UserProfile.model_validate_json(raw)
    except ValidationError as exc:
        _LOG.warning("stored profile unreadable, ignoring: %s", exc)
        return None


async def save_profile(db: AsyncSession, profile: UserProfile) -> None:
    await write_blob(db, PROFILE_KEY, profile.model_dump_json())
