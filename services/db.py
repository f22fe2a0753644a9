"""
services/db.py
────────────────────────────────────────────────────────────────────────
* Async SQLAlchemy v2 setup
* One key-value table holding the JSON blobs (history, profile)
* Small DAO helpers used by services/store.py
"""
from __future__ import annotations

from typing import AsyncGenerator
from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncAttrs,
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

from config import settings

# ───────── fixed keys ────────────────────────────────────────────────
HISTORY_KEY = "lipid-ai-history"
PROFILE_KEY = "lipid-ai-user-profile"

# ───────── connection helper ────────────────────────────────────────
_ENGINE: AsyncEngine | None = None


async def engine() -> AsyncEngine:
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = create_async_engine(settings.database_url, pool_pre_ping=True)
    return _ENGINE


async def dispose_engine() -> None:
    global _ENGINE
    if _ENGINE is not None:
        await _ENGINE.dispose()
        _ENGINE = None


# ───────── declarative base ──────────────────────────────────────────
Base = declarative_base(cls=AsyncAttrs)


class KeyValue(Base):
    __tablename__ = "kv_store"

    key:        Mapped[str]      = mapped_column(String(128), primary_key=True)
    value:      Mapped[str]      = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )


async def init_models() -> None:
    eng = await engine()
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ───────── DAO helpers ───────────────────────────────────────────────

async def read_blob(db: AsyncSession, key: str) -> str | None:
    row = await db.get(KeyValue, key)
    return row.value if row else None


async def write_blob(db: AsyncSession, key: str, value: str) -> None:
    row = await db.get(KeyValue, key)
    if row is None:
        db.add(KeyValue(key=key, value=value))
    else:
        row.value = value
    await db.commit()


async def remove_blob(db: AsyncSession, key: str) -> None:
    row = await db.get(KeyValue, key)
    if row is not None:
        await db.delete(row)
        await db.commit()


# ───────── session helper ────────────────────────────────────────────

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    eng = await engine()
    async_session = async_sessionmaker(eng, expire_on_commit=False)
    async with async_session() as session:
        yield session
