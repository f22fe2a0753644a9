"""
Centralised settings loader.

Values come from the environment or a local `.env` file
(pydantic-settings); unknown variables are ignored.
"""

from __future__ import annotations
from datetime import tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ────────────────────────────────────────────────
    env_name: str = "local"
    database_url: str = "sqlite+aiosqlite:///./lipid_ai.db"
    log_level: str = "INFO"

    # ─── Gemini ──────────────────────────────────────────────────────
    gemini_api_key: str | None = None
    default_model: str = "gemini-2.5-flash"
    available_models: list[str] = [
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
        "gemini-2.5-flash",
        "gemini-2.5-flash-lite",
        "gemini-2.5-pro",
        "gemini-3-pro",
    ]

    # ─── analytics ───────────────────────────────────────────────────
    timezone: str = "UTC"               # local-day bucketing
    default_target_calories: int = 2000

    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.timezone)


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
