from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.user import UserProfile
from core.nutrition_calc import NutritionalCalculator
from services import store
from services.db import get_session
from api.v1.schemas import EnergyEstimate, ProfileIn, ProfileOut

router = APIRouter()
_calc = NutritionalCalculator()


# ───────────────────────── helpers ──────────────────────────
def _serialize(profile: UserProfile) -> ProfileOut:
    """Stored profile ➜ response with the derived energy figures."""
    return ProfileOut(
        **profile.model_dump(),
        bmr=round(_calc.bmr(profile), 1),
        tdee=_calc.tdee(profile),
        custom_target=_calc.uses_custom_target(profile, profile.target_calories),
    )


# ───────────────────────── read ─────────────────────────────
@router.get("", response_model=ProfileOut, status_code=status.HTTP_200_OK)
async def get_profile(db: AsyncSession = Depends(get_session)) -> ProfileOut:
    profile = await store.load_profile(db)
    if profile is None:
        raise HTTPException(404, "profile not set")
    return _serialize(profile)


# ───────────────────────── upsert ───────────────────────────
@router.put("", response_model=ProfileOut, status_code=status.HTTP_200_OK)
async def save_profile(
    body: ProfileIn,
    db: AsyncSession = Depends(get_session),
) -> ProfileOut:
    data = body.model_dump(exclude={"target_calories"})
    target = _calc.resolve_target(body, body.target_calories)
    profile = UserProfile(**data, target_calories=target)
    await store.save_profile(db, profile)
    return _serialize(profile)


# ───────────────────────── preview ──────────────────────────
@router.post(
    "/estimate",
    response_model=EnergyEstimate,
    summary="BMR / TDEE for the given body data, without saving",
)
def estimate(body: ProfileIn) -> EnergyEstimate:
    return EnergyEstimate(**_calc.estimate(body, body.target_calories))
