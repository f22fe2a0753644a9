"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Daily energy estimation for the calorie target:

1. BMR  (Mifflin–St Jeor)
2. TDEE (activity-factor multiplier, rounded to whole kcal)
3. Target calories (custom value or TDEE)
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

Logger = logging.getLogger(__name__)

ACTIVITY_FACTORS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}
DEFAULT_ACTIVITY_FACTOR = 1.2


class Anthro(Protocol):
    age: int
    gender: object
    height_cm: float
    weight_kg: float
    activity_level: object


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(x + 0.5))


def _value(v: object) -> str:
    # enums from core.models.user carry the raw string in .value
    return str(getattr(v, "value", v)).lower()


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Source-of-truth for BMR / TDEE and the daily calorie target."""

    # --------------- BMR / TDEE -------------------------------------
    def bmr(self, u: Anthro) -> float:
        base = 10 * u.weight_kg + 6.25 * u.height_cm - 5 * u.age
        return base + (5 if _value(u.gender) == "male" else -161)

    def activity_factor(self, level: object) -> float:
        factor = ACTIVITY_FACTORS.get(_value(level))
        if factor is None:
            Logger.debug("unknown activity level %r, using %.2f", level, DEFAULT_ACTIVITY_FACTOR)
            return DEFAULT_ACTIVITY_FACTOR
        return factor

    def tdee(self, u: Anthro) -> int:
        return round_half_up(self.bmr(u) * self.activity_factor(u.activity_level))

    # --------------- Target -----------------------------------------
    def resolve_target(self, u: Anthro, custom: int | None = None) -> int:
        return custom if custom is not None else self.tdee(u)

    def uses_custom_target(self, u: Anthro, target_calories: int) -> bool:
        return target_calories != self.tdee(u)

    def estimate(self, u: Anthro, custom: int | None = None) -> dict[str, float]:
        return {
            "bmr": round(self.bmr(u), 1),
            "tdee": self.tdee(u),
            "target_calories": self.resolve_target(u, custom),
        }
