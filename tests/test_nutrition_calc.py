# tests/test_nutrition_calc.py
from __future__ import annotations

import math
import pytest

from core.models.user import UserProfile
from core.nutrition_calc import NutritionalCalculator, round_half_up

calc = NutritionalCalculator()

MALE_70KG = UserProfile(
    age=30,
    gender="male",
    weight_kg=70,
    height_cm=170,
    activity_level="sedentary",
)

# ── BMR / TDEE ───────────────────────────────────────────────────────
def test_bmr_mifflin_male():
    expected = 10 * 70 + 6.25 * 170 - 5 * 30 + 5   # 1617.5
    assert math.isclose(calc.bmr(MALE_70KG), expected, rel_tol=1e-9)
    assert calc.bmr(MALE_70KG) == 1617.5


def test_bmr_mifflin_female():
    female = MALE_70KG.model_copy(update={"gender": "female"})
    assert calc.bmr(female) == 1451.5


@pytest.mark.parametrize(
    "level, factor",
    [
        ("sedentary", 1.2),
        ("light", 1.375),
        ("moderate", 1.55),
        ("active", 1.725),
        ("very_active", 1.9),
    ],
)
def test_tdee_is_rounded_bmr_times_factor(level, factor):
    u = MALE_70KG.model_copy(update={"activity_level": level})
    assert calc.tdee(u) == round_half_up(1617.5 * factor)


def test_unknown_activity_level_falls_back():
    assert calc.activity_factor("couch") == 1.2


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(1909.8) == 1910
    assert round_half_up(1909.4) == 1909


# ── target ───────────────────────────────────────────────────────────
def test_target_defaults_to_tdee():
    assert calc.resolve_target(MALE_70KG) == calc.tdee(MALE_70KG)
    assert calc.resolve_target(MALE_70KG, 1800) == 1800


def test_custom_target_detection():
    assert calc.uses_custom_target(MALE_70KG, 1800)
    assert not calc.uses_custom_target(MALE_70KG, calc.tdee(MALE_70KG))


def test_estimate_keys():
    est = calc.estimate(MALE_70KG)
    assert est == {"bmr": 1617.5, "tdee": 1941, "target_calories": 1941}
