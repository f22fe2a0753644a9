"""
core/advice.py
────────────────────────────────────────────────────────────────────────
Prompt construction for the meal assessment and parsing of the model's
JSON reply into `MealAnalysis` items.
"""

from __future__ import annotations

import json
import logging
from typing import List

from pydantic import TypeAdapter

from core.models.meal import MealAnalysis
from scripts.helpers import strip_code_fences

_LOG = logging.getLogger(__name__)

_ITEMS = TypeAdapter(List[MealAnalysis])

_PROMPT = """\
You are a registered dietitian specialising in blood lipids (cholesterol and
triglycerides). Analyse the food below (text or image) and answer in JSON.
If several foods are present, return one array element per food.

Risk rating rules
- Prefer "Low". Ordinary home cooking and Japanese-style meals are usually "Low".
- Use "Medium" for oily dishes or sweets that call for some caution.
- Use "High" only for mostly deep-fried, very high-fat or extremely unbalanced meals.
- Do not be overly strict: a balanced everyday meal is "Low".

Output format
Return ONLY the JSON array below. Do not wrap it in markdown (no ```json).
Write the free-text fields in the same language as the food description.

[
  {{
    "name": "food name (specific and short)",
    "risk": "High" | "Medium" | "Low",
    "reason": "why (short; for Low, say what is good)",
    "alternatives": "a better option (for Low, e.g. 'fine as it is')",
    "frequency": "how often is fine (for Low, positive wording)",
    "calories": number,
    "protein": number,
    "fat": number,
    "carbohydrates": number,
    "saturated_fat": number,
    "dietary_fiber": number,
    "sodium": number,
    "calcium": number,
    "iron": number,
    "vitamin_c": number,
    "vitamin_d": number,
    "cholesterol_impact": {{"level": "High" | "Medium" | "Low" | "None", "reason": "short"}},
    "neutral_fat_impact": {{"level": "High" | "Medium" | "Low" | "None", "reason": "short"}},
    "nutrition_tips": [
      {{"nutrient": "name", "status": "rich" | "adequate" | "slightly low" | "slightly high", "advice": "one line"}}
    ],
    "overall_advice": "one or two positive lines about this meal"
  }}
]
Units: sodium, calcium, iron and vitamin_c in mg; vitamin_d in ug; the rest in g or kcal.

Food to analyse
Meal: {meal_type}
Content: {text}
"""


def build_prompt(text: str | None, meal_type: str | None) -> str:
    return _PROMPT.format(
        meal_type=meal_type or "not specified",
        text=(text or "").strip() or "see the attached image",
    )


def parse_analysis(raw: str) -> List[MealAnalysis]:
    """Decode the model reply; a single object is treated as a one-item list."""
    data = json.loads(strip_code_fences(raw))
    if isinstance(data, dict):
        data = [data]
    items = _ITEMS.validate_python(data)
    _LOG.debug("parsed %d analysed item(s)", len(items))
    return items
