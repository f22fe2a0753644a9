# api/v1/advice.py
from __future__ import annotations
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from config import settings
from core.advice import build_prompt, parse_analysis
from services import gemini
from api.v1.schemas import AdviceRequest, AdviceResponse, ErrorResponse

router = APIRouter()
_LOG = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key is not configured. Check GEMINI_API_KEY in your .env file."


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )


@router.post(
    "",
    response_model=AdviceResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Assess a described or photographed meal",
)
def advise(body: AdviceRequest):
    """
    Build the dietitian prompt, send it (plus the optional photo) to
    Gemini and return the parsed per-food assessments.

    Every failure is terminal for the request and reported as
    `{"error": ...}` with HTTP 500.
    """
    if not settings.gemini_api_key:
        _LOG.error("GEMINI_API_KEY is missing")
        return _error(MISSING_KEY_MESSAGE)

    try:
        prompt = build_prompt(body.text, body.meal_type)
        image = gemini.decode_image(body.image) if body.image else None
        raw = gemini.generate(prompt, model_name=body.model_name, image=image)
        items = parse_analysis(raw)
    except Exception as exc:
        _LOG.exception("advice request failed")
        return _error(f"Error during AI analysis: {exc}")

    return AdviceResponse(result=items)


@router.get("/models", response_model=list[str], summary="Selectable model names")
def models() -> list[str]:
    return settings.available_models
