# services/gemini.py
import base64
import binascii
import functools
import logging
from dataclasses import dataclass

from google import genai
from google.genai import types

from config import settings

_LOG = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME = "image/jpeg"


class MissingCredentialError(RuntimeError):
    """GEMINI_API_KEY is not configured."""


# ───────────── Client ─────────────
@functools.lru_cache(maxsize=1)
def _client_for(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def client() -> genai.Client:
    if not settings.gemini_api_key:
        raise MissingCredentialError("GEMINI_API_KEY not set in environment")
    return _client_for(settings.gemini_api_key)


# ───────────── Image payload ─────────────
@dataclass(frozen=True)
class InlineImage:
    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME


def decode_image(value: str) -> InlineImage:
    """
    Accept either a data URL (``data:image/png;base64,....``) or bare
    base64 and return the raw bytes with their mime type.
    """
    mime = DEFAULT_IMAGE_MIME
    payload = value
    if value.startswith("data:"):
        header, _, payload = value.partition(",")
        declared = header[len("data:"):].split(";")[0]
        if declared:
            mime = declared
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64 image: {exc}") from exc
    return InlineImage(data=data, mime_type=mime)


# ───────────── Generation (sync) ─────────────
def generate(
    prompt: str,
    model_name: str | None = None,
    image: InlineImage | None = None,
) -> str:
    """Run one generate_content call (text, optionally with an image) and return its text."""
    contents: list = [prompt]
    if image is not None:
        contents.append(types.Part.from_bytes(data=image.data, mime_type=image.mime_type))
    model = model_name or settings.default_model
    gem = client()
    try:
        resp = gem.models.generate_content(model=model, contents=contents)
    except Exception as e:
        _LOG.error("Gemini generation failed (model=%s): %s", model, e)
        raise
    return resp.text or ""


# ───────────── Model listing ─────────────
def list_models() -> list[dict[str, str]]:
    """Models that accept generateContent, as {name, display_name}."""
    out = []
    for m in client().models.list():
        actions = m.supported_actions or []
        if "generateContent" not in actions:
            continue
        out.append({
            "name": (m.name or "").removeprefix("models/"),
            "display_name": m.display_name or "",
        })
    return out
