"""
scripts/list_models.py
────────────────────────────────────────────────────────────────────────
Check the configured Gemini key and print the models it can call:

    python -m scripts.list_models
    python -m scripts.list_models --json
"""
from __future__ import annotations

import json
import sys
from argparse import ArgumentParser

from dotenv import load_dotenv
load_dotenv()

from config import settings
from services import gemini


def main(argv: list[str] | None = None) -> int:
    ap = ArgumentParser(description="List Gemini models that support generateContent")
    ap.add_argument("--json", action="store_true", help="print raw JSON")
    args = ap.parse_args(argv)

    if not settings.gemini_api_key:
        print("GEMINI_API_KEY not found (environment or .env)", file=sys.stderr)
        return 1
    print(f"API key found (length: {len(settings.gemini_api_key)})")

    try:
        models = gemini.list_models()
    except Exception as exc:
        print(f"API error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(models, indent=2))
        return 0
    if not models:
        print("No models returned.")
        return 0

    print("\nAvailable models:")
    for m in models:
        print(f"- {m['name']} ({m['display_name']})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
