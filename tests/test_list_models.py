import json

from config import settings
from scripts import list_models
from services import gemini

MODELS = [
    {"name": "gemini-2.5-flash", "display_name": "Gemini 2.5 Flash"},
    {"name": "gemini-2.5-pro", "display_name": "Gemini 2.5 Pro"},
]


def test_missing_key_exits_nonzero(monkeypatch, capsys):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    assert list_models.main([]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err


def test_prints_models(monkeypatch, capsys):
    monkeypatch.setattr(settings, "gemini_api_key", "k" * 39)
    monkeypatch.setattr(gemini, "list_models", lambda: MODELS)
    assert list_models.main([]) == 0
    out = capsys.readouterr().out
    assert "length: 39" in out
    assert "- gemini-2.5-pro (Gemini 2.5 Pro)" in out


def test_json_output(monkeypatch, capsys):
    monkeypatch.setattr(settings, "gemini_api_key", "key")
    monkeypatch.setattr(gemini, "list_models", lambda: MODELS)
    assert list_models.main(["--json"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out[out.index("["):]) == MODELS


def test_api_error(monkeypatch, capsys):
    def boom():
        raise RuntimeError("403 forbidden")

    monkeypatch.setattr(settings, "gemini_api_key", "key")
    monkeypatch.setattr(gemini, "list_models", boom)
    assert list_models.main([]) == 1
    assert "403 forbidden" in capsys.readouterr().err
