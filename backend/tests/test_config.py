import sys
import pathlib
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from app.config import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, load_settings


def test_defaults(monkeypatch):
    for name in ("GROQ_BASE_URL", "GROQ_MODEL", "GROQ_MAX_TOKENS", "GROQ_TEMPERATURE", "CORS_ALLOW_ORIGINS", "PROMPTS_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.base_url == "https://api.groq.com/openai/v1"
    assert settings.model == "llama-3.3-70b-versatile"
    assert settings.max_tokens == DEFAULT_MAX_TOKENS
    assert settings.temperature == DEFAULT_TEMPERATURE
    assert settings.cors_allow_origins == ["*"]
    assert settings.prompts == {}


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("GROQ_MAX_TOKENS", "lots")
    monkeypatch.setenv("GROQ_TEMPERATURE", "warm")
    settings = load_settings()
    assert settings.max_tokens == DEFAULT_MAX_TOKENS
    assert settings.temperature == DEFAULT_TEMPERATURE


def test_cors_csv(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    assert load_settings().cors_allow_origins == ["http://a.test", "http://b.test"]


def test_prompts_file(monkeypatch, tmp_path):
    path = tmp_path / "prompts.yml"
    path.write_text("system:\n  website_generation: Be terse.\n", encoding="utf-8")
    monkeypatch.setenv("PROMPTS_FILE", str(path))
    assert load_settings().prompts == {"system": {"website_generation": "Be terse."}}


def test_missing_or_malformed_prompts_file(monkeypatch, tmp_path):
    monkeypatch.setenv("PROMPTS_FILE", str(tmp_path / "absent.yml"))
    assert load_settings().prompts == {}
    bad = tmp_path / "bad.yml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("PROMPTS_FILE", str(bad))
    assert load_settings().prompts == {}
