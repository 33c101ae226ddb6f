import os
from dataclasses import dataclass
from typing import List, Optional
import pathlib
import yaml


DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_MAX_TOKENS = 8192
DEFAULT_TEMPERATURE = 0.7
DEFAULT_PROVIDER_LABEL = "Groq (Free)"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    base_url: str
    model: str
    max_tokens: int
    temperature: float
    provider_label: str
    cors_allow_origins: List[str]
    log_level: str
    prompts: dict


def load_settings() -> Settings:
    cors_env = os.getenv("CORS_ALLOW_ORIGINS", "*")
    cors = [o.strip() for o in cors_env.split(",") if o.strip()] or ["*"]
    max_tokens_env = os.getenv("GROQ_MAX_TOKENS")
    try:
        max_tokens = int(max_tokens_env) if max_tokens_env else DEFAULT_MAX_TOKENS
    except ValueError:
        max_tokens = DEFAULT_MAX_TOKENS
    temperature_env = os.getenv("GROQ_TEMPERATURE")
    try:
        temperature = float(temperature_env) if temperature_env else DEFAULT_TEMPERATURE
    except ValueError:
        temperature = DEFAULT_TEMPERATURE
    return Settings(
        # Absence of the key is only noticed when the upstream call is made
        api_key=os.getenv("GROQ_API_KEY"),
        base_url=os.getenv("GROQ_BASE_URL") or DEFAULT_BASE_URL,
        model=os.getenv("GROQ_MODEL") or DEFAULT_MODEL,
        max_tokens=max_tokens,
        temperature=temperature,
        provider_label=os.getenv("PROVIDER_LABEL") or DEFAULT_PROVIDER_LABEL,
        cors_allow_origins=cors,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        prompts=_load_prompts(os.getenv("PROMPTS_FILE")),
    )


def _load_prompts(path: Optional[str]) -> dict:
    if not path:
        return {}
    prompts_path = pathlib.Path(path)
    try:
        with open(prompts_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data
