"""Load settings and env configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from hirelens.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.3-70b-versatile"


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = 0.1
    max_tokens: int = 1200
    timeout_seconds: float = 60.0
    max_input_chars: int = 12000
    scrape_min_length: int = 200
    request_timeout_seconds: float = 15.0
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) Hirelens/0.3"

    def with_api_key(self, api_key: str) -> Settings:
        return replace(self, api_key=api_key.strip())


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        log.debug("No settings file at %s — using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)
        return {}
    return data


def load_settings(path: Path | None = None) -> Settings:
    """Build Settings from the YAML file, then apply environment overrides."""
    path = path or Path(get_env("HIRELENS_SETTINGS") or SETTINGS_PATH)
    data = _read_yaml(path)
    llm = data.get("llm", {}) or {}
    scrape = data.get("scrape", {}) or {}
    defaults = Settings()

    settings = Settings(
        api_key=get_env("GROQ_API_KEY"),
        base_url=get_env("HIRELENS_BASE_URL") or llm.get("base_url", defaults.base_url),
        model=get_env("HIRELENS_MODEL") or llm.get("model", defaults.model),
        temperature=float(llm.get("temperature", defaults.temperature)),
        max_tokens=int(llm.get("max_tokens", defaults.max_tokens)),
        timeout_seconds=float(llm.get("timeout_seconds", defaults.timeout_seconds)),
        max_input_chars=int(llm.get("max_input_chars", defaults.max_input_chars)),
        scrape_min_length=int(scrape.get("min_length", defaults.scrape_min_length)),
        request_timeout_seconds=float(
            scrape.get("request_timeout_seconds", defaults.request_timeout_seconds)
        ),
        user_agent=scrape.get("user_agent", defaults.user_agent),
    )
    log.debug("Settings loaded — model=%s, base_url=%s", settings.model, settings.base_url)
    return settings
