"""Environment-driven settings for the API and launcher.

Priority: existing process env > reading_engine/.env > repo/.env
The pure engine and composer modules never read configuration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

MODULE_DIR = Path(__file__).resolve().parent
REPO_ROOT = MODULE_DIR.parent

load_dotenv(dotenv_path=MODULE_DIR / ".env", override=False)
load_dotenv(dotenv_path=REPO_ROOT / ".env", override=False)


def env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return max(minimum, int(raw))
    except ValueError:
        return default


def env_optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in _env_str(name, default).split(",") if item.strip()]


def _env_log_level(name: str, default: str = "INFO") -> int:
    level = logging.getLevelName(_env_str(name, default).upper())
    return level if isinstance(level, int) else logging.INFO


HOST = _env_str("HOST", "0.0.0.0")
PORT = env_int("PORT", 8000, minimum=1)
WEB_CONCURRENCY = env_int("WEB_CONCURRENCY", 1, minimum=1)
UVICORN_LOG_LEVEL = _env_str("UVICORN_LOG_LEVEL", "info").lower()
LOG_LEVEL = _env_log_level("LOG_LEVEL")
ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", "*")
DEFAULT_LOCALE = _env_str("DEFAULT_LOCALE", "en-AU")
