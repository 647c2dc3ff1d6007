"""
Process configuration read from the environment.

A `.env` file found from the working directory is loaded on import; values
already set in the environment take precedence.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def load_env_file(path: str | None = None) -> bool:
    return load_dotenv(path or find_dotenv(usecwd=True), override=False)


load_env_file()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def bootstrap_blocking() -> bool:
    """
    When true, the lifespan awaits the schema bootstrap before serving.
    """
    return _env_bool("BOOTSTRAP_BLOCKING", False)
