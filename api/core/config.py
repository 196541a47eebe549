"""
Environment-driven settings.

Everything is read at call time so tests can monkeypatch the environment.
A `.env` file in the working directory is loaded once at startup; values
already present in the environment win.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 4001


def load_env(path: str | os.PathLike | None = None) -> bool:
    return load_dotenv(path or find_dotenv(usecwd=True), override=False)


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def listen_host() -> str:
    return env_str("HOST_BIND", "0.0.0.0")


def listen_port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
