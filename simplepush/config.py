"""Environment-driven settings for the client and the CLI."""

import os

API_URL = "https://api.simplepush.io"
DEFAULT_TIMEOUT = 10


def read_secret(name: str) -> str | None:
    path = f"/run/secrets/simplepush_{name}"
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except FileNotFoundError:
        return None


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    if parsed <= 0:
        return default
    return parsed


class Settings:
    API_URL = os.getenv("SIMPLEPUSH_API_URL", API_URL).rstrip("/")
    TIMEOUT = _env_int("SIMPLEPUSH_TIMEOUT", DEFAULT_TIMEOUT)

    KEY = read_secret("key") or os.getenv("SIMPLEPUSH_KEY", "")
    PASSWORD = read_secret("password") or os.getenv("SIMPLEPUSH_PASSWORD", "")
    SALT = read_secret("salt") or os.getenv("SIMPLEPUSH_SALT") or None
