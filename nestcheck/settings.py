"""Runtime settings for the validation service."""
from __future__ import annotations

import os
from types import SimpleNamespace


def _comma_separated_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


ENV = os.getenv("ENV", os.getenv("ENVIRONMENT", "development")).strip().lower()
ENVIRONMENT = os.getenv("ENVIRONMENT", ENV).strip().lower()
ALLOWED_CORS_ORIGINS = _comma_separated_list(os.getenv("ALLOWED_ORIGINS"))

SCHEMA_MODULES = _comma_separated_list(
    os.getenv("SCHEMA_MODULES", "nestcheck.schemas.builtin")
)

# Verbose errors echo client-supplied key names back in responses.
STRICT_BODIES = _flag("STRICT_BODIES")
VERBOSE_ERRORS = _flag("VERBOSE_ERRORS")

MAX_BODY_KB = int(os.getenv("MAX_BODY_KB", "256"))
MAX_BODY_BYTES = MAX_BODY_KB * 1024

RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "60"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

settings = SimpleNamespace(
    ENV=ENV,
    ENVIRONMENT=ENVIRONMENT,
    ALLOWED_ORIGINS=ALLOWED_CORS_ORIGINS,
    ALLOWED_CORS_ORIGINS=ALLOWED_CORS_ORIGINS,
    SCHEMA_MODULES=SCHEMA_MODULES,
    STRICT_BODIES=STRICT_BODIES,
    VERBOSE_ERRORS=VERBOSE_ERRORS,
    MAX_BODY_KB=MAX_BODY_KB,
    MAX_BODY_BYTES=MAX_BODY_BYTES,
    RATE_LIMIT_REQUESTS=RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS=RATE_LIMIT_WINDOW_SECONDS,
    LOG_LEVEL=LOG_LEVEL,
)

__all__ = [
    "ENV",
    "ENVIRONMENT",
    "ALLOWED_CORS_ORIGINS",
    "SCHEMA_MODULES",
    "STRICT_BODIES",
    "VERBOSE_ERRORS",
    "MAX_BODY_KB",
    "MAX_BODY_BYTES",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
    "LOG_LEVEL",
    "settings",
]
