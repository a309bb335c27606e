from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    scan_max_resume_chars: int
    scan_max_job_description_chars: int
    grammar_api_enabled: bool
    grammar_api_url: str
    grammar_language: str
    grammar_timeout_ms: int
    grammar_max_chars: int


settings = Settings(
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    scan_max_resume_chars=_get_env_int("SCAN_MAX_RESUME_CHARS", 50000),
    scan_max_job_description_chars=_get_env_int("SCAN_MAX_JOB_DESCRIPTION_CHARS", 20000),
    grammar_api_enabled=_get_env_bool("GRAMMAR_API_ENABLED", False),
    grammar_api_url=_get_env("GRAMMAR_API_URL", "https://api.languagetool.org/v2/check")
    or "https://api.languagetool.org/v2/check",
    grammar_language=_get_env("GRAMMAR_LANGUAGE", "en-US") or "en-US",
    grammar_timeout_ms=_get_env_int("GRAMMAR_TIMEOUT_MS", 8000),
    grammar_max_chars=_get_env_int("GRAMMAR_MAX_CHARS", 9000),
)

if settings.scan_max_resume_chars <= 0 or settings.scan_max_job_description_chars <= 0:
    raise RuntimeError("SCAN_MAX_RESUME_CHARS and SCAN_MAX_JOB_DESCRIPTION_CHARS must be positive.")
