from __future__ import annotations

from typing import Any

from app.core.config import Settings, settings

# The API only exposes GET /health and POST /scan.
_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]


def cors_options(config: Settings = settings) -> dict[str, Any]:
    """Keyword arguments for ``CORSMiddleware`` built from the environment settings."""
    origin_regex = (config.cors_allow_origin_regex or "").strip() or None
    return {
        "allow_origins": list(config.cors_allowed_origins),
        "allow_origin_regex": origin_regex,
        "allow_credentials": config.cors_allow_credentials,
        "allow_methods": _ALLOWED_METHODS,
        "allow_headers": ["*"],
    }
