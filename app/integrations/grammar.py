from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


def apply_replacements(text: str, matches: list[dict[str, Any]]) -> str:
    """Apply the first suggested replacement of every LanguageTool match, right to left."""
    usable = [
        match
        for match in matches
        if isinstance(match, dict)
        and isinstance(match.get("offset"), int)
        and isinstance(match.get("length"), int)
        and match["length"] > 0
    ]
    usable.sort(key=lambda match: match["offset"], reverse=True)

    out = text
    for match in usable:
        replacements = match.get("replacements") or []
        first = replacements[0] if replacements and isinstance(replacements[0], dict) else {}
        replacement = first.get("value")
        if not replacement:
            continue

        start = match["offset"]
        end = start + match["length"]
        if start < 0 or end > len(out) or start >= end:
            continue
        out = f"{out[:start]}{replacement}{out[end:]}"
    return out


def _call_language_tool(text: str, client: httpx.Client) -> str:
    response = client.post(
        settings.grammar_api_url,
        data={"text": text, "language": settings.grammar_language},
    )
    if not response.is_success:
        logger.warning("grammar_check_http_error status=%s", response.status_code)
        return text

    payload = response.json()
    matches = payload.get("matches") if isinstance(payload, dict) else None
    if not isinstance(matches, list) or not matches:
        return text
    return apply_replacements(text, matches)


def correct_grammar(text: str, *, client: httpx.Client | None = None) -> str:
    """Best-effort grammar correction; any failure returns ``text`` unchanged."""
    if not settings.grammar_api_enabled or not text.strip():
        return text
    if settings.grammar_max_chars <= 0 or len(text) > settings.grammar_max_chars:
        logger.info("grammar_check_skipped chars=%s max_chars=%s", len(text), settings.grammar_max_chars)
        return text

    try:
        if client is not None:
            return _call_language_tool(text, client)
        with httpx.Client(timeout=settings.grammar_timeout_ms / 1000) as owned_client:
            return _call_language_tool(text, owned_client)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("grammar_check_failed url=%s: %s", settings.grammar_api_url, exc)
        return text
