from __future__ import annotations

import re

# \s does not cover the byte-order mark.
_WHITESPACE_RE = re.compile(r"[\s\ufeff]+")
_BULLET_PATTERN = re.compile(r"^(?:[-*•]\s+|\d+[.)]\s+)")
_METRIC_NUMBER_RE = re.compile(r"\b\d+(?:[.,]\d+)?\b")
_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
_PHONE_RE = re.compile(r"\+?\d[\d\s().-]{8,}\d")
_LINKEDIN_RE = re.compile(r"https?://(?:www\.)?linkedin\.com/[^\s]+", re.IGNORECASE)
_TRAILING_URL_PUNCT_RE = re.compile(r"[).,]+$")


def normalize_text(text: str) -> str:
    """Whitespace-collapsed, trimmed, lowercased text used for containment checks."""
    return _WHITESPACE_RE.sub(" ", text or "").strip().lower()


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line or "").strip()


def split_lines(raw: str) -> list[str]:
    """Split raw resume text into normalized, non-empty lines.

    Blank lines are dropped, so positions in the returned list are not the
    original file line numbers.
    """
    text = (raw or "").replace("\r\n", "\n").replace("\r", "\n")
    lines = (normalize_line(line.replace("\t", " ")) for line in text.split("\n"))
    return [line for line in lines if line]


def is_bullet_line(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def bullet_prefix(line: str) -> str | None:
    match = _BULLET_PATTERN.match(line)
    return match.group(0) if match else None


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def has_metric(line: str) -> bool:
    return bool(_METRIC_NUMBER_RE.search(line)) or "%" in line


def find_email(raw: str) -> str | None:
    match = _EMAIL_RE.search(raw or "")
    return match.group(0) if match else None


def find_phone(raw: str) -> str | None:
    match = _PHONE_RE.search(raw or "")
    return match.group(0) if match else None


def find_linkedin(raw: str) -> str | None:
    match = _LINKEDIN_RE.search(raw or "")
    if not match:
        return None
    return _TRAILING_URL_PUNCT_RE.sub("", match.group(0))
