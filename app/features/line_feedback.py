from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_int
from app.normalize.utils import bullet_prefix, has_metric, is_bullet_line, normalize_line, normalize_text
from app.schemas.ats import LineFeedback
from app.taxonomy import KeywordCategoryProvider

from .relevance import pick_suggested_keywords, should_suggest_keywords_for_section
from .sections import EXPERIENCE, PROJECTS

ISSUE_LONG_LINE = "This line is long; split it into shorter bullets for ATS readability."
ISSUE_WEAK_VERBS = "Use stronger action verbs and focus on outcomes (what changed because of your work)."
ISSUE_NOT_BULLET = "Convert this into a bullet point for ATS readability."
ISSUE_NO_METRIC = "Add a metric (%, $, time, scale) to quantify impact for this bullet."

METRIC_PLACEHOLDER = " (Impact: [add metric like 20% / 5+ / $10K])"

_BULLET_SECTIONS = {EXPERIENCE, PROJECTS}
_MIN_BULLET_CHARS = 10

_ACTION_VERB_RE = re.compile(
    r"^(worked|managed|coordinated|delivered|supported|developed|built|led|created|implemented|maintained"
    r"|handled|owned|improved)\b",
    re.IGNORECASE,
)
_WEAK_PHRASE_RE = re.compile(r"\bresponsible for\b|\bworked on\b|\bhelped\b", re.IGNORECASE)

# Applied in order, first occurrence of each.
_PHRASE_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bresponsible for\b\s*", re.IGNORECASE), "Managed "),
    (re.compile(r"\bworked on\b\s*", re.IGNORECASE), "Delivered "),
    (re.compile(r"\bwork on\b\s*", re.IGNORECASE), "Deliver "),
    (re.compile(r"\bhelped\b\s*", re.IGNORECASE), "Improved "),
    (re.compile(r"\bassist(?:ed)?\b\s*", re.IGNORECASE), "Supported "),
)


def _max_line_chars() -> int:
    return get_scoring_int("feedback.max_line_chars", 180)


def looks_like_bullet_candidate(section: str, line: str) -> bool:
    if section not in _BULLET_SECTIONS:
        return False
    text = normalize_line(line)
    if len(text) < _MIN_BULLET_CHARS or len(text) > _max_line_chars():
        return False
    if is_bullet_line(text):
        return True
    return bool(_ACTION_VERB_RE.match(text))


def detect_line_issues(section: str, line: str) -> list[str]:
    issues: list[str] = []
    if len(line) > _max_line_chars():
        issues.append(ISSUE_LONG_LINE)
    if _WEAK_PHRASE_RE.search(line):
        issues.append(ISSUE_WEAK_VERBS)

    if looks_like_bullet_candidate(section, line):
        if not is_bullet_line(line):
            issues.append(ISSUE_NOT_BULLET)
        if not has_metric(line):
            issues.append(ISSUE_NO_METRIC)
    return issues


def suggest_rewrite(
    original_line: str,
    section: str,
    issues: list[str],
    suggested_keywords: list[str],
    treat_as_bullet: bool,
) -> str | None:
    """Mechanical rewrite of one resume line, or None when nothing would change."""
    trimmed = original_line.strip()
    existing_prefix = bullet_prefix(trimmed)
    if existing_prefix:
        prefix = existing_prefix
        body = trimmed[len(existing_prefix) :].strip()
    else:
        prefix = "- " if treat_as_bullet else ""
        body = trimmed

    for pattern, replacement in _PHRASE_SUBSTITUTIONS:
        body = pattern.sub(replacement, body, count=1)

    lowered_issues = [issue.lower() for issue in issues]
    if any("metric" in issue for issue in lowered_issues) and not has_metric(original_line):
        body = f"{body}{METRIC_PLACEHOLDER}"

    keywords = [k for k in suggested_keywords if k]
    if keywords and section in _BULLET_SECTIONS and (existing_prefix or treat_as_bullet):
        if keywords[0].lower() not in body.lower():
            body = f"{body} (Keywords: {', '.join(keywords[:3])})"

    max_chars = get_scoring_int("feedback.rewrite_max_chars", 170)
    if any("long" in issue for issue in lowered_issues) and len(body) > max_chars:
        body = f"{body[:max_chars].rstrip()}…"

    rewritten = f"{prefix}{body}".strip()
    if not rewritten or rewritten == trimmed:
        return None
    return rewritten


def build_line_feedback(
    section: str,
    line_number: int,
    line: str,
    missing_keywords: list[str],
    taxonomy: KeywordCategoryProvider | None = None,
) -> LineFeedback:
    issues = detect_line_issues(section, line)
    bullet_candidate = looks_like_bullet_candidate(section, line)

    suggested_keywords: list[str] = []
    if missing_keywords and should_suggest_keywords_for_section(section) and bullet_candidate:
        suggested_keywords = pick_suggested_keywords(section, missing_keywords, normalize_text(line), taxonomy)

    suggested_rewrite = None
    if issues or suggested_keywords:
        suggested_rewrite = suggest_rewrite(line, section, issues, suggested_keywords, bullet_candidate)

    return LineFeedback(
        line_number=line_number,
        section=section,
        text=line,
        issues=issues,
        suggested_keywords=suggested_keywords,
        suggested_rewrite=suggested_rewrite,
    )
