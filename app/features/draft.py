from __future__ import annotations

import re

from app.normalize.utils import (
    find_email,
    find_linkedin,
    find_phone,
    is_bullet_line,
    normalize_line,
    strip_bullet_prefix,
)
from app.schemas.ats import SectionBreakdown

from .line_feedback import looks_like_bullet_candidate
from .sections import EDUCATION, EXPERIENCE, GENERAL, INTERESTS, PROJECTS, SKILLS, SUMMARY

_MAX_LOCATION_PARTS = 2
_URL_LINE_RE = re.compile(r"^https?://", re.IGNORECASE)
_SUMMARY_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bwanna\b", re.IGNORECASE), "want to"),
    (re.compile(r"\blots of\b", re.IGNORECASE), "more"),
    (re.compile(r"\byour organisation\b", re.IGNORECASE), "your organization"),
    (re.compile(r"\borganisation\b", re.IGNORECASE), "organization"),
    (re.compile(r"\.{2,}"), "."),
)
_INTEREST_CLUTTER_RE = re.compile(r"^[-*•\[]+\s*")
_TRAILING_BRACKET_RE = re.compile(r"\]$")
_EXTRA_BLANK_LINES_RE = re.compile(r"\n{3,}")


def clean_summary_text(text: str) -> str:
    cleaned = normalize_line(text)
    for pattern, replacement in _SUMMARY_FIXES:
        cleaned = pattern.sub(replacement, cleaned)
    return cleaned


def bulletize_line(section: str, line: str) -> str:
    text = normalize_line(line)
    if not text:
        return ""
    if is_bullet_line(text):
        return text
    if looks_like_bullet_candidate(section, text):
        return f"- {text}"
    return text


def _section_texts(section: SectionBreakdown | None) -> list[str]:
    if section is None:
        return []
    texts = (normalize_line(line.suggested_rewrite or line.text) for line in section.lines)
    return [text for text in texts if text]


def _contact_line(general_lines: list[str], resume_raw: str) -> str:
    email = find_email(resume_raw)
    phone = find_phone(resume_raw)
    linkedin = find_linkedin(resume_raw)

    location_parts = [
        line
        for line in general_lines[1:]
        if (not email or email not in line)
        and (not phone or phone not in line)
        and not _URL_LINE_RE.match(line)
    ][:_MAX_LOCATION_PARTS]

    parts = [", ".join(location_parts).strip() or None, email, phone, linkedin]
    return " | ".join(part for part in parts if part)


def _append_block(out: list[str], title: str, lines: list[str]) -> None:
    if not lines:
        return
    out.append("")
    out.append(title)
    out.extend(lines)


def build_improved_resume_draft(sections: list[SectionBreakdown], resume_raw: str) -> str:
    """Reassemble the resume in canonical order, preferring suggested rewrites.

    Only General, Summary, Education, Skills, Experience, Projects and Interests are
    carried over; the first occurrence of each section is used.
    """
    by_name: dict[str, SectionBreakdown] = {}
    for section in sections:
        by_name.setdefault(section.name, section)

    out: list[str] = []
    general_lines = _section_texts(by_name.get(GENERAL))
    if general_lines:
        out.append(general_lines[0])
    contact = _contact_line(general_lines, resume_raw)
    if contact:
        out.append(contact)

    summary = " ".join(clean_summary_text(line) for line in _section_texts(by_name.get(SUMMARY)))
    summary = normalize_line(summary)
    if summary:
        _append_block(out, SUMMARY, [summary])

    _append_block(out, EDUCATION, [f"- {line}" for line in _section_texts(by_name.get(EDUCATION))])
    _append_block(out, SKILLS, [f"- {strip_bullet_prefix(line)}" for line in _section_texts(by_name.get(SKILLS))])

    for name in (EXPERIENCE, PROJECTS):
        bullets = [bulletize_line(name, line) for line in _section_texts(by_name.get(name))]
        _append_block(out, name, [bullet for bullet in bullets if bullet])

    interests = [
        _TRAILING_BRACKET_RE.sub("", _INTEREST_CLUTTER_RE.sub("", line))
        for line in _section_texts(by_name.get(INTERESTS))
    ]
    _append_block(out, INTERESTS, [f"- {line}" for line in interests if line])

    return _EXTRA_BLANK_LINES_RE.sub("\n\n", "\n".join(out)).strip()
