from __future__ import annotations

import re
from typing import Callable

from app.normalize.utils import normalize_line, normalize_text
from app.schemas.ats import LineFeedback, SectionBreakdown

GENERAL = "General"
SUMMARY = "Summary"
EXPERIENCE = "Experience"
PROJECTS = "Projects"
SKILLS = "Skills"
EDUCATION = "Education"
CERTIFICATIONS = "Certifications"
LANGUAGES = "Languages"
ACHIEVEMENTS = "Achievements"
INTERESTS = "Interests"

_MAX_HEADING_CHARS = 40
_MIN_FEEDBACK_LINE_CHARS = 3

_KNOWN_HEADINGS = (
    "summary",
    "profile",
    "objective",
    "skills",
    "technical skills",
    "tools",
    "technologies",
    "technology",
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "projects",
    "project",
    "education",
    "certifications",
    "certification",
    "achievements",
    "languages",
    "language",
    "hobbies",
    "hobbies and interests",
    "interests",
    "contact",
    "personal details",
)

_LEADING_BULLET_RE = re.compile(r"^\s*(?:[-*•]+\s*)?")
_LEADING_MARKUP_RE = re.compile(r"^[#*_\[\]()]+")
_TRAILING_MARKUP_RE = re.compile(r"[#*_\[\]()]+$")
_TRAILING_COLONS_RE = re.compile(r":+$")
# ASCII-only: accented capitals do not count as an all-caps heading.
_ALL_CAPS_HEADING_RE = re.compile(r"[A-Z][A-Z\s&/.-]{2,}")
_DIGIT_RE = re.compile(r"[0-9]")

LineBuilder = Callable[[str, int, str], LineFeedback]


def canonical_section_name(heading: str) -> str | None:
    lowered = normalize_text(heading)
    if "work experience" in lowered or "experience" in lowered:
        return EXPERIENCE
    if "employment" in lowered:
        return EXPERIENCE
    if "projects" in lowered or "project" in lowered:
        return PROJECTS
    if "skills" in lowered or "tools" in lowered:
        return SKILLS
    if "technologies" in lowered or "technology" in lowered:
        return SKILLS
    if "education" in lowered:
        return EDUCATION
    if "certifications" in lowered or "certification" in lowered:
        return CERTIFICATIONS
    if "summary" in lowered or "profile" in lowered or "objective" in lowered:
        return SUMMARY
    if "languages" in lowered or lowered == "language":
        return LANGUAGES
    if "contact" in lowered or "personal details" in lowered:
        return GENERAL
    if "achievements" in lowered:
        return ACHIEVEMENTS
    if "hobbies" in lowered or "interests" in lowered:
        return INTERESTS
    return None


def _heading_candidate(line: str) -> str:
    candidate = _LEADING_BULLET_RE.sub("", line, count=1)
    candidate = _LEADING_MARKUP_RE.sub("", candidate, count=1)
    candidate = _TRAILING_MARKUP_RE.sub("", candidate, count=1)
    candidate = _TRAILING_COLONS_RE.sub("", candidate, count=1)
    return candidate.strip()


def _is_known_heading(lowered: str) -> bool:
    return any(
        lowered == known or lowered.startswith(f"{known} ") or lowered.startswith(f"{known}:")
        for known in _KNOWN_HEADINGS
    )


def detect_section_heading(line: str) -> str | None:
    """Return the canonical section a heading line opens, or None for content lines."""
    normalized = normalize_line(line)
    candidate = _heading_candidate(normalized)
    if not candidate:
        return None
    if len(candidate) > _MAX_HEADING_CHARS:
        return None

    all_caps = bool(_ALL_CAPS_HEADING_RE.fullmatch(candidate)) and not _DIGIT_RE.search(candidate)
    if not (_is_known_heading(candidate.lower()) or all_caps or normalized.endswith(":")):
        return None
    return canonical_section_name(candidate)


def _plain_line(section: str, line_number: int, text: str) -> LineFeedback:
    return LineFeedback(line_number=line_number, section=section, text=text)


def _new_section(name: str, start_line: int) -> SectionBreakdown:
    return SectionBreakdown(name=name, start_line=start_line, end_line=start_line)


def segment_resume(lines: list[str], build_line: LineBuilder = _plain_line) -> list[SectionBreakdown]:
    """Assign every kept resume line to a section in one forward pass.

    ``build_line`` receives (section name, 1-based line number, line text) for each
    non-heading line at least three characters long, while that section is current.
    """
    sections: list[SectionBreakdown] = []
    current = _new_section(GENERAL, 1)

    def push_current() -> None:
        if not current.lines and current.name == GENERAL:
            return
        current.end_line = max(current.start_line, current.end_line)
        sections.append(current)

    for line_number, line in enumerate(lines, start=1):
        heading = detect_section_heading(line)
        if heading:
            current.end_line = line_number - 1
            push_current()
            current = _new_section(heading, line_number)
            continue

        current.end_line = line_number
        if len(line) >= _MIN_FEEDBACK_LINE_CHARS:
            current.lines.append(build_line(current.name, line_number, line))

    push_current()
    return sections
