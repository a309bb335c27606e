from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_int
from app.normalize.utils import find_email, find_phone, has_metric, is_bullet_line
from app.schemas.ats import SectionBreakdown

from .matcher import StructureFlags
from .sections import EXPERIENCE, PROJECTS, SKILLS, SUMMARY

_TABLE_PIPES_RE = re.compile(r"[|]{3,}")


def build_tips(
    resume_raw: str,
    missing_keywords: list[str],
    structure: StructureFlags,
    short_resume: bool,
) -> list[str]:
    """Document-level advice, in a fixed order."""
    tips: list[str] = []
    limit = get_scoring_int("tips.max_listed_keywords", 12)

    if missing_keywords:
        listed = ", ".join(missing_keywords[:limit])
        ellipsis = "…" if len(missing_keywords) > limit else ""
        tips.append(f"Add relevant keywords: {listed}{ellipsis}")
    if not structure.has_skills:
        tips.append("Add a clearly labeled “Skills” section.")
    if not structure.has_experience:
        tips.append("Add a clearly labeled “Experience” section with role titles and impact bullets.")
    if not structure.has_education:
        tips.append("Add an “Education” section (even if minimal).")
    if short_resume:
        tips.append("Your resume content looks short; add measurable achievements and relevant details.")
    if _TABLE_PIPES_RE.search(resume_raw or ""):
        tips.append("Avoid complex tables/columns; ATS can misread multi-column layouts.")
    if not find_email(resume_raw):
        tips.append("Add a professional email address in your header.")
    if not find_phone(resume_raw):
        tips.append("Add a phone number in your header.")
    return tips


def build_section_issues(section: SectionBreakdown) -> list[str]:
    issues: list[str] = []
    if section.name in {EXPERIENCE, PROJECTS}:
        if not any(is_bullet_line(line.text) for line in section.lines):
            issues.append("Add bullet points (2–5) with responsibilities + outcomes for ATS readability.")
        if not any(has_metric(line.text) for line in section.lines):
            issues.append("Add metrics to at least 1–2 bullets (%, $, time saved, scale).")
        if not section.matched_keywords and section.missing_keywords:
            issues.append(
                "This section does not mention job-relevant keywords; "
                "tailor it to the target role (only if accurate)."
            )

    if section.name == SKILLS and section.missing_keywords:
        issues.append("If you have these tools/platforms, add them to Skills for ATS matching.")

    if section.name == SUMMARY and section.missing_keywords:
        issues.append(
            "Tailor Summary to the target role domain (operations) and mention 2–4 relevant keywords naturally."
        )
    return issues
