from __future__ import annotations

import math
from dataclasses import dataclass

from app.core.config.scoring import get_scoring_float, get_scoring_int
from app.normalize.utils import normalize_text
from app.schemas.ats import SectionBreakdown
from app.taxonomy import KeywordCategoryProvider

from .keywords import tokenize_keywords
from .relevance import relevant_keywords_for_section
from .stemmer import stem_word


@dataclass(frozen=True)
class KeywordMatch:
    matched: list[str]
    missing: list[str]


@dataclass(frozen=True)
class StructureFlags:
    has_skills: bool
    has_experience: bool
    has_education: bool

    @property
    def bonus(self) -> float:
        return sum((self.has_skills, self.has_experience, self.has_education)) / 3


class ResumeIndex:
    """Normalized text plus raw and stemmed token sets of one resume."""

    def __init__(self, resume_text: str) -> None:
        self.text = normalize_text(resume_text)
        self.tokens = set(tokenize_keywords(resume_text))
        self.stems = {stem_word(token) for token in self.tokens}

    def contains(self, keyword: str) -> bool:
        if " " in keyword:
            return keyword in self.text
        if keyword in self.tokens:
            return True
        if stem_word(keyword) in self.stems:
            return True
        return keyword in self.text


def match_keywords(index: ResumeIndex, keywords: list[str]) -> KeywordMatch:
    matched = [k for k in keywords if index.contains(k)]
    matched_set = set(matched)
    missing = [k for k in keywords if k not in matched_set]
    return KeywordMatch(matched=matched, missing=missing)


def detect_structure(normalized_resume: str) -> StructureFlags:
    return StructureFlags(
        has_skills="skills" in normalized_resume,
        has_experience="experience" in normalized_resume or "work experience" in normalized_resume,
        has_education="education" in normalized_resume,
    )


def is_short_resume(normalized_resume: str) -> bool:
    return len(normalized_resume) < get_scoring_int("matching.min_resume_chars", 1200)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_score(matched_count: int, keyword_count: int, structure: StructureFlags, short_resume: bool) -> int:
    keyword_score = 0.0 if keyword_count == 0 else matched_count / keyword_count
    keyword_weight = get_scoring_float("matching.weights.keyword_coverage", 0.8)
    structure_weight = get_scoring_float("matching.weights.structure", 0.2)
    length_penalty = get_scoring_float("matching.length_penalty", 0.15) if short_resume else 0.0

    raw = (keyword_score * keyword_weight + structure.bonus * structure_weight - length_penalty) * 100
    return max(0, min(100, _round_half_up(raw)))


def match_section_keywords(
    section: SectionBreakdown,
    keywords: list[str],
    taxonomy: KeywordCategoryProvider | None = None,
) -> None:
    """Fill a section's matched/missing lists from its relevant keyword subset."""
    section_text = normalize_text(" ".join(line.text for line in section.lines))
    relevant = relevant_keywords_for_section(section.name, keywords, taxonomy)
    cap = get_scoring_int("keywords.section_missing_cap", 20)
    section.matched_keywords = [k for k in relevant if k in section_text]
    section.missing_keywords = [k for k in relevant if k not in section_text][:cap]
