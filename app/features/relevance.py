from __future__ import annotations

from app.core.config.scoring import get_scoring_int
from app.taxonomy import (
    CATEGORY_OPS,
    CATEGORY_PLATFORM,
    CATEGORY_ROLE,
    CATEGORY_TOOL,
    KeywordCategoryProvider,
    get_default_taxonomy_provider,
)

from .sections import EDUCATION, EXPERIENCE, GENERAL, LANGUAGES, PROJECTS, SKILLS, SUMMARY

_NO_SUGGESTION_SECTIONS = {EDUCATION, LANGUAGES, GENERAL}
_SUMMARY_TOOL_LIMIT = 4


def _dedupe(keywords: list[str]) -> list[str]:
    return list(dict.fromkeys(keywords))


def relevant_keywords_for_section(
    section: str,
    keywords: list[str],
    taxonomy: KeywordCategoryProvider | None = None,
) -> list[str]:
    """Subset of job keywords worth checking inside one resume section."""
    taxonomy = taxonomy or get_default_taxonomy_provider()
    if section in _NO_SUGGESTION_SECTIONS:
        return []

    if section == SKILLS:
        tools = [k for k in keywords if taxonomy.is_category(k, CATEGORY_TOOL)]
        platforms = [k for k in keywords if taxonomy.is_category(k, CATEGORY_PLATFORM)]
        return _dedupe(tools + platforms)

    if section == SUMMARY:
        domain = [k for k in keywords if taxonomy.categories(k) & {CATEGORY_OPS, CATEGORY_ROLE}]
        tools = [k for k in keywords if taxonomy.is_category(k, CATEGORY_TOOL)][:_SUMMARY_TOOL_LIMIT]
        return _dedupe(domain + tools)

    relevant: list[str] = []
    for keyword in keywords:
        categories = taxonomy.categories(keyword)
        if CATEGORY_TOOL in categories:
            continue
        if categories & {CATEGORY_OPS, CATEGORY_ROLE}:
            relevant.append(keyword)
    return relevant


def should_suggest_keywords_for_section(section: str) -> bool:
    return section in {EXPERIENCE, PROJECTS}


def pick_suggested_keywords(
    section: str,
    missing: list[str],
    normalized_line: str,
    taxonomy: KeywordCategoryProvider | None = None,
) -> list[str]:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    pool = [k for k in missing if k not in normalized_line]

    if section == SKILLS:
        pool = [k for k in pool if taxonomy.is_category(k, CATEGORY_TOOL)]
        limit = get_scoring_int("feedback.suggested_keywords.skills", 6)
    else:
        if section in {EXPERIENCE, PROJECTS}:
            pool = [k for k in pool if not taxonomy.is_category(k, CATEGORY_TOOL)]
        limit = get_scoring_int("feedback.suggested_keywords.default", 3)
    return pool[:limit]
