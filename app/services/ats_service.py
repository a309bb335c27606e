from __future__ import annotations

import logging
from functools import partial

from app.features import (
    build_improved_resume_draft,
    build_line_feedback,
    build_section_issues,
    build_suggested_additions,
    build_tips,
    compute_score,
    detect_structure,
    extract_job_keywords,
    extract_resume_keywords,
    match_keywords,
    match_section_keywords,
    segment_resume,
)
from app.features.matcher import ResumeIndex, is_short_resume
from app.integrations.grammar import correct_grammar
from app.normalize.utils import split_lines
from app.schemas.ats import AtsResult, ScanRequest
from app.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


def score_resume(resume_text: str, job_description_text: str) -> AtsResult:
    """Score a resume against a job description and build all remediation feedback.

    Pure and deterministic: no I/O, no state kept between calls, and no exception for
    any string input (empty strings simply produce an empty, zero-score result).
    """
    resume_raw = resume_text or ""
    taxonomy = get_default_taxonomy_provider()

    index = ResumeIndex(resume_raw)
    resume_keywords = extract_resume_keywords(resume_raw)
    job_keywords = extract_job_keywords(job_description_text or "")
    keyword_match = match_keywords(index, job_keywords)

    structure = detect_structure(index.text)
    short_resume = is_short_resume(index.text)
    score = compute_score(len(keyword_match.matched), len(job_keywords), structure, short_resume)
    tips = build_tips(resume_raw, keyword_match.missing, structure, short_resume)

    build_line = partial(build_line_feedback, missing_keywords=keyword_match.missing, taxonomy=taxonomy)
    sections = segment_resume(split_lines(resume_raw), build_line)
    for section in sections:
        match_section_keywords(section, job_keywords, taxonomy)
        section.issues = build_section_issues(section)

    corrected_resume = build_improved_resume_draft(sections, resume_raw) if sections else ""

    logger.debug(
        "ats_score_computed score=%s job_keywords=%s matched=%s sections=%s",
        score,
        len(job_keywords),
        len(keyword_match.matched),
        len(sections),
    )
    return AtsResult(
        score=score,
        matched_keywords=keyword_match.matched,
        missing_keywords=keyword_match.missing,
        tips=tips,
        sections=sections,
        resume_keywords=resume_keywords,
        job_keywords=job_keywords,
        corrected_resume=corrected_resume,
        suggested_additions=build_suggested_additions(keyword_match.missing),
    )


def run_scan(payload: ScanRequest) -> AtsResult:
    """Score the request and run the draft through the optional grammar service."""
    result = score_resume(payload.resume_text, payload.job_description_text)
    corrected = correct_grammar(result.corrected_resume)
    logger.info(
        "ats_scan_completed score=%s matched=%s missing=%s grammar_changed=%s",
        result.score,
        len(result.matched_keywords),
        len(result.missing_keywords),
        corrected != result.corrected_resume,
    )
    return result.model_copy(update={"corrected_resume": corrected})
