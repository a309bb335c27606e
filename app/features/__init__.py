from .draft import build_improved_resume_draft
from .keywords import (
    JOB_KEYWORD_EXTRACTOR,
    RESUME_KEYWORD_EXTRACTOR,
    KeywordExtractor,
    extract_job_keywords,
    extract_resume_keywords,
    tokenize_keywords,
)
from .line_feedback import build_line_feedback, looks_like_bullet_candidate, suggest_rewrite
from .matcher import ResumeIndex, compute_score, detect_structure, match_keywords, match_section_keywords
from .relevance import pick_suggested_keywords, relevant_keywords_for_section
from .sections import canonical_section_name, detect_section_heading, segment_resume
from .stemmer import stem_word
from .suggested_additions import build_suggested_additions
from .tips import build_section_issues, build_tips

__all__ = [
    "KeywordExtractor",
    "JOB_KEYWORD_EXTRACTOR",
    "RESUME_KEYWORD_EXTRACTOR",
    "tokenize_keywords",
    "extract_job_keywords",
    "extract_resume_keywords",
    "stem_word",
    "canonical_section_name",
    "detect_section_heading",
    "segment_resume",
    "ResumeIndex",
    "match_keywords",
    "detect_structure",
    "compute_score",
    "match_section_keywords",
    "relevant_keywords_for_section",
    "pick_suggested_keywords",
    "looks_like_bullet_candidate",
    "suggest_rewrite",
    "build_line_feedback",
    "build_improved_resume_draft",
    "build_suggested_additions",
    "build_tips",
    "build_section_issues",
]
