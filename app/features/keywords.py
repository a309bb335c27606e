from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from app.core.config.scoring import get_scoring_int
from app.normalize.utils import normalize_text

STOPWORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "has",
        "have",
        "in",
        "is",
        "it",
        "its",
        "of",
        "on",
        "or",
        "that",
        "the",
        "their",
        "this",
        "to",
        "was",
        "were",
        "will",
        "with",
        "work",
        "working",
        "experience",
        "team",
        "role",
        "roles",
        "using",
        "job",
        "years",
        "year",
        "internal",
        "teams",
        "ensure",
        "process",
        "platform",
    }
)

_NON_KEYWORD_CHARS_RE = re.compile(r"[^a-z0-9+.#\s-]")
_URL_SCHEME_RE = re.compile(r"\bhttps?\b")
_DOMAIN_SUFFIX_RE = re.compile(r"(?:\.com|\.in|\.net|\.org|\.io|\.ai)$")
_DIGITS_RE = re.compile(r"^\d+$")

_NGRAM_MIN_PART_LENGTH = 3


def tokenize_keywords(text: str) -> list[str]:
    cleaned = _NON_KEYWORD_CHARS_RE.sub(" ", normalize_text(text))
    return cleaned.split()


def build_ngrams(tokens: list[str], size: int, stopwords: frozenset[str] = STOPWORDS) -> list[str]:
    """Space-joined n-grams whose parts are all non-stopwords of three or more characters."""
    grams: list[str] = []
    for start in range(len(tokens) - size + 1):
        parts = tokens[start : start + size]
        if any(part in stopwords or len(part) < _NGRAM_MIN_PART_LENGTH for part in parts):
            continue
        grams.append(" ".join(parts))
    return grams


@dataclass(frozen=True)
class KeywordExtractor:
    min_unigram_length: int
    stopwords: frozenset[str] = STOPWORDS
    max_keywords: int = 60
    max_ngram_size: int = 3

    def keep_unigram(self, token: str) -> bool:
        if len(token) < self.min_unigram_length:
            return False
        if token in self.stopwords:
            return False
        if "@" in token or "/" in token:
            return False
        if _URL_SCHEME_RE.search(token) or _DOMAIN_SUFFIX_RE.search(token):
            return False
        return not _DIGITS_RE.match(token)

    def count(self, text: str) -> Counter[str]:
        tokens = tokenize_keywords(text)
        counts: Counter[str] = Counter(token for token in tokens if self.keep_unigram(token))
        for size in range(2, self.max_ngram_size + 1):
            counts.update(build_ngrams(tokens, size, self.stopwords))
        return counts

    def extract(self, text: str) -> list[str]:
        # Counter preserves first-seen order and sorted() is stable, so ties keep discovery order.
        ranked = sorted(self.count(text).items(), key=lambda item: item[1], reverse=True)
        return [keyword for keyword, _ in ranked[: self.max_keywords]]


JOB_KEYWORD_EXTRACTOR = KeywordExtractor(
    min_unigram_length=get_scoring_int("keywords.job_min_unigram_length", 3),
    max_keywords=get_scoring_int("keywords.max_keywords", 60),
)
RESUME_KEYWORD_EXTRACTOR = KeywordExtractor(
    min_unigram_length=get_scoring_int("keywords.resume_min_unigram_length", 2),
    max_keywords=get_scoring_int("keywords.max_keywords", 60),
)


def extract_job_keywords(job_description: str) -> list[str]:
    return JOB_KEYWORD_EXTRACTOR.extract(job_description)


def extract_resume_keywords(resume_text: str) -> list[str]:
    return RESUME_KEYWORD_EXTRACTOR.extract(resume_text)
