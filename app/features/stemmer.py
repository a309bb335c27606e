from __future__ import annotations

# (suffix, replacement, minimum word length that must be exceeded)
_SUFFIX_RULES: tuple[tuple[str, str, int], ...] = (
    ("ies", "y", 4),
    ("sses", "ss", 0),
    ("ing", "", 6),
    ("ed", "", 5),
    ("es", "", 4),
    ("s", "", 4),
)


def stem_word(word: str) -> str:
    """Strip a common English suffix so plural/tense variants compare equal.

    Heuristic only: the first matching rule wins and words of three
    characters or fewer are returned unchanged.
    """
    if len(word) <= 3:
        return word
    for suffix, replacement, min_length in _SUFFIX_RULES:
        if word.endswith(suffix) and len(word) > min_length:
            return f"{word[: -len(suffix)]}{replacement}"
    return word
