from __future__ import annotations

from typing import Protocol


class KeywordCategoryProvider(Protocol):
    def categories(self, keyword: str) -> frozenset[str]:
        """Return every category the keyword belongs to."""

    def is_category(self, keyword: str, category: str) -> bool:
        """Return True when the keyword belongs to the given category."""
