from functools import lru_cache

from .local_taxonomy import (
    CATEGORY_OPS,
    CATEGORY_PLATFORM,
    CATEGORY_ROLE,
    CATEGORY_TOOL,
    KEYWORD_CATEGORY_RULES,
    CategoryRule,
    LocalTaxonomy,
)
from .provider import KeywordCategoryProvider


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> KeywordCategoryProvider:
    return LocalTaxonomy()


__all__ = [
    "CATEGORY_OPS",
    "CATEGORY_PLATFORM",
    "CATEGORY_ROLE",
    "CATEGORY_TOOL",
    "KEYWORD_CATEGORY_RULES",
    "CategoryRule",
    "KeywordCategoryProvider",
    "LocalTaxonomy",
    "get_default_taxonomy_provider",
]
