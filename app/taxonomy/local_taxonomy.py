from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

CATEGORY_TOOL = "tool"
CATEGORY_PLATFORM = "platform"
CATEGORY_OPS = "ops"
CATEGORY_ROLE = "role"

# "keyword": search the whole keyword only.
# "parts": search the whole keyword and each space-separated part.
RuleScope = Literal["keyword", "parts"]


@dataclass(frozen=True)
class CategoryRule:
    category: str
    pattern: str
    scope: RuleScope = "keyword"


KEYWORD_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        CATEGORY_TOOL,
        r"^(?:excel|sheet|sheets|google|crm|reporting|tools|tool|dashboard|dashboards|sql|tableau|power|bi|jira"
        r"|salesforce|hubspot|zendesk|sap)$",
        scope="parts",
    ),
    CategoryRule(CATEGORY_TOOL, r"crm"),
    CategoryRule(CATEGORY_PLATFORM, r"\bota\b"),
    CategoryRule(
        CATEGORY_OPS,
        r"operations?|booking|bookings|travel|supplier|suppliers|customer|support|service|coordination|vouchers"
        r"|confirmations|tours|activities|sightseeing|ota|vendor|delivery|pricing|maintain|issues|end-to-end",
    ),
    CategoryRule(CATEGORY_ROLE, r"associate"),
)


class LocalTaxonomy:
    """Keyword classifier backed by an ordered table of category rules."""

    def __init__(self, rules: tuple[CategoryRule, ...] | None = None) -> None:
        self._rules = [
            (rule.category, re.compile(rule.pattern), rule.scope)
            for rule in (rules if rules is not None else KEYWORD_CATEGORY_RULES)
        ]

    @staticmethod
    def _targets(keyword: str, scope: RuleScope) -> list[str]:
        if scope == "parts" and " " in keyword:
            return [keyword, *keyword.split(" ")]
        return [keyword]

    def categories(self, keyword: str) -> frozenset[str]:
        found: set[str] = set()
        for category, pattern, scope in self._rules:
            if category in found:
                continue
            if any(pattern.search(target) for target in self._targets(keyword, scope)):
                found.add(category)
        return frozenset(found)

    def is_category(self, keyword: str, category: str) -> bool:
        return category in self.categories(keyword)
