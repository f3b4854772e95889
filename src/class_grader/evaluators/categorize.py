"""Utility-class categorizer.

Each token is assigned to exactly one category by walking ``CATEGORY_RULES``
in order; the first matching rule wins and anything left over lands in
``misc``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MISC = "misc"


@dataclass(frozen=True)
class CategoryRule:
    """Membership test for one category: exact names, prefixes, or a regex."""

    category: str
    exact: frozenset[str] = frozenset()
    prefixes: tuple[str, ...] = ()
    pattern: re.Pattern[str] | None = field(default=None, compare=False)

    def matches(self, token: str) -> bool:
        if token in self.exact:
            return True
        if self.prefixes and token.startswith(self.prefixes):
            return True
        return bool(self.pattern and self.pattern.match(token))


# Evaluation order is significant: earlier rules shadow later ones.
CATEGORY_RULES: list[CategoryRule] = [
    CategoryRule("background", prefixes=("bg-",)),
    CategoryRule("padding", pattern=re.compile(r"^p[xylrtb]?-")),
    CategoryRule("margin", pattern=re.compile(r"^-?m[xylrtb]?-")),
    CategoryRule("width", prefixes=("w-", "min-w-", "max-w-")),
    CategoryRule("height", prefixes=("h-", "min-h-", "max-h-")),
    CategoryRule("display", exact=frozenset({"flex", "inline-flex"})),
    CategoryRule("flex", prefixes=("flex-", "items-", "justify-", "content-", "self-")),
    CategoryRule("grid", prefixes=("grid", "inline-grid")),
    CategoryRule(
        "text",
        exact=frozenset({"uppercase", "lowercase", "capitalize", "normal-case"}),
        prefixes=("text-", "font-", "leading-", "tracking-"),
    ),
    CategoryRule("border", exact=frozenset({"border", "rounded"}), prefixes=("border-", "rounded-")),
    CategoryRule("shadow", exact=frozenset({"shadow"}), prefixes=("shadow-",)),
    CategoryRule("position", exact=frozenset({"relative", "absolute", "fixed", "static", "sticky"})),
    CategoryRule("display", exact=frozenset({"block", "inline", "inline-block", "hidden", "invisible"})),
    CategoryRule("overflow", prefixes=("overflow-",)),
    CategoryRule(
        "animation",
        exact=frozenset({"transition"}),
        prefixes=("animate-", "transition-", "duration-", "ease-", "delay-"),
    ),
]

CATEGORY_NAMES: list[str] = list(dict.fromkeys(r.category for r in CATEGORY_RULES)) + [MISC]


def category_of(token: str) -> str:
    """Return the category a single normalized token belongs to."""
    for rule in CATEGORY_RULES:
        if rule.matches(token):
            return rule.category
    return MISC


def categorize(tokens: list[str]) -> dict[str, list[str]]:
    """Group tokens by category.

    Only categories that received at least one token appear in the result,
    keyed in ``CATEGORY_NAMES`` order. Tokens keep their input order.
    """
    buckets: dict[str, list[str]] = {}
    for token in tokens:
        buckets.setdefault(category_of(token), []).append(token)
    return {name: buckets[name] for name in CATEGORY_NAMES if name in buckets}
