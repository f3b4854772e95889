"""Per-category requirement checks."""

from __future__ import annotations

from typing import Any, Mapping

from ..config import CategoryRequirement, parse_requirements
from .categorize import categorize
from .tokenize import tokenize


def _has_specific_value(tokens: list[str], values: list[str]) -> bool:
    wanted = [v.strip().lower() for v in values]
    return any(v in tok for tok in tokens for v in wanted)


def missing_categories(
    text: str, requirements: Mapping[str, CategoryRequirement | Mapping[str, Any]]
) -> list[str]:
    """Return labels of required categories ``text`` does not satisfy.

    A required category fails when no token falls into it, or when
    ``specific_values`` is set and none of its tokens contains any of them.
    Each failing category is reported once, by description if it has one.
    """
    buckets = categorize(tokenize(text))
    missing: list[str] = []
    for name, req in parse_requirements(requirements).items():
        if not req.required:
            continue
        tokens = buckets.get(name.lower(), [])
        satisfied = bool(tokens)
        if satisfied and req.specific_values is not None:
            satisfied = _has_specific_value(tokens, req.specific_values)
        if not satisfied:
            missing.append(req.description or name)
    return missing
