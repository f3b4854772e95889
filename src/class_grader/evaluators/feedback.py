"""Human-readable descriptions of unmet class requirements."""

from __future__ import annotations

import random
import re

from .answers import matches_any_answer, token_difference
from .patterns import Pattern, PatternKind, derive_pattern, is_covered, uncovered_patterns
from .tokenize import tokenize

PERFECT = "Perfect!"
LEGACY_PERFECT = "All required classes found!"

DEFAULT_EXAMPLE_VALUE = "4"

# (prefix regex, candidate values); first match wins.
EXAMPLE_VALUES: list[tuple[re.Pattern[str], list[str]]] = [
    (re.compile(r"^p[xylrtb]?-$"), ["4", "6", "8"]),
    (re.compile(r"^mx-$"), ["auto"]),
    (re.compile(r"^m[ylrtb]?-$"), ["4"]),
    (re.compile(r"^bg-$"), ["white", "gray-800", "blue-500", "gray-100"]),
    (re.compile(r"^text-$"), ["white", "black", "gray-700", "blue-600"]),
    (re.compile(r"^w-$"), ["full", "1/2", "1/3", "64"]),
    (re.compile(r"^h-$"), ["full", "64", "32", "screen"]),
    (re.compile(r"^max-w-$"), ["md", "lg", "xl", "sm"]),
    (re.compile(r"^border-$"), ["gray-300", "gray-200", "blue-500"]),
]


def example_for(prefix: str, rng: random.Random | None = None) -> str:
    """Pick an illustrative class for a prefix pattern, e.g. ``bg-`` -> ``bg-white``."""
    rng = rng or random.Random()
    for regex, values in EXAMPLE_VALUES:
        if regex.match(prefix):
            return f"{prefix}{rng.choice(values)}"
    return f"{prefix}{DEFAULT_EXAMPLE_VALUE}"


def describe(pattern: Pattern, rng: random.Random | None = None, example: str | None = None) -> str:
    if pattern.kind is PatternKind.PREFIX:
        return f"{pattern.text}* class (e.g., {example or example_for(pattern.text, rng)})"
    if pattern.kind is PatternKind.FAMILY:
        return f"{pattern.text} class (e.g., {pattern.text}-lg)"
    return f"'{pattern.text}' class"


def missing_from_patterns(text: str, patterns: list[str], rng: random.Random | None = None) -> list[str]:
    return [describe(p, rng) for p in uncovered_patterns(text, patterns)]


def missing_from_answers(text: str, answers: list[str], rng: random.Random | None = None) -> list[str]:
    """Describe what separates ``text`` from the first (reference) answer.

    Empty when ``text`` already matches one of the answers.
    """
    if matches_any_answer(text, answers):
        return []
    reference = answers[0]
    tokens = tokenize(text)

    missing: list[str] = []
    seen: set[Pattern] = set()
    for required in tokenize(reference):
        pattern = derive_pattern(required)
        if pattern in seen or is_covered(pattern, tokens):
            continue
        seen.add(pattern)
        example = required if pattern.kind is PatternKind.PREFIX else None
        missing.append(describe(pattern, rng, example=example))
    if missing:
        return missing

    # Every family is present, so the values themselves are off.
    absent, extra = token_difference(text, reference)
    if absent:
        return [describe(Pattern(tok, PatternKind.EXACT)) for tok in dict.fromkeys(absent)]
    return [f"no extra classes (remove {', '.join(dict.fromkeys(extra))})"]


def render_feedback(missing: list[str], success: str = PERFECT) -> str:
    return f"Missing: {', '.join(missing)}" if missing else success
