"""Required-pattern coverage for class strings.

A pattern ending in ``-`` is a prefix pattern (``bg-`` matches ``bg-blue-500``);
anything else must match a whole token. ``rounded`` and ``shadow`` are the
exception: they also accept their suffixed forms (``rounded-lg``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidArgument
from .tokenize import tokenize

SEPARATOR = "-"

# Utility families whose bare name and suffixed forms are both valid.
BASE_FAMILIES = frozenset({"rounded", "shadow"})

# Prefixes spanning two dash-separated segments.
COMPOUND_PREFIXES = ("max-w-", "min-w-", "max-h-", "min-h-")


class PatternKind(str, Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    FAMILY = "family"


@dataclass(frozen=True)
class Pattern:
    text: str
    kind: PatternKind

    def matches(self, token: str) -> bool:
        if self.kind is PatternKind.EXACT:
            return token == self.text
        return token.startswith(self.text)


def parse_pattern(raw: str) -> Pattern:
    """Normalize a raw pattern string and classify it."""
    text = raw.strip().lower()
    if not text:
        raise InvalidArgument("Pattern must not be blank")
    if text.endswith(SEPARATOR):
        return Pattern(text, PatternKind.PREFIX)
    if text in BASE_FAMILIES:
        return Pattern(text, PatternKind.FAMILY)
    return Pattern(text, PatternKind.EXACT)


def is_covered(pattern: Pattern, tokens: list[str]) -> bool:
    return any(pattern.matches(tok) for tok in tokens)


def uncovered_patterns(text: str, patterns: list[str]) -> list[Pattern]:
    """Return the patterns no token of ``text`` satisfies, in the given order."""
    parsed = [parse_pattern(p) for p in patterns]
    tokens = tokenize(text)
    return [p for p in parsed if not is_covered(p, tokens)]


def covers_all_patterns(text: str, patterns: list[str]) -> bool:
    """Return True if every pattern is satisfied by at least one token.

    An empty pattern list is trivially satisfied.
    """
    return not uncovered_patterns(text, patterns)


def derive_pattern(token: str) -> Pattern:
    """Turn a reference-answer class into the pattern a learner must cover.

    ``px-4`` becomes ``px-``, ``max-w-md`` becomes ``max-w-``, ``-mt-2``
    becomes ``-mt-``; a class without a dash is matched exactly.
    """
    for prefix in COMPOUND_PREFIXES:
        if token.startswith(prefix):
            return Pattern(prefix, PatternKind.PREFIX)
    sign = SEPARATOR if token.startswith(SEPARATOR) else ""
    body = token[len(sign):]
    head, sep, _ = body.partition(SEPARATOR)
    if not sep or not head:
        return Pattern(token, PatternKind.EXACT)
    return Pattern(f"{sign}{head}{SEPARATOR}", PatternKind.PREFIX)


def covers_answer_patterns(text: str, answers: list[str]) -> bool:
    """Lenient answer check: every class family used across the answers is present.

    Every class of every answer is reduced with ``derive_pattern``, so
    ``flex px-2`` passes against ``flex px-4`` while ``px-2`` alone does not.
    """
    if not answers:
        raise InvalidArgument("At least one correct answer is required")
    required = dict.fromkeys(derive_pattern(tok) for answer in answers for tok in tokenize(answer))
    tokens = tokenize(text)
    return all(is_covered(p, tokens) for p in required)
