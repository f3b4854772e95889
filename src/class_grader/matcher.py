"""Public matching API.

All checks normalize input the same way (see ``evaluators.tokenize``), so the
answer, pattern and category strategies always agree on what a token is.

The module-level functions build a fresh ``ClassMatcher`` per call, so no
random state is shared between callers. Use a ``ClassMatcher`` with a seeded
``random.Random`` when feedback must be reproducible.
"""

from __future__ import annotations

import random
from typing import Any, Mapping

from .evaluators.answers import matches_any_answer
from .evaluators.categorize import categorize
from .evaluators.feedback import (
    LEGACY_PERFECT,
    PERFECT,
    missing_from_answers,
    missing_from_patterns,
    render_feedback,
)
from .evaluators.patterns import covers_all_patterns as _covers_all_patterns
from .evaluators.patterns import covers_answer_patterns
from .evaluators.requirements import missing_categories
from .evaluators.tokenize import tokenize
from .strategies.base import Verdict

Requirements = Mapping[str, Any]


class ClassMatcher:
    """Validates learner class strings and explains what is missing.

    ``rng`` only drives the example classes quoted in feedback; pass a seeded
    ``random.Random`` for reproducible messages.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def tokenize(self, user_input: str) -> list[str]:
        return tokenize(user_input)

    def categorize(self, user_input: str) -> dict[str, list[str]]:
        return categorize(tokenize(user_input))

    def tokenize_and_compare(self, user_input: str, correct_answers: list[str]) -> bool:
        return matches_any_answer(user_input, correct_answers)

    def covers_all_patterns(self, user_input: str, patterns: list[str]) -> bool:
        return _covers_all_patterns(user_input, patterns)

    def contains_required_patterns(self, user_input: str, correct_answers: list[str]) -> bool:
        """True if every class family used by the answers appears; values may differ."""
        return covers_answer_patterns(user_input, correct_answers)

    def categorize_and_validate(self, user_input: str, requirements: Requirements) -> Verdict:
        return satisfies_categories(user_input, requirements)

    def check_patterns(self, user_input: str, patterns: list[str]) -> Verdict:
        return Verdict.from_missing(missing_from_patterns(user_input, patterns, self._rng))

    def check_answers(self, user_input: str, correct_answers: list[str]) -> Verdict:
        return Verdict.from_missing(missing_from_answers(user_input, correct_answers, self._rng))

    def explain_missing(
        self, user_input: str, patterns_or_answers: list[str], *, from_answers: bool = False
    ) -> str:
        """Feedback string: ``Perfect!`` or ``Missing: ...``.

        Entries are read as patterns unless ``from_answers`` is set, in which
        case they are whole correct answers and the first one is the reference.
        """
        if from_answers:
            return self.check_answers(user_input, patterns_or_answers).feedback
        return self.check_patterns(user_input, patterns_or_answers).feedback

    # Legacy entry points kept for callers of the old validator.

    def get_missing_description(self, user_input: str, required_patterns: list[str]) -> str:
        missing = missing_from_patterns(user_input, required_patterns, self._rng)
        return render_feedback(missing, LEGACY_PERFECT)

    def get_missing_from_answers(self, user_input: str, correct_answers: list[str]) -> str:
        return render_feedback(missing_from_answers(user_input, correct_answers, self._rng), PERFECT)


def tokenize_and_compare(user_input: str, correct_answers: list[str]) -> bool:
    """True if ``user_input`` holds the same classes as any answer, ignoring order."""
    return ClassMatcher().tokenize_and_compare(user_input, correct_answers)


def covers_all_patterns(user_input: str, patterns: list[str]) -> bool:
    """True if every exact class or prefix pattern is present in ``user_input``."""
    return ClassMatcher().covers_all_patterns(user_input, patterns)


def contains_required_patterns(user_input: str, correct_answers: list[str]) -> bool:
    return ClassMatcher().contains_required_patterns(user_input, correct_answers)


def categorize_and_validate(user_input: str, requirements: Requirements) -> Verdict:
    return ClassMatcher().categorize_and_validate(user_input, requirements)


def explain_missing(user_input: str, patterns_or_answers: list[str], *, from_answers: bool = False) -> str:
    return ClassMatcher().explain_missing(user_input, patterns_or_answers, from_answers=from_answers)


def satisfies_categories(user_input: str, requirements: Requirements) -> Verdict:
    """Verdict for a category requirement map; see ``evaluators.requirements``."""
    return Verdict.from_missing(missing_categories(user_input, requirements))
