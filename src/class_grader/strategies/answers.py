"""Exact-answer strategy: token multiset equality with any correct answer."""

from __future__ import annotations

import random

from ..config import Challenge
from ..evaluators.answers import matches_any_answer
from ..evaluators.feedback import missing_from_answers
from . import register
from .base import BaseStrategy, Verdict


@register
class AnswersStrategy(BaseStrategy):
    name = "answers"
    description = "Same classes as one of the correct answers, in any order"

    def evaluate(self, user_input: str, challenge: Challenge, rng: random.Random | None = None) -> Verdict:
        return Verdict.from_missing(missing_from_answers(user_input, challenge.answers, rng))

    def passes(self, user_input: str, challenge: Challenge) -> bool:
        return matches_any_answer(user_input, challenge.answers)
