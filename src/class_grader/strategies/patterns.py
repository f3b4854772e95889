"""Pattern-coverage strategy: every required pattern has a matching class."""

from __future__ import annotations

import random

from ..config import Challenge
from ..evaluators.feedback import missing_from_patterns
from ..evaluators.patterns import covers_all_patterns
from . import register
from .base import BaseStrategy, Verdict


@register
class PatternsStrategy(BaseStrategy):
    name = "patterns"
    description = "Each required class or prefix (e.g. 'bg-') is present"

    def evaluate(self, user_input: str, challenge: Challenge, rng: random.Random | None = None) -> Verdict:
        return Verdict.from_missing(missing_from_patterns(user_input, challenge.patterns, rng))

    def passes(self, user_input: str, challenge: Challenge) -> bool:
        return covers_all_patterns(user_input, challenge.patterns)
