"""Category-requirement strategy: required utility categories are used."""

from __future__ import annotations

import random

from ..config import Challenge
from ..evaluators.requirements import missing_categories
from . import register
from .base import BaseStrategy, Verdict


@register
class CategoriesStrategy(BaseStrategy):
    name = "categories"
    description = "Every required category (padding, background, ...) has a class"

    def evaluate(self, user_input: str, challenge: Challenge, rng: random.Random | None = None) -> Verdict:
        return Verdict.from_missing(missing_categories(user_input, challenge.categories))
