"""Base strategy ABC and the Verdict it produces."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..config import Challenge
from ..evaluators.feedback import PERFECT, render_feedback


@dataclass
class Verdict:
    """Outcome of checking one class string. ``missing`` is empty iff valid."""

    is_valid: bool
    missing: list[str] = field(default_factory=list)
    feedback: str = ""

    @classmethod
    def from_missing(cls, missing: list[str], success: str = PERFECT) -> Verdict:
        return cls(is_valid=not missing, missing=list(missing), feedback=render_feedback(missing, success))

    def to_dict(self) -> dict[str, Any]:
        return {"is_valid": self.is_valid, "missing": list(self.missing), "feedback": self.feedback}


class BaseStrategy(ABC):
    """Abstract base class for matching strategies."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def evaluate(self, user_input: str, challenge: Challenge, rng: random.Random | None = None) -> Verdict:
        """Check ``user_input`` against the challenge's requirement spec."""

    def passes(self, user_input: str, challenge: Challenge) -> bool:
        return self.evaluate(user_input, challenge).is_valid
