"""Order-independent matching against known-correct answers."""

from __future__ import annotations

from collections import Counter

from ..errors import InvalidArgument
from .tokenize import signature, tokenize


def matches_any_answer(text: str, answers: list[str]) -> bool:
    """Return True if ``text`` has the same token multiset as any answer."""
    if not answers:
        raise InvalidArgument("At least one correct answer is required")
    sig = signature(text)
    return any(sig == signature(answer) for answer in answers)


def token_difference(text: str, reference: str) -> tuple[list[str], list[str]]:
    """Compare token multisets.

    Returns (absent, extra): reference tokens missing from ``text`` and
    ``text`` tokens the reference does not have, each in first-seen order.
    """
    have = Counter(tokenize(text))
    want = Counter(tokenize(reference))
    absent = list((want - have).elements())
    extra = list((have - want).elements())
    return absent, extra
