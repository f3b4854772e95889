"""Whitespace tokenizer shared by every matching strategy."""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """Split a class string into lowercase tokens.

    Empty or whitespace-only input yields an empty list.
    """
    return text.strip().lower().split()


def signature(text: str) -> str:
    """Order-independent form of a class string: sorted tokens joined by one space."""
    return " ".join(sorted(tokenize(text)))
