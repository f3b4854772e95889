"""Randomization helpers for ordering challenges and answer options."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a Fisher-Yates shuffled copy of ``items``. Empty input is allowed."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def randomize(items: Sequence[T], correct_index: int, rng: random.Random | None = None) -> tuple[list[T], int]:
    """Shuffle options and report where the correct one ended up.

    Returns (shuffled copy, new index of the correct item). The new index is
    the first position holding an item equal to the original correct item.
    """
    if not items:
        raise InvalidArgument("Items must be non-empty")
    if not 0 <= correct_index < len(items):
        raise InvalidArgument(f"Correct index {correct_index} is outside 0..{len(items) - 1}")

    correct = items[correct_index]
    shuffled = shuffle(items, rng)
    return shuffled, shuffled.index(correct)


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Random integer in ``[low, high]`` inclusive."""
    return (rng or random.Random()).randint(low, high)


def random_element(items: Sequence[T], rng: random.Random | None = None) -> T:
    if not items:
        raise InvalidArgument("Items must be non-empty")
    return (rng or random.Random()).choice(items)
