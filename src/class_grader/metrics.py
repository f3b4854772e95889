"""Accuracy and statistical summaries over graded submissions."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .runner import SubmissionResult


def accuracy(results: list[SubmissionResult]) -> float:
    if not results:
        return 0.0
    return float(np.mean([1.0 if r.correct else 0.0 for r in results]))


def accuracy_by_strategy(results: list[SubmissionResult]) -> dict[str, float]:
    """Accuracy per strategy name, skipping submissions that never reached a strategy."""
    grouped: dict[str, list[float]] = {}
    for r in results:
        if r.strategy:
            grouped.setdefault(r.strategy, []).append(1.0 if r.correct else 0.0)
    return {name: float(np.mean(scores)) for name, scores in sorted(grouped.items())}


def most_common_missing(results: list[SubmissionResult], limit: int = 5) -> list[tuple[str, int]]:
    counts = Counter(item for r in results for item in r.missing)
    return counts.most_common(limit)


def confidence_interval_95(scores: list[float]) -> tuple[float, float]:
    """Compute 95% confidence interval using normal approximation."""
    arr = np.array(scores, dtype=float)
    n = len(arr)
    if n == 0:
        return (0.0, 0.0)
    mean = float(np.mean(arr))
    if n < 2:
        return (mean, mean)
    se = float(np.std(arr, ddof=1) / np.sqrt(n))
    return (mean - 1.96 * se, mean + 1.96 * se)
