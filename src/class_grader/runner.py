"""Batch grading of learner submissions against a challenge set."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn

from .config import Challenge, GradeConfig, Submission
from .errors import InvalidArgument
from .metrics import accuracy, accuracy_by_strategy, confidence_interval_95, most_common_missing
from .session import GameSession
from .shuffle import shuffle
from .strategies import get_strategy

console = Console()

_challenges_adapter = TypeAdapter(list[Challenge])
_submissions_adapter = TypeAdapter(list[Submission])


@dataclass
class SubmissionResult:
    """Result of grading one submission."""

    challenge_id: str
    submitted: str
    correct: bool
    strategy: str = ""
    learner: str = ""
    missing: list[str] = field(default_factory=list)
    feedback: str = ""
    points: int = 0
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "challenge_id": self.challenge_id,
            "submitted": self.submitted,
            "correct": self.correct,
            "strategy": self.strategy,
            "missing": self.missing,
            "feedback": self.feedback,
            "points": self.points,
        }
        if self.learner:
            d["learner"] = self.learner
        if self.details:
            d["details"] = self.details
        return d


@dataclass
class GradingResult:
    """Aggregated result of a grading run."""

    name: str
    num_submissions: int
    accuracy: float
    confidence_interval: tuple[float, float] = (0.0, 0.0)
    by_strategy: dict[str, float] = field(default_factory=dict)
    common_missing: list[tuple[str, int]] = field(default_factory=list)
    submission_results: list[SubmissionResult] = field(default_factory=list)
    session: GameSession | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "name": self.name,
            "num_submissions": self.num_submissions,
            "accuracy": self.accuracy,
            "confidence_interval": list(self.confidence_interval),
            "by_strategy": self.by_strategy,
            "common_missing": [list(item) for item in self.common_missing],
        }
        if self.session:
            d["session"] = self.session.to_dict()
        d["submission_results"] = [sr.to_dict() for sr in self.submission_results]
        return d


def load_challenges(path: Path) -> list[Challenge]:
    """Load a JSON list of challenges."""
    return _challenges_adapter.validate_json(Path(path).read_text())


def load_submissions(path: Path) -> list[Submission]:
    """Load a JSON list of submissions."""
    return _submissions_adapter.validate_json(Path(path).read_text())


class GradingRunner:
    """Grades submissions through the strategy registry and keeps session score."""

    def __init__(self, config: GradeConfig) -> None:
        self._config = config
        self._rng = random.Random(config.seed)

    def run(
        self,
        challenges: list[Challenge],
        submissions: list[Submission],
        name: str = "grading",
    ) -> GradingResult:
        by_id = {c.id: c for c in challenges}
        if self._config.shuffle:
            submissions = shuffle(submissions, self._rng)
        if self._config.max_submissions:
            submissions = submissions[: self._config.max_submissions]

        console.print(f"\n[bold blue]Grading:[/] {name}")
        console.print(f"  {len(submissions)} submissions across {len(by_id)} challenges")

        session = GameSession()
        session.start_game("challenge")
        results: list[SubmissionResult] = []

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=console,
        ) as progress:
            task = progress.add_task(name, total=len(submissions))
            for sub in submissions:
                result = self._grade_one(sub, by_id.get(sub.challenge_id))
                session.record(result.correct, result.points)
                results.append(result)
                progress.advance(task)

        session.complete_game("challenge")

        scores = [1.0 if r.correct else 0.0 for r in results]
        acc = accuracy(results)
        result = GradingResult(
            name=name,
            num_submissions=len(results),
            accuracy=acc,
            confidence_interval=confidence_interval_95(scores),
            by_strategy=accuracy_by_strategy(results),
            common_missing=most_common_missing(results),
            submission_results=results,
            session=session,
        )

        correct = sum(1 for r in results if r.correct)
        console.print(f"  [green]Done:[/] accuracy={acc:.4f} ({correct}/{len(results)}), "
                      f"score={session.score}, best_streak={session.best_streak}")
        return result

    def _grade_one(self, sub: Submission, challenge: Challenge | None) -> SubmissionResult:
        if challenge is None:
            return SubmissionResult(
                challenge_id=sub.challenge_id,
                submitted=sub.classes,
                correct=False,
                learner=sub.learner,
                details={"error": f"Unknown challenge {sub.challenge_id!r}"},
            )

        strategy = get_strategy(challenge.strategy)
        try:
            verdict = strategy.evaluate(sub.classes, challenge, self._rng)
        except InvalidArgument as e:
            return SubmissionResult(
                challenge_id=challenge.id,
                submitted=sub.classes,
                correct=False,
                strategy=strategy.name,
                learner=sub.learner,
                details={"error": str(e)},
            )

        points = challenge.points if challenge.points is not None else self._config.points_per_correct
        return SubmissionResult(
            challenge_id=challenge.id,
            submitted=sub.classes,
            correct=verdict.is_valid,
            strategy=strategy.name,
            learner=sub.learner,
            missing=verdict.missing,
            feedback=verdict.feedback,
            points=points if verdict.is_valid else 0,
        )
