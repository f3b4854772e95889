"""Score and streak bookkeeping for a play or grading session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

GameType = Literal["speed", "challenge", "build"]

POINTS_PER_LEVEL = 100


@dataclass
class GameSession:
    """Running tally of score, level and streaks.

    ``level`` is recomputed from the score whenever a game completes.
    """

    score: int = 0
    level: int = 1
    streak: int = 0
    best_streak: int = 0
    total_games_played: int = 0
    completed: dict[str, int] = field(default_factory=lambda: {"speed": 0, "challenge": 0, "build": 0})
    current_game_type: GameType | None = None

    def add_score(self, points: int) -> None:
        self.score += points

    def increment_streak(self) -> None:
        self.streak += 1
        self.best_streak = max(self.best_streak, self.streak)

    def reset_streak(self) -> None:
        self.streak = 0

    def record(self, correct: bool, points: int) -> None:
        """Apply one graded attempt: award points and extend or break the streak."""
        if correct:
            self.add_score(points)
            self.increment_streak()
        else:
            self.reset_streak()

    def start_game(self, game_type: GameType) -> None:
        self.current_game_type = game_type

    def complete_game(self, game_type: GameType) -> None:
        self.total_games_played += 1
        self.completed[game_type] = self.completed.get(game_type, 0) + 1
        self.level = self.score // POINTS_PER_LEVEL + 1
        self.current_game_type = None

    def reset(self) -> None:
        self.score = 0
        self.level = 1
        self.streak = 0
        self.best_streak = 0
        self.total_games_played = 0
        self.completed = {"speed": 0, "challenge": 0, "build": 0}
        self.current_game_type = None

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "streak": self.streak,
            "best_streak": self.best_streak,
            "total_games_played": self.total_games_played,
            "completed": dict(self.completed),
        }
