"""Pydantic configuration and input models."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CategoryRequirement(BaseModel):
    """What a learner's classes must contain for one category."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    required: bool = False
    specific_values: list[str] | None = Field(default=None, alias="specificValues")
    description: str | None = None


RequirementMap = dict[str, CategoryRequirement]


def parse_requirements(raw: Mapping[str, Any]) -> RequirementMap:
    """Coerce a plain mapping (camelCase or snake_case keys) into requirement models."""
    return {
        name: req if isinstance(req, CategoryRequirement) else CategoryRequirement.model_validate(req)
        for name, req in raw.items()
    }


class Challenge(BaseModel):
    """One exercise: a prompt plus the requirement spec its strategy checks."""

    id: str
    prompt: str = ""
    strategy: Literal["answers", "patterns", "categories"] = "answers"
    answers: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)
    categories: RequirementMap = Field(default_factory=dict)
    points: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_requirements(self) -> Challenge:
        if self.strategy == "answers" and not self.answers:
            raise ValueError(f"challenge {self.id!r} uses 'answers' but lists none")
        if self.strategy == "patterns" and not self.patterns:
            raise ValueError(f"challenge {self.id!r} uses 'patterns' but lists none")
        if self.strategy == "categories" and not self.categories:
            raise ValueError(f"challenge {self.id!r} uses 'categories' but lists none")
        return self


class Submission(BaseModel):
    """A learner's answer to a challenge."""

    challenge_id: str
    classes: str
    learner: str = ""


class GradeConfig(BaseModel):
    """Settings for a batch grading run."""

    seed: int | None = None
    points_per_correct: int = Field(default=10, ge=0)
    shuffle: bool = False
    max_submissions: int | None = Field(default=None, ge=1)
    output_dir: Path = Path("results")
