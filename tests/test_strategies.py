"""Tests for strategy registration, challenge models and verdicts."""

import random

import pytest
from pydantic import ValidationError

from class_grader.config import CategoryRequirement, Challenge, parse_requirements
from class_grader.strategies.base import Verdict


class TestStrategyRegistry:
    def test_list_strategies(self):
        from class_grader.strategies import list_strategies
        names = [s["name"] for s in list_strategies()]
        assert names == ["answers", "categories", "patterns"]

    def test_get_strategy(self):
        from class_grader.strategies import get_strategy
        s = get_strategy("patterns")
        assert s.name == "patterns"

    def test_get_unknown(self):
        from class_grader.strategies import get_strategy
        with pytest.raises(KeyError, match="Unknown strategy"):
            get_strategy("fuzzy")


class TestStrategies:
    def test_answers(self):
        from class_grader.strategies import get_strategy
        challenge = Challenge(id="center", answers=["flex items-center justify-center"])
        s = get_strategy("answers")
        assert s.passes("justify-center flex items-center", challenge)
        verdict = s.evaluate("flex", challenge)
        assert not verdict.is_valid
        assert verdict.missing == [
            "items-* class (e.g., items-center)",
            "justify-* class (e.g., justify-center)",
        ]

    def test_patterns(self):
        from class_grader.strategies import get_strategy
        challenge = Challenge(id="card", strategy="patterns", patterns=["bg-", "p-", "rounded", "shadow"])
        s = get_strategy("patterns")
        assert s.passes("bg-white p-6 rounded-xl shadow", challenge)
        verdict = s.evaluate("bg-white p-6", challenge, random.Random(0))
        assert verdict.missing == ["rounded class (e.g., rounded-lg)", "shadow class (e.g., shadow-lg)"]
        assert verdict.feedback.startswith("Missing: rounded class")

    def test_categories(self):
        from class_grader.strategies import get_strategy
        challenge = Challenge(
            id="spacing",
            strategy="categories",
            categories={
                "padding": {"required": True, "description": "some padding"},
                "margin": {"required": True, "specificValues": ["auto"]},
            },
        )
        s = get_strategy("categories")
        assert s.passes("p-4 mx-auto", challenge)
        assert s.evaluate("p-4 mt-2", challenge).missing == ["margin"]
        assert s.evaluate("", challenge).missing == ["some padding", "margin"]


class TestChallenge:
    def test_requires_field_for_strategy(self):
        with pytest.raises(ValidationError):
            Challenge(id="x", strategy="patterns")
        with pytest.raises(ValidationError):
            Challenge(id="x")
        with pytest.raises(ValidationError):
            Challenge(id="x", strategy="categories")

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            Challenge(id="x", strategy="fuzzy", answers=["flex"])

    def test_categories_coerced(self):
        c = Challenge(id="x", strategy="categories", categories={"text": {"required": True, "specificValues": ["xl"]}})
        assert c.categories["text"] == CategoryRequirement(required=True, specific_values=["xl"])


class TestRequirementModels:
    def test_camel_and_snake_case(self):
        a = CategoryRequirement.model_validate({"required": True, "specificValues": ["red"]})
        b = CategoryRequirement.model_validate({"required": True, "specific_values": ["red"]})
        assert a == b

    def test_parse_requirements_keeps_models(self):
        req = CategoryRequirement(required=True)
        parsed = parse_requirements({"padding": req, "margin": {"description": "margin"}})
        assert parsed["padding"] is req
        assert parsed["margin"].required is False


class TestVerdict:
    def test_from_missing(self):
        assert Verdict.from_missing([]) == Verdict(is_valid=True, missing=[], feedback="Perfect!")
        v = Verdict.from_missing(["'flex' class"])
        assert not v.is_valid
        assert v.feedback == "Missing: 'flex' class"

    def test_from_missing_copies(self):
        missing = ["a"]
        v = Verdict.from_missing(missing)
        missing.append("b")
        assert v.missing == ["a"]
