"""Tests for the batch grading runner and result files."""

import json

import pytest

from class_grader.config import Challenge, GradeConfig, Submission
from class_grader.runner import GradingRunner, load_challenges, load_submissions


CHALLENGES = [
    Challenge(id="center", prompt="Center a flex row", answers=["flex items-center justify-center"]),
    Challenge(id="card", strategy="patterns", patterns=["bg-", "p-", "rounded"], points=25),
    Challenge(
        id="layout",
        strategy="categories",
        categories={"display": {"required": True}, "background": {"required": True, "description": "a background"}},
    ),
]


@pytest.fixture
def config(tmp_path):
    return GradeConfig(seed=1, output_dir=tmp_path / "results")


@pytest.fixture
def submissions():
    return [
        Submission(challenge_id="center", classes="justify-center flex items-center", learner="ana"),
        Submission(challenge_id="card", classes="bg-white p-4 rounded-lg"),
        Submission(challenge_id="layout", classes="flex p-4"),
        Submission(challenge_id="center", classes="flex"),
    ]


class TestGradingRunner:
    def test_run(self, config, submissions):
        result = GradingRunner(config).run(CHALLENGES, submissions)

        assert result.num_submissions == 4
        assert [sr.correct for sr in result.submission_results] == [True, True, False, False]
        assert result.accuracy == pytest.approx(0.5)
        assert result.by_strategy == {"answers": 0.5, "categories": 0.0, "patterns": 1.0}
        assert result.submission_results[2].missing == ["a background"]
        assert result.submission_results[0].learner == "ana"

    def test_session_tally(self, config, submissions):
        result = GradingRunner(config).run(CHALLENGES, submissions)
        session = result.session
        # 10 default points plus 25 for the card challenge
        assert session.score == 35
        assert session.best_streak == 2
        assert session.streak == 0
        assert session.completed["challenge"] == 1
        assert session.level == 1

    def test_unknown_challenge(self, config):
        result = GradingRunner(config).run(CHALLENGES, [Submission(challenge_id="nope", classes="flex")])
        [sr] = result.submission_results
        assert not sr.correct
        assert "Unknown challenge" in sr.details["error"]

    def test_invalid_pattern_recorded(self, config):
        bad = Challenge(id="bad", strategy="patterns", patterns=["  "])
        result = GradingRunner(config).run([bad], [Submission(challenge_id="bad", classes="flex")])
        [sr] = result.submission_results
        assert not sr.correct
        assert sr.strategy == "patterns"
        assert "blank" in sr.details["error"]

    def test_max_submissions(self, tmp_path, submissions):
        config = GradeConfig(max_submissions=2, output_dir=tmp_path)
        result = GradingRunner(config).run(CHALLENGES, submissions)
        assert result.num_submissions == 2

    def test_shuffle_keeps_all(self, tmp_path, submissions):
        config = GradeConfig(seed=3, shuffle=True, output_dir=tmp_path)
        result = GradingRunner(config).run(CHALLENGES, submissions)
        assert sorted(sr.submitted for sr in result.submission_results) == sorted(s.classes for s in submissions)

    def test_empty(self, config):
        result = GradingRunner(config).run(CHALLENGES, [])
        assert result.num_submissions == 0
        assert result.accuracy == 0.0
        assert result.confidence_interval == (0.0, 0.0)

    def test_to_dict(self, config, submissions):
        d = GradingRunner(config).run(CHALLENGES, submissions, name="week1").to_dict()
        assert d["name"] == "week1"
        assert d["session"]["score"] == 35
        assert len(d["submission_results"]) == 4
        json.dumps(d)


class TestLoading:
    def test_load_files(self, tmp_path):
        challenges_file = tmp_path / "challenges.json"
        challenges_file.write_text(json.dumps([
            {"id": "c1", "answers": ["flex"]},
            {"id": "c2", "strategy": "categories", "categories": {"padding": {"required": True}}},
        ]))
        submissions_file = tmp_path / "submissions.json"
        submissions_file.write_text(json.dumps([{"challenge_id": "c1", "classes": "FLEX"}]))

        challenges = load_challenges(challenges_file)
        assert [c.id for c in challenges] == ["c1", "c2"]
        assert challenges[1].categories["padding"].required
        assert load_submissions(submissions_file)[0].classes == "FLEX"

    def test_save_and_load_result(self, config, submissions):
        from class_grader.results import load_result, save_result

        result = GradingRunner(config).run(CHALLENGES, submissions, name="week/1")
        path = save_result(result, config)

        assert path.parent == config.output_dir
        assert "/" not in path.name
        data = load_result(path)
        assert data["accuracy"] == pytest.approx(0.5)
        assert data["config"]["seed"] == 1


class TestMetrics:
    def test_confidence_interval(self):
        from class_grader.metrics import confidence_interval_95
        lo, hi = confidence_interval_95([1.0, 0.0, 1.0, 0.0])
        assert lo < 0.5 < hi
        assert confidence_interval_95([1.0]) == (1.0, 1.0)

    def test_most_common_missing(self, config, submissions):
        from class_grader.metrics import most_common_missing
        result = GradingRunner(config).run(CHALLENGES, submissions + submissions[2:3])
        assert most_common_missing(result.submission_results)[0] == ("a background", 2)
