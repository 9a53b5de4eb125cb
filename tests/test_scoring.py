import random

import pytest

from essay_checker.models import Issue, Position
from essay_checker.scorers import (
    BaselineScores,
    PenaltyScoringModel,
    ScoringModel,
    SimulatedScoringModel,
    create_scoring_model,
)
from essay_checker.scoring import readability_level, reading_time_minutes, score
from tests.utils import words


class FixedScoringModel(ScoringModel):
    def __init__(self, grammar: int, style: int, readability: int) -> None:
        self.values = BaselineScores(grammar, style, readability)

    def baseline(self, text, issues):  # pragma: no cover - trivial
        return self.values


def _issue(kind: str, severity: str) -> Issue:
    return Issue("", kind, severity, "x", "y", "", Position(0, 0, 1))


def test_word_count_and_reading_time():
    result = score(words(201), [], "general", FixedScoringModel(80, 70, 50))
    assert result.word_count == 201
    assert result.reading_time_minutes == 2
    assert reading_time_minutes(200) == 1
    assert reading_time_minutes(1) == 1


def test_overall_is_floored_mean():
    result = score(words(10), [], "general", FixedScoringModel(81, 70, 50))
    assert result.overall_score == 75


@pytest.mark.parametrize(
    "value,level",
    [(30, "Complex"), (39, "Complex"), (40, "Moderate"), (59, "Moderate"), (60, "Easy"), (70, "Easy")],
)
def test_readability_levels(value, level):
    assert readability_level(value) == level


def test_academic_readability_penalty_is_floored():
    assert score(words(5), [], "academic", FixedScoringModel(80, 70, 55)).readability_score == 45
    assert score(words(5), [], "academic", FixedScoringModel(80, 70, 35)).readability_score == 30


def test_creative_style_bonus_is_capped():
    assert score(words(5), [], "creative", FixedScoringModel(80, 70, 50)).style_score == 75
    creative = score(words(5), [], "creative", FixedScoringModel(80, 93, 50))
    assert creative.style_score == 95
    assert creative.overall_score == (80 + 95) // 2


def test_business_and_general_are_unadjusted():
    for doc_type in ("business", "general"):
        result = score(words(5), [], doc_type, FixedScoringModel(80, 70, 50))
        assert (result.readability_score, result.style_score) == (50, 70)


def test_simulated_scores_stay_in_ranges():
    model = SimulatedScoringModel(rng=random.Random(123))
    for doc_type in ("academic", "creative", "business", "general"):
        for _ in range(50):
            result = score(words(20), [], doc_type, model)
            assert 70 <= result.grammar_score <= 95
            assert 60 <= result.style_score <= 95
            assert 30 <= result.readability_score <= 70
            for value in (
                result.grammar_score,
                result.style_score,
                result.readability_score,
                result.overall_score,
            ):
                assert isinstance(value, int)
                assert 0 <= value <= 100


def test_simulated_scores_reproducible_with_seed():
    first = SimulatedScoringModel(rng=random.Random(9)).baseline("text", [])
    second = SimulatedScoringModel(rng=random.Random(9)).baseline("text", [])
    assert first == second


def test_penalty_model_subtracts_by_severity():
    model = PenaltyScoringModel()
    assert model.baseline("text", []) == BaselineScores(95, 90, 70)

    issues = [_issue("grammar", "medium"), _issue("spelling", "low"), _issue("style", "high")]
    baseline = model.baseline("text", issues)
    assert baseline.grammar == 95 - 3 - 1
    assert baseline.style == 90 - 5
    assert baseline.readability == 70


def test_penalty_model_clamps_to_range():
    issues = [_issue("grammar", "high")] * 50
    assert PenaltyScoringModel().baseline("text", issues).grammar == 70


def test_create_scoring_model_by_name():
    assert isinstance(create_scoring_model("penalty"), PenaltyScoringModel)
    assert isinstance(create_scoring_model("Simulated"), SimulatedScoringModel)
    with pytest.raises(ValueError):
        create_scoring_model("oracle")
