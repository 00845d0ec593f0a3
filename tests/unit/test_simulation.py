"""Unit tests for ogoue_scoring.application.services.simulation module."""

import pytest

from ogoue_scoring.application.services.simulation import (
    compute_simulation_stats,
    details_frame,
    recommend,
    run_simulation,
)
from ogoue_scoring.core.exceptions import InvalidParameterError
from ogoue_scoring.core.scoring_constants import (
    Classification,
    MissingPolicy,
    Recommendation,
    ScoringStatus,
)
from ogoue_scoring.domain.models.result import ScoringResult


def _result(score, status=ScoringStatus.ELIGIBLE, classification=Classification.BON, error=None):
    return ScoringResult(score_final=score, status=status, classification=classification, error=error)


class TestRecommend:
    """Tests for recommendation derivation."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, Recommendation.ELIGIBLE),
            (60, Recommendation.ELIGIBLE),
            (59.99, Recommendation.CONDITIONAL),
            (40, Recommendation.CONDITIONAL),
            (39.99, Recommendation.INELIGIBLE),
            (0, Recommendation.INELIGIBLE),
        ],
    )
    def test_thresholds(self, score, expected):
        recommendation, _ = recommend(_result(score))
        assert recommendation is expected

    def test_reason(self):
        _, reason = recommend(_result(50, classification=Classification.MOYEN))
        assert reason == "Score: 50/100 - MOYEN"

    def test_reason_keeps_decimals(self):
        _, reason = recommend(_result(28.33, classification=Classification.RISQUE))
        assert reason == "Score: 28.33/100 - RISQUE"

    def test_non_eligible_is_ineligible(self):
        recommendation, _ = recommend(
            _result(0, status=ScoringStatus.NON_ELIGIBLE, classification=Classification.RISQUE)
        )
        assert recommendation is Recommendation.INELIGIBLE

    def test_config_error_has_no_recommendation(self):
        recommendation, reason = recommend(
            _result(0, status=ScoringStatus.CONFIG_ERROR, classification=Classification.RISQUE,
                    error="Valeurs manquantes pour: CA")
        )
        assert recommendation is None
        assert reason == "Valeurs manquantes pour: CA"

    def test_explicit_thresholds(self):
        recommendation, _ = recommend(_result(55), eligible_threshold=50, conditional_threshold=30)
        assert recommendation is Recommendation.ELIGIBLE

    def test_settings_thresholds(self, monkeypatch):
        monkeypatch.setenv("OGOUE_ELIGIBLE_THRESHOLD", "70")
        recommendation, _ = recommend(_result(65))
        assert recommendation is Recommendation.CONDITIONAL


class TestRunSimulation:
    """Tests for end-to-end simulation of a form."""

    def test_scores_model(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 150000, "age": 5, "debt_ratio": 45})
        assert outcome.model_name == "PME Standard"
        assert outcome.result.score_final == 28.33
        assert outcome.recommendation is Recommendation.INELIGIBLE
        assert outcome.recommendation_reason == "Score: 28.33/100 - RISQUE"
        assert outcome.missing_policy is MissingPolicy.REFUSE

    def test_accepts_variable_list(self, complete_variables):
        outcome = run_simulation(complete_variables, {"ca": 500000, "age": 20, "debt_ratio": 0})
        assert outcome.model_name is None
        assert outcome.result.score_final == 100
        assert outcome.recommendation is Recommendation.ELIGIBLE

    def test_default_policy_from_settings(self, monkeypatch, complete_model):
        monkeypatch.setenv("OGOUE_DEFAULT_MISSING_POLICY", "PENALIZE")
        outcome = run_simulation(complete_model, {"ca": 500000, "age": 20})
        assert outcome.missing_policy is MissingPolicy.PENALIZE
        assert outcome.result.status is ScoringStatus.ELIGIBLE
        # debt ratio penalized to min, which is its best value
        assert outcome.result.score_final == 100

    def test_explicit_policy(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 500000}, "REFUSE")
        assert outcome.result.status is ScoringStatus.CONFIG_ERROR
        assert outcome.recommendation is None

    def test_blocking_outcome(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 500000, "age": 0.5, "debt_ratio": 0})
        assert outcome.result.status is ScoringStatus.NON_ELIGIBLE
        assert outcome.recommendation is Recommendation.INELIGIBLE

    def test_values_recorded(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": "150000", "age": 5, "debt_ratio": 45})
        assert outcome.values["ca"] == "150000"

    def test_invalid_values_rejected(self, complete_model):
        with pytest.raises(InvalidParameterError):
            run_simulation(complete_model, {"ca": [1, 2]})

    def test_invalid_policy_rejected(self, complete_model):
        with pytest.raises(InvalidParameterError):
            run_simulation(complete_model, {"ca": 1}, "IGNORE")


class TestComputeSimulationStats:
    """Tests for score statistics."""

    def test_empty(self):
        stats = compute_simulation_stats([])
        assert stats.total_simulations == 0
        assert stats.average_score == 0
        assert stats.percentage_above_threshold == 0

    def test_nulls_ignored(self):
        stats = compute_simulation_stats([80, None, 40, 60])
        assert stats.total_simulations == 3
        assert stats.average_score == 60
        assert stats.scores_above_threshold_count == 2
        assert stats.percentage_above_threshold == 66.67

    def test_custom_threshold(self):
        stats = compute_simulation_stats([10, 20, 30], threshold=20)
        assert stats.scores_above_threshold_count == 2
        assert stats.threshold == 20

    def test_invalid_threshold(self):
        with pytest.raises(InvalidParameterError):
            compute_simulation_stats([10], threshold=120)


class TestDetailsFrame:
    """Tests for the details DataFrame."""

    def test_rows(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 150000, "age": 5, "debt_ratio": 45})
        df = details_frame(outcome.result)
        assert list(df["Variable"]) == ["Chiffre d'Affaires", "Ancienneté", "Ratio d'Endettement"]
        assert list(df["Score"]) == [22.22, 21.05, 43.75]
        assert df["Score pondéré"].iloc[0] == 8.89

    def test_empty(self):
        df = details_frame(_result(0, status=ScoringStatus.CONFIG_ERROR, error="x"))
        assert df.empty
        assert "Score pondéré" in df.columns
