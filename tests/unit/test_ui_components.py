"""Unit tests for non-rendering UI helpers."""

from ogoue_scoring.application.services.simulation import details_frame, run_simulation
from ogoue_scoring.core.scoring_constants import Classification
from ogoue_scoring.domain.models.variable import Variable
from ogoue_scoring.ui.components.charts import build_contribution_figure, build_score_gauge
from ogoue_scoring.ui.components.form import variable_help
from ogoue_scoring.ui.components.results import format_score, get_classification_badge


class TestVariableHelp:
    """Tests for form tooltips."""

    def test_croissant(self):
        v = Variable(id="ca", name="CA", weight=40, min=0, max=1000, unit="FCFA")
        assert variable_help(v) == "Plage: 0 – 1000 FCFA · Poids: 40% · plus élevé = mieux"

    def test_blocking_decroissant(self):
        v = Variable(id="d", name="Dette", weight=60, min=0, max=80,
                     favorable_direction="DECROISSANT", blocking=True)
        text = variable_help(v)
        assert "plus faible = mieux" in text
        assert text.endswith("Critère bloquant")


class TestResultsHelpers:
    """Tests for result formatting."""

    def test_format_score(self):
        assert format_score(50.0) == "50 / 100"
        assert format_score(28.33) == "28.33 / 100"
        assert format_score(None) == "—"

    def test_badges(self):
        for classification in Classification:
            icon, label, color = get_classification_badge(classification)
            assert label
            assert color.startswith("#")


class TestCharts:
    """Tests for figure builders."""

    def test_contribution_figure(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 150000, "age": 5, "debt_ratio": 45})
        fig = build_contribution_figure(details_frame(outcome.result))
        assert len(fig.data) == 2
        assert len(fig.data[1].x) == 3
        assert fig.data[1].x[0] == 8.89

    def test_gauge(self, complete_model):
        outcome = run_simulation(complete_model, {"ca": 150000, "age": 5, "debt_ratio": 45})
        fig = build_score_gauge(outcome.result)
        assert fig.data[0].value == 28.33
