"""Simulation service.

Runs the scoring engine for a submitted form, derives the recommendation
stored with a simulation, and aggregates score statistics.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pandas as pd
from pydantic import BaseModel, Field, ValidationError

from ogoue_scoring.core.exceptions import InvalidParameterError
from ogoue_scoring.core.logging import get_logger
from ogoue_scoring.core.scoring_constants import MissingPolicy, Recommendation
from ogoue_scoring.core.settings import get_settings
from ogoue_scoring.domain.calculator.scoring import calculate, format_number, round2
from ogoue_scoring.domain.models.result import ScoringResult
from ogoue_scoring.domain.models.variable import RawValue, ScoringInput, ScoringModel, Variable

log = get_logger(__name__)


class SimulationOutcome(BaseModel):
    """Scoring result with the recommendation stored alongside it."""

    model_name: str | None = Field(None, description="Scoring model used")
    values: dict[str, RawValue] = Field(default_factory=dict, description="Submitted form values")
    missing_policy: MissingPolicy
    result: ScoringResult
    recommendation: Recommendation | None = Field(None, description="None for configuration errors")
    recommendation_reason: str

    model_config = {"frozen": True, "protected_namespaces": ()}


class SimulationStats(BaseModel):
    """Aggregate over stored simulation scores."""

    total_simulations: int = 0
    average_score: float = 0.0
    scores_above_threshold_count: int = 0
    percentage_above_threshold: float = 0.0
    threshold: float = 60.0


def recommend(
    result: ScoringResult,
    *,
    eligible_threshold: float | None = None,
    conditional_threshold: float | None = None,
) -> tuple[Recommendation | None, str]:
    """Derive the recommendation and its reason from a scoring result.

    Args:
        result: Engine output
        eligible_threshold: Minimum score for "eligible" (settings default 60)
        conditional_threshold: Minimum score for "conditional" (settings default 40)

    Returns:
        Tuple of (recommendation, reason). Configuration errors give
        (None, error message).
    """
    if result.is_config_error:
        return None, result.error or "Erreur de configuration"

    settings = get_settings()
    eligible = settings.eligible_threshold if eligible_threshold is None else eligible_threshold
    conditional = settings.conditional_threshold if conditional_threshold is None else conditional_threshold

    if result.score_final >= eligible:
        recommendation = Recommendation.ELIGIBLE
    elif result.score_final >= conditional:
        recommendation = Recommendation.CONDITIONAL
    else:
        recommendation = Recommendation.INELIGIBLE

    reason = f"Score: {format_number(result.score_final)}/100 - {result.classification.value}"
    return recommendation, reason


def run_simulation(
    model: ScoringModel | Sequence[Variable],
    values: Mapping[str, Any],
    missing_policy: MissingPolicy | str | None = None,
) -> SimulationOutcome:
    """Score a submitted form against a scoring model.

    Args:
        model: Scoring model, or its variables
        values: Form values by variable id
        missing_policy: REFUSE or PENALIZE; defaults to settings.default_missing_policy

    Returns:
        SimulationOutcome

    Raises:
        InvalidParameterError: If the values or policy cannot form a scoring input
    """
    if isinstance(model, ScoringModel):
        model_name, variables = model.name, model.variables
    else:
        model_name, variables = None, list(model)

    policy = missing_policy if missing_policy is not None else get_settings().default_missing_policy

    try:
        scoring_input = ScoringInput(variables=variables, values=dict(values), missing_policy=policy)
    except ValidationError as e:
        raise InvalidParameterError("values", dict(values), reason=str(e)) from e
    except TypeError as e:
        raise InvalidParameterError("values", values, reason="expected a mapping") from e

    result = calculate(scoring_input)
    recommendation, reason = recommend(result)

    if result.is_config_error:
        log.warning("simulation_config_error", model=model_name, error=result.error)
    else:
        log.info(
            "simulation_scored",
            model=model_name,
            score=result.score_final,
            status=result.status.value,
            classification=result.classification.value,
            blocking_failed=len(result.blocking_failed),
        )

    return SimulationOutcome(
        model_name=model_name,
        values=scoring_input.values,
        missing_policy=scoring_input.missing_policy,
        result=result,
        recommendation=recommendation,
        recommendation_reason=reason,
    )


def compute_simulation_stats(
    scores: Iterable[float | None],
    threshold: float | None = None,
) -> SimulationStats:
    """Aggregate stored scores; null scores are ignored.

    Args:
        scores: score_final of each simulation
        threshold: Score counted as "above" (settings.eligible_threshold by default)

    Returns:
        SimulationStats with averages and percentages rounded to 2 decimals
    """
    threshold = get_settings().eligible_threshold if threshold is None else threshold
    if not 0 <= threshold <= 100:
        raise InvalidParameterError("threshold", threshold, reason="must be between 0 and 100")

    series = pd.Series(list(scores), dtype="float64").dropna()
    total = int(series.size)
    if total == 0:
        return SimulationStats(threshold=threshold)

    above = int((series >= threshold).sum())
    return SimulationStats(
        total_simulations=total,
        average_score=round2(float(series.mean())),
        scores_above_threshold_count=above,
        percentage_above_threshold=round2(above / total * 100),
        threshold=threshold,
    )


def details_frame(result: ScoringResult) -> pd.DataFrame:
    """Per-variable breakdown as a DataFrame (one row per scored variable)."""
    columns = ["Variable", "Valeur", "Min", "Max", "Sens", "Poids (%)", "Score", "Score pondéré"]
    rows = [
        {
            "Variable": d.name,
            "Valeur": d.value,
            "Min": d.min,
            "Max": d.max,
            "Sens": d.favorable_direction,
            "Poids (%)": d.weight,
            "Score": d.score_variable,
            "Score pondéré": round2(d.score_pondere),
        }
        for d in result.details
    ]
    return pd.DataFrame(rows, columns=columns)
