"""Eligibility scoring engine.

Turns a set of weighted variables and an applicant's raw values into a
0-100 score:

1. Weight validation (sum = 100 ± 0.1)
2. Range and direction validation per variable
3. Missing values (REFUSE or PENALIZE)
4. Normalization per variable (0-100) along the favorable direction,
   with clamping, then weighting
5. Blocking criteria (NON_ELIGIBLE)
6. Classification of the final score

Configuration and input problems are returned as CONFIG_ERROR results,
never raised. All functions are pure.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from ogoue_scoring.core.scoring_constants import (
    CLASSIFICATION_THRESHOLDS,
    SCORE_MAX,
    SCORE_MIN,
    WEIGHT_TOLERANCE,
    WEIGHT_TOTAL,
    Classification,
    FavorableDirection,
    MissingPolicy,
    ScoringStatus,
)
from ogoue_scoring.domain.models.result import BlockingFailed, ScoringResult, VariableDetail
from ogoue_scoring.domain.models.variable import ScoringInput, Variable

# Float noise allowed on top of WEIGHT_TOLERANCE (33.3 * 3 != 99.9 exactly)
_WEIGHT_EPSILON = 1e-9

# Plain decimal or exponent notation; no digit grouping, no inf/nan words
_NUMERIC_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def round2(value: float) -> float:
    """Round half up to 2 decimals."""
    return math.floor(value * 100 + 0.5) / 100


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for integral values."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def validate_weights(variables: Iterable[Variable]) -> tuple[float, str | None]:
    """Check that weights sum to 100 within tolerance.

    Args:
        variables: Scoring variables

    Returns:
        Tuple of (weight sum, error message or None)
    """
    total = sum(v.weight for v in variables)
    deviation = abs(total - WEIGHT_TOTAL)

    if not math.isfinite(total) or deviation - WEIGHT_TOLERANCE > _WEIGHT_EPSILON:
        return total, (
            f"La somme des poids est {total:.2f}% "
            f"(doit être {format_number(WEIGHT_TOTAL)} ± {WEIGHT_TOLERANCE}%)"
        )
    return total, None


def validate_variable_config(variable: Variable) -> str | None:
    """Check a variable's range and direction.

    Returns:
        Error message, or None when the variable is usable
    """
    if not (math.isfinite(variable.min) and math.isfinite(variable.max)):
        return f'Variable "{variable.name}": bornes invalides (min={variable.min}, max={variable.max}).'

    if variable.max == variable.min:
        return (
            f'Variable "{variable.name}": min et max sont identiques '
            f"({format_number(variable.min)}). Division par zéro impossible."
        )

    if variable.min > variable.max:
        return (
            f'Variable "{variable.name}": min ({format_number(variable.min)}) '
            f"> max ({format_number(variable.max)})."
        )

    if variable.direction is None:
        return f'Variable "{variable.name}": favorableDirection invalide ({variable.favorable_direction!r}).'

    return None


def coerce_value(raw: Any) -> float | None:
    """Convert an applicant value to float.

    Strings must be plain decimal or exponent notation. Returns None when
    the value is not a finite number.
    """
    if isinstance(raw, str):
        raw = raw.strip()
        if not _NUMERIC_RE.fullmatch(raw):
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def normalize_variable(
    value: float,
    min_value: float,
    max_value: float,
    direction: FavorableDirection,
) -> float:
    """Map a value onto 0-100 along its favorable direction.

    The value is clamped to [min_value, max_value] first, so anything
    below min scores like min and anything above max scores like max.

    Args:
        value: Coerced applicant value
        min_value: Lower bound (strictly below max_value)
        max_value: Upper bound
        direction: CROISSANT or DECROISSANT

    Returns:
        Score from 0.0 to 100.0, rounded to 2 decimals
    """
    clamped = max(min_value, min(max_value, value))
    span = max_value - min_value

    if direction is FavorableDirection.CROISSANT:
        score = (clamped - min_value) / span * 100
    else:
        score = (max_value - clamped) / span * 100

    return round2(score)


def classify_score(score: float) -> Classification:
    """Bucket a final score: <40 RISQUE, <60 MOYEN, <80 BON, else EXCELLENT."""
    for upper_bound, classification in CLASSIFICATION_THRESHOLDS:
        if score < upper_bound:
            return classification
    return Classification.EXCELLENT


def _blocking_message(variable: Variable, value: float) -> str:
    if value < variable.min:
        return (
            f'"{variable.name}" est inférieur au minimum '
            f"({format_number(value)} < {format_number(variable.min)})"
        )
    return (
        f'"{variable.name}" dépasse le maximum '
        f"({format_number(value)} > {format_number(variable.max)})"
    )


def _config_error(weight_sum: float, message: str) -> ScoringResult:
    return ScoringResult(
        score_final=0.0,
        status=ScoringStatus.CONFIG_ERROR,
        classification=Classification.RISQUE,
        blocking_failed=[],
        details=[],
        weight_sum=weight_sum,
        error=message,
    )


def calculate(scoring_input: ScoringInput) -> ScoringResult:
    """Run the complete scoring of one applicant.

    Args:
        scoring_input: Variables, applicant values and missing-value policy

    Returns:
        ScoringResult; configuration and input problems yield a
        CONFIG_ERROR result with score 0 and classification RISQUE
    """
    variables = scoring_input.variables
    values = scoring_input.values
    policy = scoring_input.missing_policy

    # 1. Weights
    weight_sum, error = validate_weights(variables)
    if error:
        return _config_error(weight_sum, error)

    # 2. Variable configuration
    for variable in variables:
        error = validate_variable_config(variable)
        if error:
            return _config_error(weight_sum, error)

    # 3. Missing values
    missing = [v for v in variables if values.get(v.id) is None]
    if missing and policy is MissingPolicy.REFUSE:
        names = ", ".join(v.name for v in missing)
        return _config_error(weight_sum, f"Valeurs manquantes pour: {names}")

    # 4. Per-variable scores and blocking criteria
    details: list[VariableDetail] = []
    blocking_failed: list[BlockingFailed] = []
    total = 0.0

    for variable in variables:
        raw = values.get(variable.id)

        if raw is None:
            if policy is not MissingPolicy.PENALIZE:
                continue
            value = variable.min
        else:
            coerced = coerce_value(raw)
            if coerced is None:
                return _config_error(weight_sum, f'Valeur invalide pour "{variable.name}": {raw}')
            value = coerced

        score_variable = normalize_variable(value, variable.min, variable.max, variable.direction)
        score_pondere = score_variable * (variable.weight / 100)
        total += score_pondere

        details.append(
            VariableDetail(
                id=variable.id,
                name=variable.name,
                value=value,
                min=variable.min,
                max=variable.max,
                favorable_direction=variable.favorable_direction,
                weight=variable.weight,
                score_variable=score_variable,
                score_pondere=score_pondere,
            )
        )

        # Blocking uses the unclamped value; the bounds themselves pass
        if variable.blocking and (value < variable.min or value > variable.max):
            blocking_failed.append(
                BlockingFailed(
                    id=variable.id,
                    name=variable.name,
                    value=value,
                    min=variable.min,
                    max=variable.max,
                    message=_blocking_message(variable, value),
                )
            )

    # 5. Status and final score
    if blocking_failed:
        status = ScoringStatus.NON_ELIGIBLE
        score_final = 0.0
    else:
        status = ScoringStatus.ELIGIBLE
        score_final = round2(max(SCORE_MIN, min(SCORE_MAX, total)))

    # 6. Classification
    return ScoringResult(
        score_final=score_final,
        status=status,
        classification=classify_score(score_final),
        blocking_failed=blocking_failed,
        details=details,
        weight_sum=weight_sum,
    )
