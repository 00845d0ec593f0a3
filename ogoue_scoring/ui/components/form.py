"""Applicant form: one input per scoring variable."""

from __future__ import annotations

from typing import Any

import streamlit as st

from ogoue_scoring.core.scoring_constants import FavorableDirection, MissingPolicy
from ogoue_scoring.domain.calculator.scoring import format_number
from ogoue_scoring.domain.models.variable import ScoringModel, Variable

POLICY_LABELS = {
    MissingPolicy.REFUSE: "Refuser (valeur obligatoire)",
    MissingPolicy.PENALIZE: "Pénaliser (valeur minimale)",
}


def variable_help(variable: Variable) -> str:
    """Tooltip describing range, direction and blocking status."""
    sens = "plus élevé = mieux" if variable.direction is FavorableDirection.CROISSANT else "plus faible = mieux"
    unit = f" {variable.unit}" if variable.unit else ""
    text = (
        f"Plage: {format_number(variable.min)} – {format_number(variable.max)}{unit} "
        f"· Poids: {format_number(variable.weight)}% · {sens}"
    )
    if variable.blocking:
        text += " · Critère bloquant"
    return text


def render_variable_inputs(model: ScoringModel, key_prefix: str = "var") -> dict[str, Any]:
    """Render the applicant form.

    Empty inputs are returned as None so the missing-value policy applies.

    Returns:
        Values by variable id
    """
    values: dict[str, Any] = {}
    cols = st.columns(2)
    for i, variable in enumerate(model.variables):
        label = variable.name + (f" ({variable.unit})" if variable.unit else "")
        if variable.blocking:
            label = "🔒 " + label
        with cols[i % 2]:
            values[variable.id] = st.number_input(
                label,
                value=None,
                placeholder=f"{format_number(variable.min)} – {format_number(variable.max)}",
                help=variable_help(variable),
                key=f"{key_prefix}_{model.id or model.name}_{variable.id}",
            )
    return values


def render_policy_selector(default: MissingPolicy) -> MissingPolicy:
    """Missing-value policy radio."""
    options = list(MissingPolicy)
    return st.radio(
        "Valeurs manquantes",
        options,
        index=options.index(default),
        format_func=lambda p: POLICY_LABELS[p],
        horizontal=True,
    )
