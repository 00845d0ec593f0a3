"""Application controller - orchestrates UI and scoring services.

Each function is one step of the simulator flow, kept out of app.py so it
can be tested without rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import streamlit as st

from ogoue_scoring.application.services.model_loader import check_model_configuration, list_scoring_models
from ogoue_scoring.application.services.simulation import (
    SimulationOutcome,
    SimulationStats,
    compute_simulation_stats,
    run_simulation,
)
from ogoue_scoring.core.logging import get_logger
from ogoue_scoring.core.scoring_constants import MissingPolicy
from ogoue_scoring.domain.models.variable import ScoringModel
from ogoue_scoring.ui.state import SessionManager

log = get_logger(__name__)


def load_models() -> list[ScoringModel]:
    """Load scoring models from session or disk."""
    models = SessionManager.get_models()
    if models:
        log.debug("scoring_models_loaded_from_session", count=len(models))
        return models

    models = list_scoring_models()
    if not models:
        st.warning("Aucun modèle de scoring disponible.")
    SessionManager.set_models(models)
    return models


def model_warnings(model: ScoringModel) -> list[str]:
    """Configuration problems to show before the form is submitted."""
    return check_model_configuration(model.variables)


def simulate(
    model: ScoringModel,
    values: Mapping[str, Any],
    missing_policy: MissingPolicy,
) -> SimulationOutcome:
    """Score the submitted form and record it in the session."""
    outcome = run_simulation(model, values, missing_policy)
    SessionManager.record_outcome(outcome)
    return outcome


def session_stats() -> SimulationStats:
    """Statistics over the session's scored simulations (configuration errors excluded)."""
    scores = [
        o.result.score_final
        for o in SessionManager.get_history()
        if not o.result.is_config_error
    ]
    return compute_simulation_stats(scores)
