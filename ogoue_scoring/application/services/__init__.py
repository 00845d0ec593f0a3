"""Application services."""

from .model_loader import (
    build_scoring_model,
    check_model_configuration,
    list_scoring_models,
    load_scoring_model,
    variable_from_row,
)
from .simulation import (
    SimulationOutcome,
    SimulationStats,
    compute_simulation_stats,
    details_frame,
    recommend,
    run_simulation,
)

__all__ = [
    "build_scoring_model",
    "check_model_configuration",
    "list_scoring_models",
    "load_scoring_model",
    "variable_from_row",
    "SimulationOutcome",
    "SimulationStats",
    "compute_simulation_stats",
    "details_frame",
    "recommend",
    "run_simulation",
]
