"""Scoring model loading.

Builds ScoringModel objects from persisted variable rows (``min_value``,
``max_value``, ``favorable_direction``, ``is_blocking``) or from the
request shape (``min``, ``max``, ``favorableDirection``, ``isBlocking``),
and reads models stored as JSON files.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ogoue_scoring.core.exceptions import DataLoadError, ScoringModelError
from ogoue_scoring.core.logging import get_logger
from ogoue_scoring.core.scoring_constants import FavorableDirection
from ogoue_scoring.core.settings import get_settings
from ogoue_scoring.domain.calculator.scoring import validate_variable_config, validate_weights
from ogoue_scoring.domain.models.variable import ScoringModel, Variable

log = get_logger(__name__)


def _first_present(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None and value != "":
            return value
    return None


def variable_from_row(row: Mapping[str, Any]) -> Variable:
    """Map a stored variable row to a Variable.

    Direction is upper-cased and defaults to CROISSANT. An unknown direction
    is kept so that scoring reports it as a configuration error.

    Raises:
        ScoringModelError: If name, weight, min or max is missing or invalid
    """
    name = _first_present(row, "name", "variable_name")
    weight = _first_present(row, "weight")
    min_value = _first_present(row, "min_value", "min")
    max_value = _first_present(row, "max_value", "max")

    if name is None or weight is None or min_value is None or max_value is None:
        raise ScoringModelError(
            f"Each variable must have name, weight, min, and max (got {dict(row)!r})"
        )

    direction = _first_present(row, "favorable_direction", "favorableDirection", "favorable_sense")
    direction = str(direction or FavorableDirection.CROISSANT.value).strip().upper()
    blocking = _first_present(row, "is_blocking", "isBlocking", "blocking")
    if isinstance(blocking, str):
        blocking = blocking.strip().lower() in {"true", "1", "oui", "yes"}

    try:
        return Variable(
            id=str(_first_present(row, "id", "field_key") or name),
            name=str(name),
            weight=weight,
            min=min_value,
            max=max_value,
            favorable_direction=direction,
            blocking=bool(blocking),
            unit=_first_present(row, "unit"),
        )
    except ValidationError as e:
        raise ScoringModelError(f"Invalid variable '{name}': {e}") from e


def build_scoring_model(payload: Mapping[str, Any]) -> ScoringModel:
    """Build a ScoringModel from a model payload.

    Raises:
        ScoringModelError: If the name or variables are missing or invalid
    """
    name = payload.get("name")
    rows = payload.get("variables")

    if not name or not isinstance(rows, list) or not rows:
        raise ScoringModelError("Name and at least one variable are required")

    variables = [variable_from_row(row) for row in rows]
    model_id = payload.get("id")
    return ScoringModel(
        id=str(model_id) if model_id is not None else None,
        name=str(name),
        description=payload.get("description"),
        variables=variables,
    )


def check_model_configuration(variables: Iterable[Variable]) -> list[str]:
    """List every configuration problem of a set of variables.

    Runs the same checks as scoring (weights, ranges, directions) without
    stopping at the first failure.

    Returns:
        Error messages, empty when the configuration is valid
    """
    variables = list(variables)
    errors: list[str] = []

    _, weight_error = validate_weights(variables)
    if weight_error:
        errors.append(weight_error)

    for variable in variables:
        error = validate_variable_config(variable)
        if error:
            errors.append(error)

    return errors


def load_scoring_model(path: str | Path) -> ScoringModel:
    """Load a scoring model from a JSON file.

    Raises:
        DataLoadError: If the file cannot be read or parsed
        ScoringModelError: If the model definition is invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Cannot load scoring model {path}: {e}") from e

    if not isinstance(payload, dict):
        raise DataLoadError(f"Scoring model {path} must be a JSON object")

    model = build_scoring_model(payload)

    problems = check_model_configuration(model.variables)
    if problems:
        log.warning("scoring_model_misconfigured", path=str(path), problems=problems)

    log.info("scoring_model_loaded", path=str(path), name=model.name, variables=len(model.variables))
    return model


def list_scoring_models(directory: str | Path | None = None) -> list[ScoringModel]:
    """Load every JSON scoring model of a directory, sorted by file name.

    Files that fail to load are logged and skipped.
    """
    directory = Path(directory) if directory is not None else get_settings().models_dir
    if not directory.is_dir():
        log.warning("scoring_models_dir_missing", path=str(directory))
        return []

    models: list[ScoringModel] = []
    for path in sorted(directory.glob("*.json")):
        try:
            models.append(load_scoring_model(path))
        except (DataLoadError, ScoringModelError) as e:
            log.error("scoring_model_skipped", path=str(path), error=str(e))

    return models
