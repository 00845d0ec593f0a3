"""Scoring constants - single source of truth for the engine contract.

Weight tolerance and classification bounds are part of the scoring
contract and are not configurable.
"""

from enum import Enum


class FavorableDirection(str, Enum):
    """Direction in which a variable improves the score."""

    CROISSANT = "CROISSANT"      # higher is better
    DECROISSANT = "DECROISSANT"  # lower is better


class MissingPolicy(str, Enum):
    """Handling of variables without an applicant value."""

    REFUSE = "REFUSE"      # any missing value is an input error
    PENALIZE = "PENALIZE"  # missing value is replaced by the variable's min


class ScoringStatus(str, Enum):
    ELIGIBLE = "ELIGIBLE"
    NON_ELIGIBLE = "NON_ELIGIBLE"
    CONFIG_ERROR = "CONFIG_ERROR"


class Classification(str, Enum):
    RISQUE = "RISQUE"
    MOYEN = "MOYEN"
    BON = "BON"
    EXCELLENT = "EXCELLENT"


class Recommendation(str, Enum):
    """Recommendation stored alongside a simulation."""

    ELIGIBLE = "eligible"
    CONDITIONAL = "conditional"
    INELIGIBLE = "ineligible"


# Weights are percentage points
WEIGHT_TOTAL = 100.0
WEIGHT_TOLERANCE = 0.1

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Upper bounds (exclusive), checked in order; anything above is EXCELLENT
CLASSIFICATION_THRESHOLDS: tuple[tuple[float, Classification], ...] = (
    (40.0, Classification.RISQUE),
    (60.0, Classification.MOYEN),
    (80.0, Classification.BON),
)

# Display labels used by the simulator
CLASSIFICATION_LABELS = {
    Classification.RISQUE: "Risqué",
    Classification.MOYEN: "Moyen",
    Classification.BON: "Bon",
    Classification.EXCELLENT: "Excellent",
}

STATUS_LABELS = {
    ScoringStatus.ELIGIBLE: "Éligible",
    ScoringStatus.NON_ELIGIBLE: "Non éligible",
    ScoringStatus.CONFIG_ERROR: "Erreur de configuration",
}
