"""Settings, logging, exceptions and scoring constants."""

from .exceptions import (
    ConfigurationError,
    DataLoadError,
    InvalidParameterError,
    OgoueError,
    ScoringModelError,
)
from .scoring_constants import (
    Classification,
    FavorableDirection,
    MissingPolicy,
    Recommendation,
    ScoringStatus,
)

__all__ = [
    "Classification",
    "FavorableDirection",
    "MissingPolicy",
    "Recommendation",
    "ScoringStatus",
    # Exceptions
    "OgoueError",
    "DataLoadError",
    "ScoringModelError",
    "InvalidParameterError",
    "ConfigurationError",
]
