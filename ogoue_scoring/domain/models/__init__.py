"""Data models for ogoue_scoring."""

from .result import BlockingFailed, ScoringResult, VariableDetail
from .variable import RawValue, ScoringInput, ScoringModel, Variable

__all__ = [
    "BlockingFailed",
    "RawValue",
    "ScoringInput",
    "ScoringModel",
    "ScoringResult",
    "Variable",
    "VariableDetail",
]
