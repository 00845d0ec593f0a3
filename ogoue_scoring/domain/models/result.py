"""Scoring result models.

Results are frozen: one immutable result per engine call.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ogoue_scoring.core.scoring_constants import Classification, ScoringStatus

_FROZEN = {"frozen": True, "populate_by_name": True}


class VariableDetail(BaseModel):
    """Per-variable breakdown of a computed score."""

    id: str
    name: str
    value: float = Field(..., description="Coerced applicant value, before clamping")
    min: float
    max: float
    favorable_direction: str = Field(..., alias="favorableDirection")
    weight: float
    score_variable: float = Field(..., description="Normalized score 0-100")
    score_pondere: float = Field(..., description="score_variable x weight / 100")

    model_config = _FROZEN


class BlockingFailed(BaseModel):
    """Blocking variable whose value falls outside its range."""

    id: str
    name: str
    value: float
    min: float
    max: float
    message: str

    model_config = _FROZEN


class ScoringResult(BaseModel):
    """Outcome of one scoring request."""

    score_final: float = Field(default=0.0, ge=0, le=100, description="Final score 0-100")
    status: ScoringStatus
    classification: Classification = Classification.RISQUE
    blocking_failed: list[BlockingFailed] = Field(default_factory=list)
    details: list[VariableDetail] = Field(default_factory=list)
    weight_sum: float = Field(default=0.0, description="Sum of variable weights")
    error: str | None = Field(None, description="Set only when status is CONFIG_ERROR")

    model_config = _FROZEN

    @property
    def is_eligible(self) -> bool:
        return self.status is ScoringStatus.ELIGIBLE

    @property
    def is_config_error(self) -> bool:
        return self.status is ScoringStatus.CONFIG_ERROR

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase wire names, omitting an absent error."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
