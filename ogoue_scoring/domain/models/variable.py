"""Scoring variable and input models.

A variable is one weighted criterion of a scoring model. Its range
[min, max] drives normalization and, for blocking variables, eligibility.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ogoue_scoring.core.scoring_constants import FavorableDirection, MissingPolicy

RawValue = float | str | None


class Variable(BaseModel):
    """Scoring criterion definition.

    Range and direction are validated by the engine, not here, so that a
    misconfigured model yields a CONFIG_ERROR result instead of an exception.
    """

    id: str = Field(..., description="Stable key of the applicant value")
    name: str = Field(..., description="Display label")
    weight: float = Field(..., description="Contribution in percentage points")
    min: float = Field(..., description="Lower bound of the normalization range")
    max: float = Field(..., description="Upper bound of the normalization range")
    favorable_direction: str = Field(
        default=FavorableDirection.CROISSANT.value,
        alias="favorableDirection",
        description="CROISSANT (higher is better) or DECROISSANT (lower is better)",
    )
    blocking: bool = Field(default=False, description="Out-of-range value disqualifies the applicant")
    unit: str | None = Field(None, description="Display unit (FCFA, %, années...)")

    model_config = {
        "populate_by_name": True,
    }

    @property
    def direction(self) -> FavorableDirection | None:
        """Parsed direction, or None when unrecognized."""
        try:
            return FavorableDirection(self.favorable_direction)
        except ValueError:
            return None


class ScoringInput(BaseModel):
    """Everything the engine needs for one scoring request."""

    variables: list[Variable] = Field(default_factory=list, description="Ordered scoring variables")
    values: dict[str, RawValue] = Field(default_factory=dict, description="Applicant values by variable id")
    missing_policy: MissingPolicy = Field(
        default=MissingPolicy.REFUSE,
        alias="missingPolicy",
        description="REFUSE or PENALIZE missing values",
    )

    model_config = {
        "populate_by_name": True,
    }


class ScoringModel(BaseModel):
    """Named set of weighted variables configured by an institution."""

    id: str | None = Field(None, description="Model identifier")
    name: str = Field(..., min_length=1, description="Model name")
    description: str | None = Field(None, description="Free-text description")
    variables: list[Variable] = Field(..., min_length=1, description="Weighted variables")

    @property
    def weight_sum(self) -> float:
        return sum(v.weight for v in self.variables)
