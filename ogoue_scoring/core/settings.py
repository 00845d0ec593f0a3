"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings

from ogoue_scoring.core.exceptions import ConfigurationError
from ogoue_scoring.core.scoring_constants import MissingPolicy

DEFAULT_MODELS_DIR = Path(__file__).parent.parent.parent / "data" / "scoring_models"


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    # Scoring
    default_missing_policy: MissingPolicy = Field(
        default=MissingPolicy.REFUSE,
        description="Policy applied when a simulation does not specify one",
    )
    models_dir: Path = Field(default=DEFAULT_MODELS_DIR, description="Directory of JSON scoring models")

    # Recommendation thresholds (score_final)
    eligible_threshold: float = Field(default=60.0, ge=0, le=100)
    conditional_threshold: float = Field(default=40.0, ge=0, le=100)

    model_config = {
        "env_prefix": "OGOUE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def check_thresholds(self) -> "AppSettings":
        if self.conditional_threshold > self.eligible_threshold:
            raise ValueError("conditional_threshold must not exceed eligible_threshold")
        return self


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid OGOUE_* settings: {e}") from e
