"""Custom exceptions for ogoue_scoring.

The scoring engine reports configuration problems as data (CONFIG_ERROR
results). These exceptions cover the layers around it: loading scoring
models and validating service parameters.
"""

from __future__ import annotations

from typing import Any


class OgoueError(Exception):
    """Base exception for all ogoue_scoring errors."""
    pass


# --- Data Errors ---

class DataLoadError(OgoueError):
    """Failed to load or parse data files (e.g., scoring model JSON)."""
    pass


class ScoringModelError(OgoueError):
    """Invalid or incomplete scoring model definition."""
    pass


class InvalidParameterError(OgoueError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Configuration Errors ---

class ConfigurationError(OgoueError):
    """Error in application configuration."""
    pass
