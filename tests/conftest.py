"""Pytest fixtures for ogoue_scoring tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ogoue_scoring.core.settings import get_settings
from ogoue_scoring.domain.models.variable import ScoringInput, ScoringModel, Variable


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; reset around each test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ca_variable():
    """Turnover, higher is better (50 000 - 200 000)."""
    return Variable(
        id="ca",
        name="Chiffre d'Affaires",
        weight=100,
        min=50000,
        max=200000,
        favorable_direction="CROISSANT",
    )


@pytest.fixture
def debt_variable():
    """Debt ratio, lower is better (0 - 100)."""
    return Variable(
        id="debt_ratio",
        name="Ratio d'Endettement",
        weight=100,
        min=0,
        max=100,
        favorable_direction="DECROISSANT",
    )


@pytest.fixture
def seniority_variable():
    """Blocking seniority criterion (2 - 50 years)."""
    return Variable(
        id="age",
        name="Ancienneté",
        weight=100,
        min=2,
        max=50,
        favorable_direction="CROISSANT",
        blocking=True,
    )


@pytest.fixture
def complete_variables():
    """Three-variable model: turnover, blocking seniority, debt ratio."""
    return [
        Variable(id="ca", name="Chiffre d'Affaires", weight=40, min=50000, max=500000,
                 favorable_direction="CROISSANT"),
        Variable(id="age", name="Ancienneté", weight=30, min=1, max=20,
                 favorable_direction="CROISSANT", blocking=True),
        Variable(id="debt_ratio", name="Ratio d'Endettement", weight=30, min=0, max=80,
                 favorable_direction="DECROISSANT"),
    ]


@pytest.fixture
def complete_model(complete_variables):
    return ScoringModel(id="pme", name="PME Standard", variables=complete_variables)


@pytest.fixture
def make_input():
    """Factory building a ScoringInput from variables and values."""
    def _make(variables, values, missing_policy="REFUSE"):
        return ScoringInput(variables=variables, values=values, missing_policy=missing_policy)
    return _make


@pytest.fixture
def model_rows():
    """Variable rows as stored in the model_variables table."""
    return [
        {"id": "v1", "name": "Chiffre d'affaires", "weight": 60, "min_value": 0,
         "max_value": 1000, "favorable_direction": "Croissant", "is_blocking": False, "unit": "FCFA"},
        {"id": "v2", "name": "Endettement", "weight": 40, "min_value": 0,
         "max_value": 100, "favorable_direction": "decroissant", "is_blocking": True},
    ]
