"""
ogoue_scoring - Credit eligibility scoring for the OGOUÉ simulator

Modules:
    - core: Settings, logging, exceptions and scoring constants
    - domain: Pydantic models and the scoring engine
    - application: Scoring model loading and simulation services
    - ui: Streamlit simulator components
"""

__version__ = "1.2.0"
