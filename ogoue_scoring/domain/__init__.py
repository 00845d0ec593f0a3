"""Domain layer: data models and the scoring engine."""
