"""Application layer: services built around the scoring engine."""
