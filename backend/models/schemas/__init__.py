"""Intermediate contracts for the similar-jobs pipeline."""

from models.schemas.scored_candidate import FactorName, ScoredCandidate

__all__ = [
    "FactorName",
    "ScoredCandidate",
]
