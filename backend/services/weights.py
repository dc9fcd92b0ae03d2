"""Factor weight table for the weighted aggregator."""

import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from models.schemas.scored_candidate import FactorName

# Extras applied outside the table, each scaled to its own ceiling
POPULARITY_INCREMENT = 0.01


class FactorWeightTable(Mapping):
    """Ordered, read-only mapping of factor -> weight fraction.

    Weights must sum to 1.0 and only name known factors; ``validate()``
    raises ValueError otherwise.
    """

    TOLERANCE = 1e-9

    def __init__(self, weights: Mapping[FactorName, float]) -> None:
        self._weights = MappingProxyType(dict(weights))

    def __getitem__(self, factor: FactorName) -> float:
        return self._weights[factor]

    def __iter__(self) -> Iterator[FactorName]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def validate(self) -> "FactorWeightTable":
        for factor, weight in self._weights.items():
            if not isinstance(factor, FactorName):
                raise ValueError(f"Unknown factor in weight table: {factor!r}")
            if weight < 0:
                raise ValueError(f"Negative weight for {factor.value}: {weight}")
        total = math.fsum(self._weights.values())
        if abs(total - 1.0) > self.TOLERANCE:
            raise ValueError(f"Factor weights must sum to 1.0, got {total:.6f}")
        return self

    def as_dict(self) -> dict[str, float]:
        return {factor.value: weight for factor, weight in self._weights.items()}


DEFAULT_WEIGHTS = FactorWeightTable({
    FactorName.TITLE: 0.18,
    FactorName.SKILLS: 0.16,
    FactorName.LOCATION: 0.14,
    FactorName.SALARY: 0.12,
    FactorName.EXPERIENCE: 0.12,
    FactorName.INDUSTRY: 0.08,
    FactorName.JOB_TYPE: 0.06,
    FactorName.DEPARTMENT: 0.05,
    FactorName.WORK_MODE: 0.04,
    FactorName.COMPANY_SIZE: 0.02,
    FactorName.FEATURED: 0.02,
    FactorName.RECENCY: 0.01,
}).validate()
