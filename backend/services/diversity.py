"""Diversity selector: top-K by composite score with a per-company cap."""

import logging
import math
from collections import Counter

from models.schemas.scored_candidate import ScoredCandidate

logger = logging.getLogger(__name__)


def max_per_company(limit: int) -> int:
    return math.ceil(limit / 2)


def rank_candidates(scored: list[ScoredCandidate]) -> list[ScoredCandidate]:
    """Sort by composite score, descending; ties keep fetch order."""
    return sorted(scored, key=lambda c: (-c.composite_score, c.fetch_position))


def select_diverse(
    scored: list[ScoredCandidate],
    limit: int,
    hard_cap: bool = False,
) -> list[ScoredCandidate]:
    """Greedily pick up to ``limit`` candidates in score order.

    A candidate is admitted while its company is under the cap, or while
    fewer than ``limit`` candidates have been admitted. Since the walk stops
    at ``limit``, the second clause lets a single company fill the list when
    the pool lacks diversity, so in this mode the cap never rejects anyone.
    ``hard_cap=True`` drops the second clause and enforces the cap strictly.
    """
    if limit <= 0:
        return []

    cap = max_per_company(limit)
    per_company: Counter[str] = Counter()
    selected: list[ScoredCandidate] = []
    for candidate in rank_candidates(scored):
        if len(selected) >= limit:
            break
        company_id = candidate.posting.company_id
        under_cap = per_company[company_id] < cap
        if under_cap or (not hard_cap and len(selected) < limit):
            selected.append(candidate)
            per_company[company_id] += 1

    if not hard_cap and any(n > cap for n in per_company.values()):
        logger.debug("Soft company cap exceeded: %s (cap %d)", dict(per_company), cap)
    return selected
