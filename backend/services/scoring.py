"""Weighted aggregator: per-factor scores -> composite similarity score.

composite = sum(weight_i * factor_i for factors present)
          + POPULARITY_INCREMENT * popularity
          + career-progression bonus
then x same_company_boost when both postings share a company, clamped to
[0, 1]. Factors that cannot be computed (company size, industry when the
company metadata is missing) are left out of the sum rather than scored 0.
"""

from collections.abc import Callable
from datetime import datetime

from config import settings
from models.job import JobPosting
from models.schemas.scored_candidate import FactorName, ScoredCandidate
from services import compatibility
from services.similarity import array_similarity, text_similarity
from services.weights import DEFAULT_WEIGHTS, POPULARITY_INCREMENT, FactorWeightTable

# Scorer signature: (target, candidate, now) -> score in [0, 1], or None to omit
FactorScorer = Callable[[JobPosting, JobPosting, datetime], float | None]


def _industry(target: JobPosting, candidate: JobPosting, now: datetime) -> float | None:
    if not target.company.industry or not candidate.company.industry:
        return None
    return text_similarity(target.company.industry, candidate.company.industry)


FACTOR_SCORERS: dict[FactorName, FactorScorer] = {
    FactorName.TITLE: lambda t, c, now: text_similarity(t.title, c.title),
    FactorName.SKILLS: lambda t, c, now: array_similarity(t.skills, c.skills),
    FactorName.LOCATION: lambda t, c, now: compatibility.location_proximity(t.location, c.location),
    FactorName.SALARY: lambda t, c, now: compatibility.salary_compatibility(t, c),
    FactorName.EXPERIENCE: lambda t, c, now: compatibility.experience_compatibility(
        t.experience_level, c.experience_level
    ),
    FactorName.INDUSTRY: _industry,
    FactorName.JOB_TYPE: lambda t, c, now: compatibility.job_type_compatibility(t.job_type, c.job_type),
    FactorName.DEPARTMENT: lambda t, c, now: text_similarity(t.department, c.department),
    FactorName.WORK_MODE: lambda t, c, now: compatibility.work_mode_compatibility(
        t.remote_work, c.remote_work
    ),
    FactorName.COMPANY_SIZE: lambda t, c, now: compatibility.company_size_match(
        t.company.company_size, c.company.company_size
    ),
    FactorName.FEATURED: lambda t, c, now: compatibility.featured_boost(c),
    FactorName.RECENCY: lambda t, c, now: compatibility.recency_score(c.created_at, now),
    FactorName.POPULARITY: lambda t, c, now: compatibility.popularity_score(
        c.view_count, c.application_count
    ),
    FactorName.CAREER_PROGRESSION: lambda t, c, now: compatibility.career_progression_bonus(
        t.experience_level, c.experience_level
    ),
}


def compute_factor_scores(
    target: JobPosting,
    candidate: JobPosting,
    now: datetime,
) -> dict[FactorName, float]:
    """Run every factor scorer; omitted factors are absent from the result."""
    scores: dict[FactorName, float] = {}
    for factor, scorer in FACTOR_SCORERS.items():
        value = scorer(target, candidate, now)
        if value is not None:
            scores[factor] = min(1.0, max(0.0, float(value)))
    return scores


def aggregate(
    factor_scores: dict[FactorName, float],
    same_company: bool,
    weights: FactorWeightTable = DEFAULT_WEIGHTS,
    same_company_boost: float | None = None,
) -> float:
    boost = settings.same_company_boost if same_company_boost is None else same_company_boost

    score = sum(
        weight * factor_scores[factor]
        for factor, weight in weights.items()
        if factor in factor_scores
    )
    score += POPULARITY_INCREMENT * factor_scores.get(FactorName.POPULARITY, 0.0)
    score += factor_scores.get(FactorName.CAREER_PROGRESSION, 0.0)

    if same_company:
        score *= max(1.0, boost)
    return min(1.0, max(0.0, score))


def score_candidate(
    target: JobPosting,
    candidate: JobPosting,
    now: datetime,
    fetch_position: int = 0,
    weights: FactorWeightTable = DEFAULT_WEIGHTS,
) -> ScoredCandidate:
    factor_scores = compute_factor_scores(target, candidate, now)
    composite = aggregate(
        factor_scores,
        same_company=candidate.company_id == target.company_id,
        weights=weights,
    )
    return ScoredCandidate(
        posting=candidate,
        composite_score=composite,
        factor_scores=factor_scores,
        fetch_position=fetch_position,
    )


def score_candidates(
    target: JobPosting,
    candidates: list[JobPosting],
    now: datetime,
    weights: FactorWeightTable = DEFAULT_WEIGHTS,
) -> list[ScoredCandidate]:
    """Score a candidate pool, preserving its order."""
    return [
        score_candidate(target, candidate, now, fetch_position=i, weights=weights)
        for i, candidate in enumerate(candidates)
    ]
