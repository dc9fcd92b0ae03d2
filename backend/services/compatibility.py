"""Structured-field scorers for job-to-job similarity.

Every scorer is a pure function returning a value in [0, 1]. Categorical
fields are compared through lookup matrices indexed by enum ordinal
(row = target posting, column = candidate posting).
"""

import logging
import math
import re
from datetime import datetime

import numpy as np

from models.job import ExperienceLevel, JobPosting, JobType, WorkMode
from services.similarity import normalize_text

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lookup matrices
# ---------------------------------------------------------------------------

# entry, junior, mid, senior, lead, executive
EXPERIENCE_MATRIX = np.array([
    [1.00, 0.80, 0.40, 0.10, 0.05, 0.00],
    [0.70, 1.00, 0.80, 0.40, 0.10, 0.05],
    [0.30, 0.70, 1.00, 0.80, 0.40, 0.10],
    [0.10, 0.30, 0.70, 1.00, 0.80, 0.40],
    [0.05, 0.10, 0.40, 0.80, 1.00, 0.70],
    [0.00, 0.05, 0.10, 0.40, 0.70, 1.00],
])

# full-time, part-time, contract, internship, freelance
JOB_TYPE_MATRIX = np.array([
    [1.0, 0.4, 0.6, 0.2, 0.3],
    [0.4, 1.0, 0.5, 0.5, 0.7],
    [0.6, 0.5, 1.0, 0.2, 0.8],
    [0.2, 0.5, 0.2, 1.0, 0.2],
    [0.3, 0.7, 0.8, 0.2, 1.0],
])

# on-site, remote, hybrid
WORK_MODE_MATRIX = np.array([
    [1.0, 0.2, 0.7],
    [0.2, 1.0, 0.8],
    [0.7, 0.8, 1.0],
])

BOTH_MISSING_SCORE = 0.5
ONE_MISSING_SCORE = 0.3
UNRECOGNIZED_LABEL_SCORE = 0.2


def _matrix_score(matrix: np.ndarray, enum_cls, target_raw: str | None, candidate_raw: str | None) -> float:
    target_blank = not (target_raw or "").strip()
    candidate_blank = not (candidate_raw or "").strip()
    if target_blank and candidate_blank:
        return BOTH_MISSING_SCORE
    if target_blank or candidate_blank:
        return ONE_MISSING_SCORE

    target = enum_cls.parse(target_raw)
    candidate = enum_cls.parse(candidate_raw)
    if target is None or candidate is None:
        logger.debug(
            "Unrecognized %s label: %r / %r", enum_cls.__name__, target_raw, candidate_raw
        )
        return UNRECOGNIZED_LABEL_SCORE
    return float(matrix[target.ordinal, candidate.ordinal])


def experience_compatibility(target: str | None, candidate: str | None) -> float:
    return _matrix_score(EXPERIENCE_MATRIX, ExperienceLevel, target, candidate)


def job_type_compatibility(target: str | None, candidate: str | None) -> float:
    return _matrix_score(JOB_TYPE_MATRIX, JobType, target, candidate)


def work_mode_compatibility(target: str | None, candidate: str | None) -> float:
    return _matrix_score(WORK_MODE_MATRIX, WorkMode, target, candidate)


# ---------------------------------------------------------------------------
# Salary
# ---------------------------------------------------------------------------

SALARY_NO_INFO_SCORE = 0.5
SALARY_ONE_SIDED_SCORE = 0.3
W_SALARY_OVERLAP = 0.5
W_SALARY_RANGE = 0.3
W_SALARY_MIDPOINT = 0.2


def _salary_bounds(job: JobPosting) -> tuple[float, float]:
    low = float(job.salary_min) if job.salary_min is not None else 0.0
    high = float(job.salary_max) if job.salary_max is not None else math.inf
    if high < low:
        low, high = high, low
    return low, high


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, resolving the zero and infinite cases."""
    if math.isinf(denominator):
        return 1.0 if math.isinf(numerator) else 0.0
    if denominator <= 0:
        return 1.0 if numerator <= 0 else 0.0
    return numerator / denominator


def salary_compatibility(target: JobPosting, candidate: JobPosting) -> float:
    """Overlap-based compatibility of two salary ranges.

    Missing min counts as 0 and missing max as unbounded. Overlap coverage
    is measured against the narrower of the two ranges, so a range fully
    contained in the other scores full coverage. Ranges that only share an
    endpoint do not overlap; a fixed salary (min == max) lying inside the
    other range does.
    """
    target_has = target.has_salary_info
    candidate_has = candidate.has_salary_info
    if not target_has and not candidate_has:
        return SALARY_NO_INFO_SCORE
    if not target_has or not candidate_has:
        return SALARY_ONE_SIDED_SCORE

    t_low, t_high = _salary_bounds(target)
    c_low, c_high = _salary_bounds(candidate)
    overlap_low = max(t_low, c_low)
    overlap_high = min(t_high, c_high)
    t_range = t_high - t_low
    c_range = c_high - c_low
    if overlap_low > overlap_high:
        return 0.0
    if overlap_low == overlap_high and t_range > 0 and c_range > 0:
        return 0.0

    overlap = overlap_high - overlap_low
    coverage = min(1.0, _ratio(overlap, min(t_range, c_range)))
    range_ratio = _ratio(min(t_range, c_range), max(t_range, c_range))

    t_mid = (t_low + t_high) / 2
    c_mid = (c_low + c_high) / 2
    if math.isinf(t_mid) or math.isinf(c_mid):
        midpoint_score = 1.0 if math.isinf(t_mid) and math.isinf(c_mid) else 0.0
    elif max(t_mid, c_mid) <= 0:
        midpoint_score = 1.0
    else:
        midpoint_score = 1.0 - abs(t_mid - c_mid) / max(t_mid, c_mid)

    score = (
        W_SALARY_OVERLAP * coverage
        + W_SALARY_RANGE * range_ratio
        + W_SALARY_MIDPOINT * midpoint_score
    )
    return min(1.0, max(0.0, score))


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

LOCATION_EXACT = 1.0
LOCATION_CITY = 0.95
LOCATION_STATE = 0.75
LOCATION_COUNTRY = 0.4
LOCATION_PER_SHARED_WORD = 0.1
LOCATION_SHARED_WORD_CAP = 0.3

_SEGMENT_RE = re.compile(r"\s*,\s*")


def _location_segments(location: str | None) -> list[str]:
    if not location:
        return []
    segments = (normalize_text(part) for part in _SEGMENT_RE.split(location))
    return [s for s in segments if s]


def location_proximity(target: str | None, candidate: str | None) -> float:
    """Compare comma-separated "city, state, country" style locations."""
    t_segments = _location_segments(target)
    c_segments = _location_segments(candidate)
    if not t_segments or not c_segments:
        return 0.0

    if t_segments == c_segments:
        return LOCATION_EXACT
    if t_segments[0] == c_segments[0]:
        return LOCATION_CITY
    if len(t_segments) >= 2 and len(c_segments) >= 2 and t_segments[1] == c_segments[1]:
        return LOCATION_STATE
    if t_segments[-1] == c_segments[-1]:
        return LOCATION_COUNTRY

    t_words = {w for seg in t_segments for w in seg.split(" ")}
    c_words = {w for seg in c_segments for w in seg.split(" ")}
    shared = len(t_words & c_words)
    return min(LOCATION_SHARED_WORD_CAP, LOCATION_PER_SHARED_WORD * shared)


# ---------------------------------------------------------------------------
# Company, promotion and activity signals
# ---------------------------------------------------------------------------

COMPANY_SIZE_MISMATCH = 0.3


def company_size_match(target: str | None, candidate: str | None) -> float | None:
    """1.0 on exact match, 0.3 otherwise; None (factor omitted) if absent."""
    t = normalize_text(target)
    c = normalize_text(candidate)
    if not t or not c:
        return None
    return 1.0 if t == c else COMPANY_SIZE_MISMATCH


def featured_boost(candidate: JobPosting) -> float:
    boost = 0.0
    if candidate.is_featured or candidate.is_premium:
        boost += 0.5
    if candidate.company.is_featured:
        boost += 0.3
    if candidate.company.rating is not None and candidate.company.rating > 4.0:
        boost += 0.2
    return min(1.0, boost)


# (max age in days, score), checked in order
RECENCY_BUCKETS: list[tuple[int, float]] = [
    (1, 1.0),
    (7, 0.8),
    (30, 0.6),
    (90, 0.4),
]
RECENCY_FLOOR = 0.2


def recency_score(created_at: datetime | None, now: datetime) -> float:
    if created_at is None:
        return RECENCY_FLOOR
    age_days = (now - created_at).total_seconds() / 86400
    for max_days, score in RECENCY_BUCKETS:
        if age_days < max_days:
            return score
    return RECENCY_FLOOR


def popularity_score(view_count: int | None, application_count: int | None) -> float:
    views = max(0, view_count or 0)
    applications = max(0, application_count or 0)
    return min(1.0, views / 1000 + applications / 100)


CAREER_PROGRESSION_BONUS = 0.1


def career_progression_bonus(target: str | None, candidate: str | None) -> float:
    """Bonus when the candidate is strictly more senior than the target."""
    t = ExperienceLevel.parse(target)
    c = ExperienceLevel.parse(candidate)
    if t is None or c is None:
        return 0.0
    return CAREER_PROGRESSION_BONUS if c.ordinal > t.ordinal else 0.0
