"""Per-request scoring result for one candidate posting."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from models.job import JobPosting


class FactorName(str, Enum):
    """Similarity dimensions, in weight-table order."""

    TITLE = "title"
    SKILLS = "skills"
    LOCATION = "location"
    SALARY = "salary"
    EXPERIENCE = "experience"
    INDUSTRY = "industry"
    JOB_TYPE = "job_type"
    DEPARTMENT = "department"
    WORK_MODE = "work_mode"
    COMPANY_SIZE = "company_size"
    FEATURED = "featured"
    RECENCY = "recency"
    # Unweighted extras, added outside the weight table
    POPULARITY = "popularity"
    CAREER_PROGRESSION = "career_progression"


class ScoredCandidate(BaseModel):
    """A candidate posting with its composite and per-factor scores.

    Built once per request per candidate and discarded after formatting.
    """

    posting: JobPosting
    composite_score: float = 0.0  # always within [0, 1]
    factor_scores: dict[FactorName, float] = Field(default_factory=dict)
    fetch_position: int = 0  # index in the most-recent-first candidate pool

    @field_validator("composite_score")
    @classmethod
    def clamp_score(cls, v: float) -> float:
        return min(1.0, max(0.0, v))
