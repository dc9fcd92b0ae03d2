"""Job posting records as read from the job store.

Categorical fields (experience level, job type, work mode) are kept as raw
strings on the posting because stored data is free text. Scorers resolve
them to the enums below with ``parse()``; an unrecognized label resolves to
``None`` and is scored with a fallback value.
"""

import re
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator

_LABEL_SEP_RE = re.compile(r"[\s_]+")


def _canonical_label(raw: str) -> str:
    return _LABEL_SEP_RE.sub("-", raw.strip().lower())


class _LabelEnum(str, Enum):
    """String enum with alias-aware parsing and a stable ordinal."""

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def parse(cls, raw: str | None):
        """Resolve a free-text label to a variant, or None if unknown/blank."""
        if raw is None:
            return None
        label = _canonical_label(raw)
        if not label:
            return None
        label = cls._aliases().get(label, label)
        try:
            return cls(label)
        except ValueError:
            return None

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)


class ExperienceLevel(_LabelEnum):
    """Ordered from least to most senior."""

    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {
            "entry-level": "entry",
            "fresher": "entry",
            "jr": "junior",
            "mid-level": "mid",
            "intermediate": "mid",
            "sr": "senior",
            "principal": "lead",
            "manager": "lead",
            "director": "executive",
            "exec": "executive",
        }


class JobType(_LabelEnum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {
            "fulltime": "full-time",
            "permanent": "full-time",
            "parttime": "part-time",
            "contractual": "contract",
            "temporary": "contract",
            "intern": "internship",
        }


class WorkMode(_LabelEnum):
    ON_SITE = "on-site"
    REMOTE = "remote"
    HYBRID = "hybrid"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {
            "onsite": "on-site",
            "office": "on-site",
            "in-office": "on-site",
            "work-from-home": "remote",
            "wfh": "remote",
        }


class CompanyInfo(BaseModel):
    id: str
    name: str = ""
    industry: str | None = None
    company_size: str | None = None
    is_featured: bool = False
    rating: float | None = None


class JobPosting(BaseModel):
    """A job posting. Read-only to the similarity engine."""

    id: str
    title: str
    description: str = ""
    location: str | None = None
    salary: str | None = None  # explicit display string, wins over min/max
    salary_min: float | None = None
    salary_max: float | None = None
    salary_currency: str | None = None
    experience_level: str | None = None
    job_type: str | None = None
    remote_work: str | None = None
    department: str | None = None
    skills: list[str] = Field(default_factory=list)
    company: CompanyInfo
    is_featured: bool = False
    is_premium: bool = False
    view_count: int | None = None
    application_count: int | None = None
    status: str = "active"
    region: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    expires_at: datetime | None = None

    @field_validator("created_at", "updated_at", "expires_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def company_id(self) -> str:
        return self.company.id

    @property
    def has_salary_info(self) -> bool:
        return self.salary_min is not None or self.salary_max is not None
