"""Shared test fixtures: job factory, fixed clock and in-memory store."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from models.job import CompanyInfo, JobPosting
from services.job_store import InMemoryJobStore

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_job():
    """Factory for JobPosting with sensible, fully-populated defaults."""

    def _make(**overrides) -> JobPosting:
        company = overrides.pop("company", None)
        if company is None:
            company = CompanyInfo(
                id=overrides.pop("company_id", "company-a"),
                name=overrides.pop("company_name", "Acme Corp"),
                industry=overrides.pop("industry", "Information Technology"),
                company_size=overrides.pop("company_size", "51-200"),
                rating=overrides.pop("rating", 3.5),
            )
        age_days = overrides.pop("age_days", 3)
        fields = {
            "id": new_id(),
            "title": "Senior Python Developer",
            "description": "Build backend services with Python and PostgreSQL.",
            "location": "Bangalore, Karnataka, India",
            "salary_min": 800_000,
            "salary_max": 1_200_000,
            "salary_currency": "INR",
            "experience_level": "senior",
            "job_type": "full-time",
            "remote_work": "hybrid",
            "department": "Engineering",
            "skills": ["Python", "Django", "PostgreSQL"],
            "company": company,
            "view_count": 120,
            "application_count": 8,
            "status": "active",
            "region": "india",
            "created_at": NOW - timedelta(days=age_days),
        }
        fields.update(overrides)
        return JobPosting(**fields)

    return _make


@pytest.fixture
def store() -> InMemoryJobStore:
    return InMemoryJobStore()
