"""Result formatter: ScoredCandidate -> DisplayRecord."""

from datetime import datetime

from config import settings
from models.responses import CompanySummary, DisplayRecord
from models.schemas.scored_candidate import ScoredCandidate

NOT_DISCLOSED = "Not disclosed"
ELLIPSIS = "..."


def _money(amount: float) -> str:
    return f"{amount:,.0f}"


def format_salary(
    salary: str | None,
    salary_min: float | None,
    salary_max: float | None,
    currency: str | None = None,
) -> str:
    if salary and salary.strip():
        return salary.strip()

    prefix = f"{currency.strip()} " if currency and currency.strip() else ""
    if salary_min is not None and salary_max is not None:
        return f"{prefix}{_money(salary_min)} - {_money(salary_max)}"
    if salary_min is not None:
        return f"{prefix}{_money(salary_min)}+"
    if salary_max is not None:
        return f"Up to {prefix}{_money(salary_max)}"
    return NOT_DISCLOSED


def format_posted_date(created_at: datetime | None, now: datetime) -> str:
    if created_at is None:
        return ""
    days = (now - created_at).days
    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        weeks = days // 7
        return "1 week ago" if weeks == 1 else f"{weeks} weeks ago"
    return created_at.strftime("%b %d, %Y")


def truncate_description(description: str | None, max_length: int | None = None) -> str:
    max_length = settings.description_preview_length if max_length is None else max_length
    text = (description or "").strip()
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + ELLIPSIS


def format_score(score: float) -> str:
    """0.8734 -> '87.3%'."""
    return f"{score * 100:.1f}%"


def _non_negative(value: int | None) -> int:
    return value if value is not None and value > 0 else 0


def to_display_record(
    candidate: ScoredCandidate,
    now: datetime,
    include_factors: bool = False,
) -> DisplayRecord:
    job = candidate.posting
    company = job.company
    factor_scores = None
    if include_factors:
        factor_scores = {
            factor.value: round(score, 4)
            for factor, score in candidate.factor_scores.items()
        }

    return DisplayRecord(
        id=job.id,
        title=job.title,
        company_id=company.id,
        company_name=company.name,
        location=job.location,
        salary=format_salary(job.salary, job.salary_min, job.salary_max, job.salary_currency),
        job_type=job.job_type,
        experience_level=job.experience_level,
        department=job.department,
        skills=list(job.skills),
        remote_work=job.remote_work,
        posted_date=format_posted_date(job.created_at, now),
        applications=_non_negative(job.application_count),
        views=_non_negative(job.view_count),
        description=truncate_description(job.description),
        company=CompanySummary(
            id=company.id,
            name=company.name,
            industry=company.industry,
            size=company.company_size,
            rating=company.rating,
        ),
        similarity_score=format_score(candidate.composite_score),
        factor_scores=factor_scores,
    )
