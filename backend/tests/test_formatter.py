from datetime import timedelta

from models.job import CompanyInfo
from models.schemas.scored_candidate import FactorName, ScoredCandidate
from services.formatter import (
    format_posted_date,
    format_salary,
    format_score,
    to_display_record,
    truncate_description,
)


def test_format_salary_prefers_explicit_field():
    assert format_salary("Competitive", 1, 2, "INR") == "Competitive"


def test_format_salary_range_and_open_ends():
    assert format_salary(None, 800000, 1200000, "INR") == "INR 800,000 - 1,200,000"
    assert format_salary(None, 50000, 70000) == "50,000 - 70,000"
    assert format_salary(None, 800000, None, "AED") == "AED 800,000+"
    assert format_salary(None, None, 90000, "USD") == "Up to USD 90,000"
    assert format_salary("  ", None, None) == "Not disclosed"


def test_format_posted_date(now):
    assert format_posted_date(now - timedelta(hours=3), now) == "Today"
    assert format_posted_date(now - timedelta(days=1), now) == "1 day ago"
    assert format_posted_date(now - timedelta(days=4), now) == "4 days ago"
    assert format_posted_date(now - timedelta(days=8), now) == "1 week ago"
    assert format_posted_date(now - timedelta(days=22), now) == "3 weeks ago"
    assert format_posted_date(now - timedelta(days=45), now) == "Jan 29, 2026"
    assert format_posted_date(None, now) == ""


def test_truncate_description():
    assert truncate_description("short") == "short"
    long_text = "x" * 200
    out = truncate_description(long_text)
    assert out == "x" * 150 + "..."
    assert truncate_description("a" * 150) == "a" * 150
    assert truncate_description(None) == ""


def test_format_score():
    assert format_score(0.8734) == "87.3%"
    assert format_score(1.0) == "100.0%"
    assert format_score(0.0) == "0.0%"


def test_to_display_record(make_job, now):
    job = make_job(
        company=CompanyInfo(id="c-9", name="Globex", industry="Finance", company_size="1000+", rating=4.4),
        view_count=-5,
        application_count=None,
        description="d" * 300,
        age_days=2,
    )
    candidate = ScoredCandidate(
        posting=job,
        composite_score=0.6666,
        factor_scores={FactorName.TITLE: 0.123456},
    )
    record = to_display_record(candidate, now)
    assert record.id == job.id
    assert record.company_name == "Globex"
    assert record.company.size == "1000+"
    assert record.company.rating == 4.4
    assert record.views == 0
    assert record.applications == 0
    assert record.salary == "INR 800,000 - 1,200,000"
    assert record.posted_date == "2 days ago"
    assert record.description.endswith("...")
    assert len(record.description) == 153
    assert record.similarity_score == "66.7%"
    assert record.factor_scores is None

    debug_record = to_display_record(candidate, now, include_factors=True)
    assert debug_record.factor_scores == {"title": 0.1235}


def test_display_record_serializes_camel_case(make_job, now):
    record = to_display_record(ScoredCandidate(posting=make_job(), composite_score=0.5), now)
    data = record.model_dump(by_alias=True)
    assert "companyId" in data
    assert "similarityScore" in data
    assert "postedDate" in data
