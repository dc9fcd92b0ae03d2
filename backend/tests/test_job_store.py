import json
from datetime import timedelta

import pytest

from services.candidate_pool import fetch_candidate_pool
from services.job_store import InMemoryJobStore


@pytest.mark.asyncio
async def test_fetch_candidates_filters_and_orders(make_job, now):
    target = make_job(region="gulf")
    newest = make_job(region="gulf", age_days=1)
    older = make_job(region="gulf", age_days=10)
    store = InMemoryJobStore([
        target,
        older,
        newest,
        make_job(region="india"),
        make_job(region="gulf", status="closed"),
        make_job(region="gulf", expires_at=now - timedelta(days=1)),
    ])
    unexpired = make_job(region="gulf", age_days=20, expires_at=now + timedelta(days=5))
    store.add(unexpired)

    candidates = await store.fetch_candidates(target, 200, now)
    assert [c.id for c in candidates] == [newest.id, older.id, unexpired.id]


@pytest.mark.asyncio
async def test_fetch_candidates_respects_limit(make_job, now):
    target = make_job()
    store = InMemoryJobStore([target] + [make_job(age_days=d) for d in range(1, 8)])
    candidates = await store.fetch_candidates(target, 3, now)
    assert len(candidates) == 3
    assert target.id not in {c.id for c in candidates}


@pytest.mark.asyncio
async def test_candidate_pool_empty_is_not_error(make_job, now):
    target = make_job()
    store = InMemoryJobStore([target])
    assert await fetch_candidate_pool(store, target, now) == []


@pytest.mark.asyncio
async def test_get_job_and_count(make_job):
    job = make_job()
    store = InMemoryJobStore([job])
    assert await store.get_job(job.id) == job
    assert await store.get_job("missing") is None
    assert await store.count() == 1


def test_from_json_file(tmp_path, make_job):
    job = make_job()
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([job.model_dump(mode="json")]), encoding="utf-8")
    store = InMemoryJobStore.from_json_file(path)
    assert store._jobs[job.id].title == job.title
    assert store._jobs[job.id].created_at == job.created_at
