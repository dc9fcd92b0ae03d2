"""Candidate Pool Fetcher: the only I/O step of the similar-jobs pipeline."""

import logging
from datetime import datetime

from config import settings
from models.job import JobPosting
from services.job_store import JobStore

logger = logging.getLogger(__name__)


async def fetch_candidate_pool(
    store: JobStore,
    target: JobPosting,
    now: datetime,
    limit: int | None = None,
) -> list[JobPosting]:
    """Fetch up to ``limit`` candidates (default: configured pool size).

    An empty pool is a normal outcome, not an error. The target is dropped
    here as well in case a store implementation fails to exclude it.
    """
    pool_size = limit if limit is not None else settings.candidate_pool_size
    candidates = await store.fetch_candidates(target, pool_size, now)
    candidates = [c for c in candidates if c.id != target.id][:pool_size]
    logger.info("Candidate pool for job %s: %d postings", target.id, len(candidates))
    return candidates
