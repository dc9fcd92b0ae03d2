"""Similar-jobs recommender.

Flow (single pass, per request):
    job_id
      ├─ validate id format                  → InvalidJobIdError (400)
      ├─ store.get_job(job_id)               → JobNotFoundError (404)
      ├─ fetch_candidate_pool()              → up to 200 postings (only I/O)
      ├─ score_candidates()                  → ScoredCandidate per posting
      ├─ select_diverse()                    → top-K with per-company cap
      └─ to_display_record()                 → SimilarJobsResponse

Everything after the fetch is pure and CPU-bound. Unexpected failures are
logged and surfaced as SimilarJobsInternalError (500).
"""

import logging
import re
import time
from datetime import datetime, timezone

from config import settings
from models.responses import DebugInfo, SimilarJobsMetadata, SimilarJobsResponse
from services.candidate_pool import fetch_candidate_pool
from services.diversity import max_per_company, select_diverse
from services.exceptions import (
    InvalidJobIdError,
    JobNotFoundError,
    SimilarJobsError,
    SimilarJobsInternalError,
)
from services.formatter import to_display_record
from services.job_store import JobStore
from services.scoring import score_candidates
from services.weights import DEFAULT_WEIGHTS

logger = logging.getLogger(__name__)

UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_job_id(job_id: str | None) -> bool:
    return bool(job_id) and UUID_RE.match(job_id) is not None


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return settings.default_similar_limit
    return max(1, min(settings.max_similar_limit, limit))


class _StepTrace:
    """Collects human-readable step messages when debug is on."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self.steps: list[str] = []
        self._start = time.perf_counter()

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000

    def add(self, message: str) -> None:
        logger.debug("%s (%.1fms)", message, self.elapsed_ms())
        if self.enabled:
            self.steps.append(f"{message} ({self.elapsed_ms():.1f}ms)")


async def find_similar_jobs(
    store: JobStore,
    job_id: str,
    limit: int | None = None,
    debug: bool = False,
    now: datetime | None = None,
    hard_cap: bool | None = None,
) -> SimilarJobsResponse:
    """Rank postings similar to ``job_id`` and return the response envelope."""
    if not is_valid_job_id(job_id):
        raise InvalidJobIdError()

    limit = clamp_limit(limit)
    now = now or datetime.now(timezone.utc)
    hard_cap = settings.diversity_hard_cap if hard_cap is None else hard_cap
    trace = _StepTrace(debug)
    trace.add(f"Validated job id {job_id} (limit={limit})")

    try:
        target = await store.get_job(job_id)
        if target is None:
            raise JobNotFoundError()
        trace.add(f"Loaded target job: {target.title!r}")

        candidates = await fetch_candidate_pool(store, target, now)
        trace.add(f"Fetched {len(candidates)} candidate jobs")

        per_company_cap = max_per_company(limit)
        if not candidates:
            trace.add("No candidates found; returning empty result")
            return _build_response(
                records=[],
                message="No similar jobs found",
                total_candidates=0,
                diversity_applied=False,
                per_company_cap=per_company_cap,
                trace=trace,
                target_id=target.id,
            )

        scored = score_candidates(target, candidates, now)
        trace.add(f"Scored {len(scored)} candidates across {len(DEFAULT_WEIGHTS)} weighted factors")

        selected = select_diverse(scored, limit, hard_cap=hard_cap)
        trace.add(
            f"Selected {len(selected)} jobs (max {per_company_cap} per company, "
            f"{'hard' if hard_cap else 'soft'} cap)"
        )

        records = [to_display_record(c, now, include_factors=debug) for c in selected]
        trace.add(f"Formatted {len(records)} results")
    except SimilarJobsError:
        raise
    except Exception as e:
        logger.exception("Error computing similar jobs for %s", job_id)
        detail = f"{type(e).__name__}: {e}" if debug else type(e).__name__
        raise SimilarJobsInternalError(detail=detail) from e

    logger.info(
        "Similar jobs for %s: %d of %d candidates returned in %.1fms",
        job_id, len(records), len(candidates), trace.elapsed_ms(),
    )
    return _build_response(
        records=records,
        message="Similar jobs retrieved successfully",
        total_candidates=len(candidates),
        diversity_applied=len(scored) > limit,
        per_company_cap=per_company_cap,
        trace=trace,
        target_id=target.id,
    )


def _build_response(
    records,
    message: str,
    total_candidates: int,
    diversity_applied: bool,
    per_company_cap: int,
    trace: _StepTrace,
    target_id: str,
) -> SimilarJobsResponse:
    debug_info = None
    if trace.enabled:
        debug_info = DebugInfo(
            steps=trace.steps,
            weights=DEFAULT_WEIGHTS.as_dict(),
            target_job_id=target_id,
        )
    return SimilarJobsResponse(
        success=True,
        message=message,
        data=records,
        metadata=SimilarJobsMetadata(
            total_candidates=total_candidates,
            returned_jobs=len(records),
            processing_time_ms=round(trace.elapsed_ms(), 2),
            diversity_applied=diversity_applied,
            max_per_company=per_company_cap,
        ),
        debug=debug_info,
    )
