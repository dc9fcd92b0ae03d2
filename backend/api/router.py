from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_store
from config import settings
from models.requests import SimilarJobsParams
from models.responses import SimilarJobsResponse
from services import recommender
from services.job_store import JobStore

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(store: JobStore = Depends(get_job_store)):
    return {
        "status": "ok",
        "jobs_loaded": await store.count(),
    }


@router.get("/jobs/{job_id}/similar", response_model=SimilarJobsResponse)
@limiter.limit(settings.similar_jobs_rate_limit)
async def similar_jobs(
    request: Request,
    job_id: str,
    limit: str | None = None,
    debug: str | None = None,
    store: JobStore = Depends(get_job_store),
):
    # Raw strings so an out-of-range or malformed limit is clamped, not rejected
    params = SimilarJobsParams(limit=limit, debug=debug)
    return await recommender.find_similar_jobs(
        store,
        job_id,
        limit=params.limit,
        debug=params.debug,
    )
