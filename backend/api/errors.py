"""Map service errors to the JSON error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from models.responses import ErrorResponse
from services.exceptions import SimilarJobsError

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def similar_jobs_error_handler(request: Request, exc: SimilarJobsError) -> JSONResponse:
    if exc.status_code >= 500:
        return _envelope(exc.status_code, exc.message, exc.detail or "Internal server error")
    return _envelope(exc.status_code, exc.message, exc.detail)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(500, "Internal server error", type(exc).__name__)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SimilarJobsError, similar_jobs_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
