"""Shared dependencies for API routes."""

import logging

from config import settings
from services.job_store import InMemoryJobStore, JobStore

logger = logging.getLogger(__name__)

_store: JobStore | None = None


def get_job_store() -> JobStore:
    global _store
    if _store is None:
        if settings.job_store_path:
            _store = InMemoryJobStore.from_json_file(settings.job_store_path)
        else:
            logger.warning("No JOB_STORE_PATH set - serving an empty job store")
            _store = InMemoryJobStore()
    return _store
