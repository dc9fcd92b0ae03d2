"""Job store collaborator: the read side of job persistence.

The similarity engine only needs two queries, captured by ``JobStore``.
``InMemoryJobStore`` implements them over a list of postings and can be
seeded from a JSON file, which is enough to run the service standalone
and in tests.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from models.job import JobPosting

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "active"


class JobStore(ABC):
    """Read-only access to job postings."""

    @abstractmethod
    async def get_job(self, job_id: str) -> JobPosting | None:
        """Return the posting with ``job_id``, or None."""

    @abstractmethod
    async def fetch_candidates(
        self,
        target: JobPosting,
        limit: int,
        now: datetime,
    ) -> list[JobPosting]:
        """Active, unexpired postings in the target's region, excluding the
        target itself, most recently created first, at most ``limit``."""

    async def count(self) -> int:
        return 0


class InMemoryJobStore(JobStore):
    def __init__(self, jobs: list[JobPosting] | None = None) -> None:
        self._jobs: dict[str, JobPosting] = {}
        for job in jobs or []:
            self.add(job)

    def add(self, job: JobPosting) -> None:
        self._jobs[job.id] = job

    async def get_job(self, job_id: str) -> JobPosting | None:
        return self._jobs.get(job_id)

    async def fetch_candidates(
        self,
        target: JobPosting,
        limit: int,
        now: datetime,
    ) -> list[JobPosting]:
        matches = [
            job for job in self._jobs.values()
            if job.id != target.id
            and job.status == ACTIVE_STATUS
            and (job.expires_at is None or job.expires_at >= now)
            and job.region == target.region
        ]
        matches.sort(key=lambda j: j.created_at, reverse=True)
        return matches[:limit]

    async def count(self) -> int:
        return len(self._jobs)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryJobStore":
        """Load postings from a JSON array of job objects."""
        path = Path(path)
        raw = json.loads(path.read_text(encoding="utf-8"))
        jobs = [JobPosting.model_validate(item) for item in raw]
        logger.info("Loaded %d jobs from %s", len(jobs), path)
        return cls(jobs)
