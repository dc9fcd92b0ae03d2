"""Error taxonomy for the similar-jobs service.

Each error carries the HTTP status the API layer maps it to. None of them
are retried: the lookup is a read-only, idempotent computation.
"""


class SimilarJobsError(Exception):
    status_code: int = 500
    default_message: str = "Failed to fetch similar jobs"

    def __init__(self, message: str | None = None, detail: str | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail  # client-visible error detail, if any
        super().__init__(self.message)


class InvalidJobIdError(SimilarJobsError):
    status_code = 400
    default_message = "Invalid job ID format"


class JobNotFoundError(SimilarJobsError):
    status_code = 404
    default_message = "Job not found"


class SimilarJobsInternalError(SimilarJobsError):
    status_code = 500
