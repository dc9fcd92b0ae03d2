import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"

    # Job store
    job_store_path: str = ""  # optional JSON seed file for the in-memory store

    # Similar-jobs engine
    candidate_pool_size: int = 200
    default_similar_limit: int = 3
    max_similar_limit: int = 10
    same_company_boost: float = 1.25
    description_preview_length: int = 150
    diversity_hard_cap: bool = False  # False keeps the soft per-company cap
    similar_jobs_rate_limit: str = "120/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
