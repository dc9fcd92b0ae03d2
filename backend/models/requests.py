import math

from pydantic import BaseModel, field_validator

from config import settings

_TRUE_VALUES = {"1", "true", "yes", "on"}


class SimilarJobsParams(BaseModel):
    """Query parameters for GET /jobs/{id}/similar.

    ``limit`` never fails validation: a non-numeric value falls back to the
    default and a numeric one is clamped into [1, max_similar_limit].
    """

    limit: int = settings.default_similar_limit
    debug: bool = False

    @field_validator("limit", mode="before")
    @classmethod
    def clamp_limit(cls, v) -> int:
        if v is None or v == "":
            return settings.default_similar_limit
        if isinstance(v, int) and not isinstance(v, bool):
            return max(1, min(settings.max_similar_limit, v))
        try:
            number = float(v)
        except (TypeError, ValueError, OverflowError):
            return settings.default_similar_limit
        if math.isnan(number):
            return settings.default_similar_limit
        if math.isinf(number):
            return settings.max_similar_limit if number > 0 else 1
        return max(1, min(settings.max_similar_limit, int(number)))

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug(cls, v) -> bool:
        if isinstance(v, bool):
            return v
        if v is None:
            return False
        return str(v).strip().lower() in _TRUE_VALUES
