from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Debug-only fields, left out of the payload when None
    omit_if_none: ClassVar[tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def drop_unset_debug_fields(self, handler):
        data = handler(self)
        for name in self.omit_if_none:
            for key in (name, to_camel(name)):
                if key in data and data[key] is None:
                    del data[key]
        return data


class CompanySummary(_CamelModel):
    id: str
    name: str = ""
    industry: str | None = None
    size: str | None = None
    rating: float | None = None


class DisplayRecord(_CamelModel):
    id: str
    title: str
    company_id: str
    company_name: str = ""
    location: str | None = None
    salary: str = "Not disclosed"
    job_type: str | None = None
    experience_level: str | None = None
    department: str | None = None
    skills: list[str] = []
    remote_work: str | None = None
    posted_date: str = ""
    applications: int = 0
    views: int = 0
    description: str = ""
    company: CompanySummary
    similarity_score: str = "0.0%"
    factor_scores: dict[str, float] | None = None  # debug only

    omit_if_none = ("factor_scores",)


class SimilarJobsMetadata(_CamelModel):
    total_candidates: int = 0
    returned_jobs: int = 0
    processing_time_ms: float = 0.0
    diversity_applied: bool = False
    max_per_company: int = 0


class DebugInfo(_CamelModel):
    steps: list[str] = []
    weights: dict[str, float] = {}
    target_job_id: str = ""


class SimilarJobsResponse(_CamelModel):
    success: bool = True
    message: str = ""
    data: list[DisplayRecord] = []
    metadata: SimilarJobsMetadata = SimilarJobsMetadata()
    debug: DebugInfo | None = None

    omit_if_none = ("debug",)


class ErrorResponse(_CamelModel):
    success: bool = False
    message: str
    error: str | None = None

    omit_if_none = ("error",)
