from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import settings


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LineFeedback(_CamelModel):
    line_number: int = Field(ge=1)
    section: str
    text: str
    issues: list[str] = Field(default_factory=list)
    suggested_keywords: list[str] = Field(default_factory=list)
    suggested_rewrite: str | None = None


class SectionBreakdown(_CamelModel):
    name: str
    start_line: int
    end_line: int
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    issues: list[str] = Field(default_factory=list)
    lines: list[LineFeedback] = Field(default_factory=list)


class SuggestedAdditions(_CamelModel):
    summary: list[str] = Field(default_factory=list)
    experience_bullets: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)


class AtsResult(_CamelModel):
    score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    sections: list[SectionBreakdown] = Field(default_factory=list)
    resume_keywords: list[str] = Field(default_factory=list)
    job_keywords: list[str] = Field(default_factory=list)
    corrected_resume: str = ""
    suggested_additions: SuggestedAdditions = Field(default_factory=SuggestedAdditions)


class ScanRequest(_CamelModel):
    resume_text: str = Field(default="", max_length=settings.scan_max_resume_chars)
    job_description_text: str = Field(default="", max_length=settings.scan_max_job_description_chars)
