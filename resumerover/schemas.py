"""
ResumeRover - Pydantic schemas for analysis results and API responses.

Engine results are frozen models with their value ranges enforced at
construction. JSON uses camelCase aliases (atsScore, matchedKeywords, ...)
to match the web client; Python code uses the snake_case field names.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class _EngineModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Engine output ---

class KeywordTerm(_EngineModel):
    term: str = Field(..., min_length=1)
    count: int = Field(..., ge=0)
    priority: Priority


class SkillCategory(_EngineModel):
    """
    Resume coverage of one skill category.

    matched_terms + missing_terms are the category's job-relevant terms; a
    category with neither is ignored when averaging skillsScore.
    """
    category: str
    score: int = Field(..., ge=0, le=100)
    matched_terms: Tuple[str, ...] = ()
    missing_terms: Tuple[str, ...] = ()


class AnalysisWarning(_EngineModel):
    code: str
    message: str


class AnalysisResult(_EngineModel):
    ats_score: int = Field(..., ge=0, le=100)
    keyword_score: int = Field(..., ge=0, le=100)
    skills_score: int = Field(..., ge=0, le=100)
    matched_keywords: Tuple[KeywordTerm, ...] = ()
    missing_keywords: Tuple[KeywordTerm, ...] = ()
    skills_analysis: Tuple[SkillCategory, ...] = ()
    recommendations: Tuple[str, ...] = ()
    warnings: Tuple[AnalysisWarning, ...] = ()

    @field_validator("missing_keywords")
    @classmethod
    def keywords_partitioned(cls, value, info):
        matched = {k.term for k in info.data.get("matched_keywords", ())}
        overlap = sorted(matched.intersection(k.term for k in value))
        if overlap:
            raise ValueError(f"Keywords both matched and missing: {', '.join(overlap)}")
        return value

    def has_warning(self, code: str) -> bool:
        return any(w.code == code for w in self.warnings)


# --- API responses ---

class AnalysisResponse(AnalysisResult):
    id: int


class StoredAnalysisResponse(AnalysisResponse):
    file_name: str
    file_size: int
    job_title: str
    created_at: datetime


class AnalysisSummary(_EngineModel):
    id: int
    file_name: str
    job_title: str
    ats_score: int
    created_at: Optional[datetime] = None


class ErrorResponse(BaseModel):
    error: str
    detail: str
