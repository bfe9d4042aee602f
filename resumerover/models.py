"""
ResumeRover - SQLAlchemy ORM models.

One row per completed analysis. Keyword, skill, recommendation and warning
lists are stored as JSON text, the same shape the API returns.
"""
import json
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text

from .database import Base
from .schemas import AnalysisResult


class Analysis(Base):
    __tablename__ = "analyses"
    __table_args__ = (
        CheckConstraint("ats_score BETWEEN 0 AND 100", name="ck_analyses_ats_score"),
        CheckConstraint("keyword_score BETWEEN 0 AND 100", name="ck_analyses_keyword_score"),
        CheckConstraint("skills_score BETWEEN 0 AND 100", name="ck_analyses_skills_score"),
    )

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    job_title = Column(String, nullable=False)
    job_description = Column(Text, nullable=False)
    resume_text = Column(Text, nullable=False)
    ats_score = Column(Integer, nullable=False)
    keyword_score = Column(Integer, nullable=False)
    skills_score = Column(Integer, nullable=False)
    matched_keywords = Column(Text)  # JSON list of {term, count, priority}
    missing_keywords = Column(Text)  # JSON list of {term, count, priority}
    skills_analysis = Column(Text)  # JSON list of {category, score, matched_terms, missing_terms}
    recommendations = Column(Text)  # JSON list of strings
    warnings = Column(Text)  # JSON list of {code, message}
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    @classmethod
    def from_result(cls, result: AnalysisResult, **fields) -> "Analysis":
        data = result.model_dump(mode="json")
        return cls(
            ats_score=result.ats_score,
            keyword_score=result.keyword_score,
            skills_score=result.skills_score,
            matched_keywords=json.dumps(data["matched_keywords"]),
            missing_keywords=json.dumps(data["missing_keywords"]),
            skills_analysis=json.dumps(data["skills_analysis"]),
            recommendations=json.dumps(data["recommendations"]),
            warnings=json.dumps(data["warnings"]),
            **fields
        )

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            ats_score=self.ats_score,
            keyword_score=self.keyword_score,
            skills_score=self.skills_score,
            matched_keywords=json.loads(self.matched_keywords or "[]"),
            missing_keywords=json.loads(self.missing_keywords or "[]"),
            skills_analysis=json.loads(self.skills_analysis or "[]"),
            recommendations=json.loads(self.recommendations or "[]"),
            warnings=json.loads(self.warnings or "[]"),
        )
