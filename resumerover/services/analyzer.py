"""
ResumeRover - Resume-to-job analysis pipeline.

    extract -> tokenize -> keywords/skills -> match -> score -> recommend

analyze() is stateless: every input is passed explicitly and every
intermediate value belongs to the call. Failures are raised as EngineError
subclasses; a sparse job description is reported as a LowSignalWarning on
the result instead.
"""
from typing import Optional

from ..config import EngineSettings, settings
from ..schemas import AnalysisResult, AnalysisWarning
from .errors import InvalidInput, LowSignalWarning
from .extractor import RawDocument, extract
from .keywords import extract_keywords, extract_skills
from .recommendations import recommend
from .scoring import match, score
from .tokenizer import tokenize


def check_job_posting(job_title: Optional[str], job_description: Optional[str]) -> None:
    if job_title is None or not job_title.strip():
        raise InvalidInput("Job title is required")
    if job_description is None:
        raise InvalidInput("Job description is required")


def analyze(
    document: RawDocument,
    job_title: str,
    job_description: str,
    config: Optional[EngineSettings] = None,
) -> AnalysisResult:
    """
    Analyze a resume document against a job posting.

    Raises:
        InvalidInput: missing job title/description, or no text in the document.
        UnsupportedFormat, FileTooLarge: the document fails validation.
        ExtractionFailed: the document bytes don't match the declared format.
    """
    config = config or settings.engine
    check_job_posting(job_title, job_description)
    resume_text = extract(document, config)
    return analyze_text(resume_text, job_title, job_description, config)


def analyze_text(
    resume_text: str,
    job_title: str,
    job_description: str,
    config: Optional[EngineSettings] = None,
) -> AnalysisResult:
    """Analyze already-extracted resume text against a job posting."""
    config = config or settings.engine
    check_job_posting(job_title, job_description)
    if not resume_text or not resume_text.strip():
        raise InvalidInput("No text could be extracted from the resume")

    resume = tokenize(resume_text, config.max_ngram)
    job = tokenize(job_description, config.max_ngram)
    title = tokenize(job_title, config.max_ngram)

    keywords = extract_keywords(job, title, config)
    skills = extract_skills(resume, job)
    matched, missing = match(resume, keywords)
    card = score(matched, missing, skills, config)

    warnings = []
    if not keywords:
        warning = LowSignalWarning()
        warnings.append(AnalysisWarning(code=warning.code, message=warning.message))

    return AnalysisResult(
        ats_score=card.ats_score,
        keyword_score=card.keyword_score,
        skills_score=card.skills_score,
        matched_keywords=matched,
        missing_keywords=missing,
        skills_analysis=skills,
        recommendations=recommend(missing, skills, config),
        warnings=warnings,
    )
