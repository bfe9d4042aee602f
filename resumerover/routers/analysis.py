"""
ResumeRover - Resume analysis API endpoints.

Receives the resume upload and job posting, runs the matching engine,
and stores the result so it can be fetched again by id.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db, with_retry
from ..models import Analysis
from ..rate_limit import limiter, RATE_LIMIT_ANALYZE, RATE_LIMIT_READ
from ..schemas import AnalysisResponse, AnalysisResult, AnalysisSummary, ErrorResponse, StoredAnalysisResponse
from ..services.analyzer import analyze_text, check_job_posting
from ..services.errors import EngineError, InvalidInput, LowSignalWarning
from ..services.extractor import RawDocument, extract, validate

router = APIRouter()
logger = logging.getLogger("resumerover.analysis")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    415: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


@with_retry
def _save_analysis(db: Session, result: AnalysisResult, **fields) -> Analysis:
    try:
        record = Analysis.from_result(result, **fields)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record
    except Exception:
        db.rollback()
        raise


def _stored_response(record: Analysis) -> StoredAnalysisResponse:
    return StoredAnalysisResponse(
        id=record.id,
        file_name=record.file_name,
        file_size=record.file_size,
        job_title=record.job_title,
        created_at=record.created_at,
        **dict(record.to_result())
    )


@router.post("/analyze", response_model=AnalysisResponse, responses=ERROR_RESPONSES)
@limiter.limit(RATE_LIMIT_ANALYZE)
def analyze_resume(
    request: Request,
    resume: Optional[UploadFile] = File(None),
    job_title: Optional[str] = Form(None, alias="jobTitle"),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    db: Session = Depends(get_db),
):
    """
    Analyze an uploaded resume against a job posting.

    Multipart fields: `resume` (PDF, DOC, DOCX or TXT, max 5MB),
    `jobTitle`, `jobDescription`.
    """
    if resume is None or not resume.filename:
        raise InvalidInput("No resume file uploaded")

    # Read one byte past the ceiling so oversized uploads fail validation
    # without buffering the whole file
    content = resume.file.read(settings.engine.max_file_size + 1)
    document = RawDocument(
        content=content,
        media_type=resume.content_type or "",
        filename=resume.filename,
    )

    outcome = validate(document)
    if not outcome.is_valid:
        logger.info("Rejected upload %s: %s", resume.filename, outcome.error.code)
        raise outcome.error

    # Same steps as analyze(), keeping the extracted text for storage
    try:
        check_job_posting(job_title, job_description)
        resume_text = extract(document)
        result = analyze_text(resume_text, job_title, job_description)
    except EngineError as exc:
        logger.info("Analysis failed for %s: %s (%s)", resume.filename, exc.code, exc.message)
        raise

    if result.has_warning(LowSignalWarning.code):
        logger.info("Low-signal analysis for job '%s'", job_title)

    record = _save_analysis(
        db,
        result,
        file_name=resume.filename,
        file_size=document.size,
        job_title=job_title,
        job_description=job_description,
        resume_text=resume_text,
    )
    logger.info(f"Analysis {record.id} stored: ATS score {result.ats_score}")

    return AnalysisResponse(id=record.id, **dict(result))


@router.get("/analyses", response_model=List[AnalysisSummary])
@limiter.limit(RATE_LIMIT_READ)
def list_analyses(
    request: Request,
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List the most recent analyses, newest first."""
    records = (
        db.query(Analysis)
        .order_by(Analysis.created_at.desc(), Analysis.id.desc())
        .limit(limit)
        .all()
    )
    return [
        AnalysisSummary(
            id=r.id,
            file_name=r.file_name,
            job_title=r.job_title,
            ats_score=r.ats_score,
            created_at=r.created_at,
        )
        for r in records
    ]


@router.get("/analyses/{analysis_id}", response_model=StoredAnalysisResponse)
@limiter.limit(RATE_LIMIT_READ)
def get_analysis(request: Request, analysis_id: int, db: Session = Depends(get_db)):
    """Fetch a stored analysis by id."""
    record = db.get(Analysis, analysis_id)
    if not record:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return _stored_response(record)
