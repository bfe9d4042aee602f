"""
ResumeRover - Matching engine.

Resume-to-job analysis that runs in-process, with no I/O beyond the bytes
it is handed.

Usage:
    from resumerover.services import RawDocument, analyze, EngineError

    try:
        result = analyze(RawDocument(content, "application/pdf", "cv.pdf"), title, description)
    except EngineError as e:
        return e.status_code, e.to_dict()
"""

# Pipeline
from .analyzer import analyze, analyze_text

# Errors
from .errors import (
    EngineError,
    ExtractionFailed,
    FileTooLarge,
    InvalidInput,
    LowSignalWarning,
    UnsupportedFormat,
)

# Extraction
from .extractor import DocumentFormat, RawDocument, ValidationOutcome, extract, validate

__all__ = [
    # Pipeline
    "analyze",
    "analyze_text",
    # Errors
    "EngineError",
    "ExtractionFailed",
    "FileTooLarge",
    "InvalidInput",
    "LowSignalWarning",
    "UnsupportedFormat",
    # Extraction
    "DocumentFormat",
    "RawDocument",
    "ValidationOutcome",
    "extract",
    "validate",
]
