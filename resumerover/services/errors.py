"""
ResumeRover - Engine error taxonomy.

Every failure the matching engine can report is a distinct EngineError
subclass carrying a stable ``code`` and an HTTP ``status_code`` hint, so callers
can map it to a user-facing response without parsing message strings.

LowSignalWarning is not raised; the analyzer attaches it to the result.
"""


class EngineError(Exception):
    """Base class for typed engine failures."""
    code = "engine_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message}


class UnsupportedFormat(EngineError):
    """Declared document type is not TXT, PDF, DOC or DOCX."""
    code = "unsupported_format"
    status_code = 415


class FileTooLarge(EngineError):
    """Document exceeds the configured size ceiling."""
    code = "file_too_large"
    status_code = 413


class ExtractionFailed(EngineError):
    """Document bytes do not conform to the declared format."""
    code = "extraction_failed"
    status_code = 422


class InvalidInput(EngineError):
    """Missing job title/description, or the document produced no text."""
    code = "invalid_input"
    status_code = 400


class LowSignalWarning(UserWarning):
    """Input too sparse for a meaningful analysis; the result is low-confidence."""
    code = "low_signal"

    def __init__(self, message: str = "The job description has no extractable keywords; scores are unreliable."):
        super().__init__(message)
        self.message = message
