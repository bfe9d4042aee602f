"""
ResumeRover - Document text extraction.

Converts uploaded resume documents (TXT, PDF, DOC, DOCX) into normalized
plain text for the tokenizer.

- validate() is a metadata-only pre-check (declared type and size).
- extract() validates, decodes with the format-specific reader, and
  normalizes whitespace.

Readers:
- PDF: pdfplumber
- DOCX: python-docx
- DOC: python-docx for OOXML payloads saved with a .doc name, olefile for
  Word 97-2003 binaries
"""
import io
import os
import re
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import docx
import olefile
import pdfplumber
from docx.table import Table

from ..config import EngineSettings, settings
from .errors import EngineError, ExtractionFailed, FileTooLarge, UnsupportedFormat


class DocumentFormat(str, Enum):
    TXT = "txt"
    PDF = "pdf"
    DOC = "doc"
    DOCX = "docx"


MEDIA_TYPES = {
    "text/plain": DocumentFormat.TXT,
    "application/pdf": DocumentFormat.PDF,
    "application/msword": DocumentFormat.DOC,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DocumentFormat.DOCX,
}

ALLOWED_EXTENSIONS = {
    '.txt': DocumentFormat.TXT,
    '.pdf': DocumentFormat.PDF,
    '.doc': DocumentFormat.DOC,
    '.docx': DocumentFormat.DOCX,
}

# Browsers and HTTP clients send these when they don't know the type
GENERIC_MEDIA_TYPES = {"", "application/octet-stream", "binary/octet-stream"}


@dataclass(frozen=True)
class RawDocument:
    """An uploaded document as received; owned by a single analysis request."""
    content: bytes
    media_type: str = ""
    filename: str = ""

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        return os.path.splitext(self.filename)[1].lower() if self.filename else ''


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    format: Optional[DocumentFormat] = None
    error: Optional[EngineError] = None


def resolve_format(raw: RawDocument) -> Optional[DocumentFormat]:
    """Format from the declared media type, or the file extension when the type is generic."""
    media_type = (raw.media_type or "").split(";")[0].strip().lower()
    if media_type in MEDIA_TYPES:
        return MEDIA_TYPES[media_type]
    if media_type in GENERIC_MEDIA_TYPES:
        return ALLOWED_EXTENSIONS.get(raw.extension)
    return None


def validate(raw: RawDocument, config: Optional[EngineSettings] = None) -> ValidationOutcome:
    """Check declared type and size without looking at the content."""
    config = config or settings.engine
    doc_format = resolve_format(raw)
    if doc_format is None:
        declared = raw.media_type or raw.extension or "unknown"
        return ValidationOutcome(
            is_valid=False,
            error=UnsupportedFormat(
                f"Unsupported file type: {declared}. Allowed: PDF, DOC, DOCX, TXT"
            ),
        )
    if raw.size > config.max_file_size:
        return ValidationOutcome(
            is_valid=False,
            format=doc_format,
            error=FileTooLarge(
                f"File too large. Maximum size: {config.max_file_size // (1024 * 1024)}MB"
            ),
        )
    return ValidationOutcome(is_valid=True, format=doc_format)


# --- Whitespace normalization ---

_PAGE_BREAKS = re.compile(r'[\r\x0b\x0c\x85\u2028\u2029]')
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0e-\x1f\x7f\u200b\ufeff]')
_HORIZONTAL_WS = re.compile(r'[^\S\n]+')
# pdfminer writes glyphs it has no Unicode mapping for as "(cid:123)"
_CID_GLYPHS = re.compile(r'\(cid:\d+\)')


def normalize_whitespace(text: str) -> str:
    """Strip control characters and unmapped glyphs, collapse spaces, keep one newline per non-empty line."""
    text = text.replace('\r\n', '\n')
    text = _PAGE_BREAKS.sub('\n', text)
    text = _CONTROL_CHARS.sub('', text)
    text = _CID_GLYPHS.sub('', text)
    lines = (_HORIZONTAL_WS.sub(' ', line).strip() for line in text.split('\n'))
    return '\n'.join(line for line in lines if line)


# --- Format readers ---

def _read_text(content: bytes) -> str:
    return content.decode('utf-8-sig', errors='replace')


def _read_pdf(content: bytes) -> str:
    if b'%PDF-' not in content[:1024]:
        raise ExtractionFailed("File is not a valid PDF document")
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            # Image-only pages have no text layer and contribute nothing
            pages_text = [page.extract_text() or '' for page in pdf.pages]
    except Exception as exc:
        raise ExtractionFailed(f"Could not read PDF: {exc}") from exc
    return '\n'.join(pages_text)


def _table_lines(table: Table):
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            # Merged cells repeat across the row
            if id(cell._tc) in seen:
                continue
            seen.add(id(cell._tc))
            for paragraph in cell.paragraphs:
                yield paragraph.text


def _read_docx(content: bytes) -> str:
    if not content.startswith(b'PK'):
        raise ExtractionFailed("File is not a valid Word document")
    try:
        document = docx.Document(io.BytesIO(content))
        lines = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(_table_lines(block))
            else:
                lines.append(block.text)
    except Exception as exc:
        raise ExtractionFailed(f"Could not read Word document: {exc}") from exc
    return '\n'.join(lines)


# Word 97-2003 File Information Block offsets
_FIB_FLAGS = 0x000A
_FIB_CCP_TEXT = 0x004C
_FIB_FC_CLX = 0x01A2
_WHICH_TABLE = 0x0200
_COMPRESSED = 0x40000000
_FC_MASK = 0x3FFFFFFF

_FIELD_CODE = re.compile(r'\x13[^\x13\x14\x15]*(?:\x14|(?=\x15))')


def _piece_table(table_stream: bytes, fc_clx: int, lcb_clx: int) -> bytes:
    pos = fc_clx
    end = fc_clx + lcb_clx
    while pos < end:
        kind = table_stream[pos]
        if kind == 0x01:
            # Prc: property modifiers, skipped
            cb_grpprl = struct.unpack_from('<H', table_stream, pos + 1)[0]
            pos += 3 + cb_grpprl
        elif kind == 0x02:
            lcb = struct.unpack_from('<I', table_stream, pos + 1)[0]
            return table_stream[pos + 5:pos + 5 + lcb]
        else:
            break
    raise ExtractionFailed("Word document has no piece table")


def _read_word97(content: bytes) -> str:
    try:
        with olefile.OleFileIO(io.BytesIO(content)) as ole:
            word_stream = ole.openstream('WordDocument').read()
            flags = struct.unpack_from('<H', word_stream, _FIB_FLAGS)[0]
            table_name = '1Table' if flags & _WHICH_TABLE else '0Table'
            table_stream = ole.openstream(table_name).read()

        ccp_text = struct.unpack_from('<i', word_stream, _FIB_CCP_TEXT)[0]
        fc_clx, lcb_clx = struct.unpack_from('<II', word_stream, _FIB_FC_CLX)
        plc = _piece_table(table_stream, fc_clx, lcb_clx)

        pieces = (len(plc) - 4) // 12
        cps = struct.unpack_from(f'<{pieces + 1}I', plc, 0)
        chunks = []
        for i in range(pieces):
            fc = struct.unpack_from('<I', plc, 4 * (pieces + 1) + 8 * i + 2)[0]
            length = cps[i + 1] - cps[i]
            if fc & _COMPRESSED:
                start = (fc & _FC_MASK) // 2
                chunks.append(word_stream[start:start + length].decode('cp1252', errors='replace'))
            else:
                start = fc & _FC_MASK
                chunks.append(word_stream[start:start + 2 * length].decode('utf-16-le', errors='replace'))
    except ExtractionFailed:
        raise
    except Exception as exc:
        raise ExtractionFailed(f"Could not read Word document: {exc}") from exc

    # Main document text only; headers, footnotes and comments follow it
    text = ''.join(chunks)[:max(ccp_text, 0)]
    text = _FIELD_CODE.sub('', text).replace('\x15', '')
    # Paragraph, cell and line marks
    return text.replace('\r', '\n').replace('\x07', '\n').replace('\x0b', '\n')


def _read_doc(content: bytes) -> str:
    if content.startswith(b'PK'):
        return _read_docx(content)
    if content[:8] != olefile.MAGIC:
        raise ExtractionFailed("File is not a valid Word document")
    return _read_word97(content)


_READERS = {
    DocumentFormat.TXT: _read_text,
    DocumentFormat.PDF: _read_pdf,
    DocumentFormat.DOC: _read_doc,
    DocumentFormat.DOCX: _read_docx,
}


def extract(raw: RawDocument, config: Optional[EngineSettings] = None) -> str:
    """
    Extract normalized plain text from a document.

    Raises:
        UnsupportedFormat, FileTooLarge: the document fails validate().
        ExtractionFailed: the bytes don't match the declared format.
    """
    config = config or settings.engine
    outcome = validate(raw, config)
    if not outcome.is_valid:
        raise outcome.error

    text = normalize_whitespace(_READERS[outcome.format](raw.content))
    return text[:config.max_text_length].rstrip()
