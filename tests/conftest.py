"""
Shared fixtures for the ResumeRover test suite.

The database URL and rate limiting are configured through the environment
before any resumerover module is imported, so the app under test writes to
a throwaway SQLite file and never throttles.
"""
import io
import os
import struct
import tempfile
import zipfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="resumerover-tests-")
os.environ["RESUMEROVER_DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ["RESUMEROVER_RATE_LIMIT_ENABLED"] = "false"

import docx  # noqa: E402
import olefile  # noqa: E402
import pytest  # noqa: E402

from resumerover.config import EngineSettings  # noqa: E402

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SAMPLE_JOB_TITLE = "Senior Python Engineer"
SAMPLE_JOB_DESCRIPTION = "Senior Python Engineer. Requires Python, SQL, and AWS experience."
SAMPLE_RESUME = "Experienced engineer skilled in Python and SQL."


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages) -> bytes:
    """
    Build a minimal PDF with one Helvetica text line per entry.

    `pages` is a list of lists of strings; an empty list makes a page with
    no text layer (like a scanned image).
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]
    for page_id, lines in zip(page_ids, pages):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        if lines:
            ops = ["BT", "/F1 12 Tf", "16 TL", "72 720 Td"]
            ops.extend(f"({_pdf_escape(line)}) Tj T*" for line in lines)
            ops.append("ET")
            stream = "\n".join(ops).encode("latin-1")
        else:
            stream = b""
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


def build_docx(paragraphs, table_rows=None) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_zip(files) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in files.items():
            archive.writestr(name, data)
    return buffer.getvalue()


SECTOR_SIZE = 512


def _dir_entry(name, kind, child=olefile.NOSTREAM, right=olefile.NOSTREAM, start=olefile.ENDOFCHAIN, size=0):
    encoded = name.encode("utf-16-le") + b"\x00\x00" if name else b""
    entry = encoded.ljust(64, b"\x00")
    entry += struct.pack("<HBB", len(encoded), kind, 1)
    entry += struct.pack("<III", olefile.NOSTREAM, right, child)
    entry += b"\x00" * 36  # clsid, state bits, timestamps
    entry += struct.pack("<III", start, size, 0)
    return entry


def build_ole(streams) -> bytes:
    """
    Build a version 3 compound file holding up to three streams.

    Sector 0 is the FAT, sector 1 the directory; every stream is padded to
    the 4096-byte mini stream cutoff so it lives in regular sectors.
    """
    names = sorted(streams, key=lambda name: (len(name), name.upper()))
    assert len(names) <= 3
    fat = [olefile.FATSECT, olefile.ENDOFCHAIN]
    entries = [_dir_entry("Root Entry", olefile.STGTY_ROOT, child=1)]
    body = b""
    for index, name in enumerate(names):
        data = streams[name].ljust(4096, b"\x00")
        data = data.ljust(-(-len(data) // SECTOR_SIZE) * SECTOR_SIZE, b"\x00")
        first = len(fat)
        fat.extend(range(first + 1, first + len(data) // SECTOR_SIZE))
        fat.append(olefile.ENDOFCHAIN)
        right = index + 2 if index + 1 < len(names) else olefile.NOSTREAM
        entries.append(_dir_entry(name, olefile.STGTY_STREAM, right=right, start=first, size=len(data)))
        body += data
    while len(entries) < 4:
        entries.append(_dir_entry("", olefile.STGTY_EMPTY))
    fat.extend([olefile.FREESECT] * (SECTOR_SIZE // 4 - len(fat)))

    header = olefile.MAGIC + b"\x00" * 16
    header += struct.pack("<HHHHH", 0x3E, 3, 0xFFFE, 9, 6) + b"\x00" * 6
    header += struct.pack("<9I", 0, 1, 1, 0, 4096, olefile.ENDOFCHAIN, 0, olefile.ENDOFCHAIN, 0)
    header += struct.pack("<109I", 0, *[olefile.FREESECT] * 108)
    return header + struct.pack(f"<{len(fat)}I", *fat) + b"".join(entries) + body


def build_word97(pieces, main_length, table_name="1Table") -> bytes:
    """
    Build a Word 97-2003 .doc whose text is spread over a piece table.

    `pieces` is a list of (text, compressed) pairs: compressed pieces are
    stored as cp1252, the rest as UTF-16. Only the first `main_length`
    characters belong to the main document.
    """
    word = bytearray(0x800)
    struct.pack_into("<H", word, 0, 0xA5EC)
    struct.pack_into("<H", word, 0x0A, 0x0200 if table_name == "1Table" else 0)
    struct.pack_into("<i", word, 0x4C, main_length)

    cps = [0]
    descriptors = b""
    for text, compressed in pieces:
        if compressed:
            fc = 0x40000000 | (len(word) * 2)
            word += text.encode("cp1252")
        else:
            if len(word) % 2:
                word += b"\x00"
            fc = len(word)
            word += text.encode("utf-16-le")
        cps.append(cps[-1] + len(text))
        descriptors += struct.pack("<HIH", 0, fc, 0)

    plc = struct.pack(f"<{len(cps)}I", *cps) + descriptors
    # One empty Prc before the Pcdt, as Word writes when it has formatting to record
    clx = b"\x01" + struct.pack("<H", 2) + b"\x00\x00" + b"\x02" + struct.pack("<I", len(plc)) + plc
    struct.pack_into("<II", word, 0x1A2, 0, len(clx))
    return build_ole({"WordDocument": bytes(word), table_name: clx})


@pytest.fixture
def engine_config():
    return EngineSettings()


@pytest.fixture
def sample_pdf():
    return build_pdf([
        ["Jane Doe", "Python developer"],
        [],
        ["Skills: SQL, Docker"],
    ])


@pytest.fixture
def sample_docx():
    return build_docx(
        ["Jane Doe", "Senior   Python Engineer", "Built APIs with FastAPI"],
        table_rows=[["Skills", "SQL, AWS"]],
    )


@pytest.fixture(scope="module")
def client():
    from fastapi.testclient import TestClient
    from resumerover.main import app

    with TestClient(app) as test_client:
        yield test_client
