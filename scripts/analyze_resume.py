#!/usr/bin/env python3
"""
ResumeRover - Command-line resume analysis

Run the matching engine on a local resume file without starting the API.
Prints the analysis as JSON.

Usage:
    python scripts/analyze_resume.py resume.pdf "Senior Python Engineer" job.txt
    python scripts/analyze_resume.py resume.docx "Data Analyst" -   # job description from stdin
"""
import json
import mimetypes
import os
import sys

# Add project root to path so we can import resumerover modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from resumerover.services import EngineError, RawDocument, analyze


def load_document(path: str) -> RawDocument:
    media_type, _ = mimetypes.guess_type(path)
    with open(path, "rb") as f:
        content = f.read()
    return RawDocument(content=content, media_type=media_type or "", filename=os.path.basename(path))


def read_job_description(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def main(argv) -> int:
    if len(argv) != 4:
        print("Usage: python scripts/analyze_resume.py <resume file> <job title> <job description file | ->")
        return 1

    resume_path, job_title, job_source = argv[1:]
    if not os.path.exists(resume_path):
        print(f"Error: Resume file not found: {resume_path}")
        return 1

    try:
        result = analyze(load_document(resume_path), job_title, read_job_description(job_source))
    except EngineError as e:
        print(json.dumps(e.to_dict(), indent=2))
        return 2

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
