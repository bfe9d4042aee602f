from conftest import DOCX_MEDIA_TYPE, SAMPLE_JOB_DESCRIPTION, SAMPLE_JOB_TITLE, SAMPLE_RESUME

JOB_FORM = {"jobTitle": SAMPLE_JOB_TITLE, "jobDescription": SAMPLE_JOB_DESCRIPTION}


def _upload(client, content, filename="resume.txt", media_type="text/plain", data=JOB_FORM):
    return client.post(
        "/api/analyze",
        files={"resume": (filename, content, media_type)},
        data=data,
    )


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["taxonomy_version"]


def test_analyze_text_resume(client):
    response = _upload(client, SAMPLE_RESUME.encode())
    assert response.status_code == 200
    body = response.json()

    assert body["id"] > 0
    assert body["atsScore"] == 60
    assert body["keywordScore"] == 67
    assert body["skillsScore"] == 50
    assert [k["term"] for k in body["matchedKeywords"]] == ["python", "sql"]
    assert [k["term"] for k in body["missingKeywords"]] == ["aws"]
    assert body["skillsAnalysis"][1]["missingTerms"] == ["aws"]
    assert body["recommendations"]
    assert body["warnings"] == []


def test_analysis_is_stored(client):
    created = _upload(client, SAMPLE_RESUME.encode(), filename="jane.txt").json()

    response = client.get(f"/api/analyses/{created['id']}")
    assert response.status_code == 200
    stored = response.json()
    assert stored["fileName"] == "jane.txt"
    assert stored["fileSize"] == len(SAMPLE_RESUME.encode())
    assert stored["jobTitle"] == SAMPLE_JOB_TITLE
    for key in ("atsScore", "matchedKeywords", "missingKeywords", "skillsAnalysis", "recommendations"):
        assert stored[key] == created[key]

    listing = client.get("/api/analyses").json()
    assert listing[0]["id"] == created["id"]
    assert listing[0]["atsScore"] == created["atsScore"]


def test_list_limit_is_validated(client):
    assert client.get("/api/analyses?limit=0").status_code == 422
    assert len(client.get("/api/analyses?limit=1").json()) <= 1


def test_unknown_analysis(client):
    assert client.get("/api/analyses/999999").status_code == 404


def test_analyze_docx_resume(client, sample_docx):
    response = _upload(client, sample_docx, filename="resume.docx", media_type=DOCX_MEDIA_TYPE)
    assert response.status_code == 200
    matched = [k["term"] for k in response.json()["matchedKeywords"]]
    assert {"python", "sql", "aws"} <= set(matched)


def test_octet_stream_upload_uses_extension(client):
    response = _upload(client, SAMPLE_RESUME.encode(), media_type="application/octet-stream")
    assert response.status_code == 200


def test_unsupported_format(client):
    response = _upload(client, b"\x89PNG\r\n", filename="resume.png", media_type="image/png")
    assert response.status_code == 415
    assert response.json()["error"] == "unsupported_format"


def test_file_too_large(client):
    response = _upload(client, b"a" * (6 * 1024 * 1024))
    assert response.status_code == 413
    assert response.json()["error"] == "file_too_large"


def test_extraction_failed(client):
    response = _upload(client, b"not really a pdf", filename="resume.pdf", media_type="application/pdf")
    assert response.status_code == 422
    assert response.json()["error"] == "extraction_failed"


def test_missing_job_title(client):
    response = _upload(client, SAMPLE_RESUME.encode(), data={"jobDescription": SAMPLE_JOB_DESCRIPTION})
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_missing_file(client):
    response = client.post("/api/analyze", data=JOB_FORM)
    assert response.status_code == 400
    assert response.json() == {"error": "invalid_input", "detail": "No resume file uploaded"}


def test_empty_job_description_rejected(client):
    response = _upload(client, SAMPLE_RESUME.encode(), data={"jobTitle": "Engineer", "jobDescription": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_stop_word_job_description_warns(client):
    response = _upload(
        client,
        SAMPLE_RESUME.encode(),
        data={"jobTitle": "Engineer", "jobDescription": "Join the team and the role."},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["keywordScore"] == 100
    assert body["matchedKeywords"] == [] and body["missingKeywords"] == []
    assert [w["code"] for w in body["warnings"]] == ["low_signal"]
