import io


def test_upload_pdf(client, sample_pdf_bytes):
    files = {"file": ("sustainability_brief.pdf", io.BytesIO(sample_pdf_bytes), "application/pdf")}
    r = client.post("/upload", files=files)
    assert r.status_code == 200, r.text
    payload = r.json()
    assert payload["filename"] == "sustainability_brief.pdf"
    assert "eco-friendly" in payload["content"]
    assert payload["assetType"] == "doc"
    assert payload["contentType"] == "esg-report"

def test_upload_docx(client, sample_docx_bytes):
    files = {"file": ("customer_offer.docx", io.BytesIO(sample_docx_bytes),
                      "application/vnd.openxmlformats-officedocument.wordprocessingml.document")}
    r = client.post("/upload", files=files)
    assert r.status_code == 200, r.text
    payload = r.json()
    assert payload["content"] == "A world-class valve upgrade.\n\nClick here now to learn more."
    assert payload["contentType"] == "customer-proposal"

def test_upload_txt_then_analyze(client):
    text = b"Our super cheap pump is a green solution."
    r = client.post("/upload", files={"file": ("notes.txt", io.BytesIO(text), "text/plain")})
    assert r.status_code == 200, r.text
    payload = r.json()
    assert payload["assetType"] == "email"
    assert payload["contentType"] == "internal"

    body = {k: payload[k] for k in ("content", "assetType", "contentType")}
    r = client.post("/analyze", json={**body, "businessUnit": "pumping"})
    assert r.status_code == 200, r.text
    assert [i["id"] for i in r.json()["issues"]] == ["bt-3", "su-2"]

def test_uploads_leave_no_files_behind(client, upload_tmp_dir, sample_pdf_bytes):
    for i in range(3):
        r = client.post("/upload", files={"file": (f"n{i}.txt", io.BytesIO(b"plain notes"), "text/plain")})
        assert r.status_code == 200, r.text
    # rejected MIME type is cleaned up too
    r = client.post("/upload", files={"file": ("fake.txt", io.BytesIO(sample_pdf_bytes), "text/plain")})
    assert r.status_code == 400
    assert list(upload_tmp_dir.iterdir()) == []

def test_upload_wrong_ext(client, sample_pdf_bytes):
    # send .exe with pdf bytes → should be blocked by extension guard
    files = {"file": ("bad.exe", io.BytesIO(sample_pdf_bytes), "application/octet-stream")}
    r = client.post("/upload", files=files)
    assert r.status_code in (400, 415)
