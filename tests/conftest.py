# tests/conftest.py
from __future__ import annotations
import io
import json
import tempfile
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from brand_review.main import app
from brand_review.core import config
from brand_review.models.rules import RuleSet
from brand_review.services.analyze import Analyzer
from brand_review.services.repository import RuleRepository

import fitz  # PyMuPDF
import docx

# --------------------------------------------------------------------
# Uploads are spooled to the temp dir; point it at an empty folder
# --------------------------------------------------------------------
@pytest.fixture
def upload_tmp_dir(tmp_path, monkeypatch):
    d = tmp_path / "uploads"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d

# --------------------------------------------------------------------
# FastAPI test client; entering the context runs the lifespan (rule load)
# --------------------------------------------------------------------
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

# --------------------------------------------------------------------
# Engine fixtures
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def rules_data() -> dict:
    with open(config.RULES_PATH, encoding="utf-8") as fp:
        return json.load(fp)

@pytest.fixture
def rule_set(rules_data) -> RuleSet:
    return RuleSet.model_validate(rules_data)

@pytest.fixture
def repository(rules_data) -> RuleRepository:
    repo = RuleRepository()
    repo.load(rules_data)
    return repo

@pytest.fixture
def analyzer(repository) -> Analyzer:
    return Analyzer(repository)

@pytest.fixture
def heavy_rules() -> dict:
    """Small rule set whose penalties overflow every bucket."""
    rule = lambda rid, phrase, penalty: {
        "id": rid, "phrase": phrase, "penalty": penalty,
        "severity": "critical", "message": f"{phrase} is off-brand", "suggestion": "rephrase",
    }
    return {
        "version": "test-heavy",
        "lastUpdated": "2025-01-01",
        "brandTone": [rule("h-1", "alpha", 70), rule("h-2", "beta", 45)],
        "sustainability": [rule("h-3", "gamma", 33)],
        "cultural": {"SE": [rule("h-4", "delta", 90)]},
        "assetTypes": {"slide": [rule("h-5", "epsilon", 101)]},
    }

# --------------------------------------------------------------------
# Helpers to create in-memory sample PDF and DOCX
# --------------------------------------------------------------------
def _pdf_bytes(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 100), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data

def _docx_bytes(text: str) -> bytes:
    d = docx.Document()
    for p in text.split("\n\n"):
        d.add_paragraph(p)
    buf = io.BytesIO()
    d.save(buf)
    return buf.getvalue()

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _pdf_bytes("Our eco-friendly pump offers zero emissions.")

@pytest.fixture
def sample_docx_bytes() -> bytes:
    return _docx_bytes("A world-class valve upgrade.\n\nClick here now to learn more.")
