"""Builders for test documents and API payloads."""

from io import BytesIO
from typing import Any

from docx import Document
from docx.shared import Pt
from fastapi.testclient import TestClient

DEFAULT_PASSWORD = "Sup3rSecret!"


def _create_minimal_pdf(text: str) -> bytes:
    """Create a minimal valid PDF with embedded text."""
    pdf = (
        b"%PDF-1.4\n"
        b"1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
        b"2 0 obj<</Type/Pages/Kids[3 0 R]/Count 1>>endobj\n"
        b"3 0 obj<</Type/Page/Parent 2 0 R/MediaBox[0 0 612 792]/Contents 4 0 R/Resources<</Font<</F1 5 0 R>>>>>>endobj\n"
        b"4 0 obj<</Length 44>>stream\nBT /F1 12 Tf 100 700 Td ("
        + text.encode()
        + b") Tj ET\nendstream endobj\n"
        b"5 0 obj<</Type/Font/Subtype/Type1/BaseFont/Helvetica>>endobj\n"
        b"xref\n0 6\n0000000000 65535 f \n0000000009 00000 n \n0000000058 00000 n \n0000000115 00000 n \n0000000214 00000 n \n0000000306 00000 n \n"
        b"trailer<</Size 6/Root 1 0 R>>\nstartxref\n388\n%%EOF"
    )
    return pdf


def _create_test_docx(
    para_text: str, cell_text: str = "", paragraphs_only: bool = True
) -> BytesIO:
    """Create a simple DOCX document for testing."""
    stream = BytesIO()
    doc = Document()

    para1 = doc.add_paragraph(para_text)
    para1.runs[0].font.size = Pt(12)

    if cell_text and paragraphs_only:
        para2 = doc.add_paragraph(cell_text)
        para2.runs[0].font.size = Pt(12)

    if not paragraphs_only:
        table = doc.add_table(rows=1, cols=1)
        cell = table.rows[0].cells[0]
        cell.text = cell_text or "Table Cell"

    doc.save(stream)
    stream.seek(0)
    return stream


def signup(client: TestClient, email: str = "hr@example.com", **overrides: Any):
    payload = {
        "email": email,
        "password": DEFAULT_PASSWORD,
        "firstName": "Hana",
        "lastName": "Reyes",
        "department": "People",
    }
    payload.update(overrides)
    return client.post("/api/auth/signup", json=payload)


def login(client: TestClient, email: str = "hr@example.com", password: str = DEFAULT_PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def job_payload(**overrides: Any) -> dict:
    payload = {
        "title": "Backend Engineer",
        "description": "Build and run our APIs",
        "department": "Engineering",
        "location": "Berlin",
        "employmentType": "full_time",
        "workLocation": "hybrid",
        "experienceLevel": "mid",
        "salaryMin": 60000,
        "salaryMax": 80000,
        "status": "draft",
    }
    payload.update(overrides)
    return payload


def candidate_payload(**overrides: Any) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "experience": 5,
        "skills": ["Python", "SQL"],
        "status": "new",
        "source": "direct",
    }
    payload.update(overrides)
    return payload
