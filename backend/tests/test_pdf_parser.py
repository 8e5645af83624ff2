import io

import pytest
from docx import Document

from services.pdf_parser import extract_resume_text, extract_text_docx


def _docx_bytes(*paragraphs: str) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_extract_text_docx():
    content = _docx_bytes("Jane Doe", "Software Engineer", "Python, Docker")
    assert extract_text_docx(content) == "Jane Doe\nSoftware Engineer\nPython, Docker"


def test_dispatch_on_extension():
    content = _docx_bytes("Backend Developer")
    assert extract_resume_text("CV.DOCX", content) == "Backend Developer"


def test_unsupported_extension():
    with pytest.raises(ValueError):
        extract_resume_text("resume.txt", b"plain text")
