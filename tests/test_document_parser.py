"""Tests for document parsing utilities."""

import pytest
from io import BytesIO
from docx import Document

from core.parsers import document_parser as dp_module
from tests.helpers import _create_minimal_pdf, _create_test_docx


@pytest.mark.asyncio
async def test_extract_text_from_pdf_stream_with_simple_pdf():
    """Test PDF text extraction from a simple BytesIO stream."""
    pdf_data = _create_minimal_pdf("Hello World")
    stream = BytesIO(pdf_data)

    result = await dp_module.extract_text_from_pdf_stream(stream)
    assert isinstance(result, str)
    assert "Hello" in result or len(result) > 0


@pytest.mark.asyncio
async def test_extract_text_from_pdf_stream_with_bytes():
    """Test PDF extraction accepts raw bytes."""
    pdf_data = _create_minimal_pdf("Test PDF")
    result = await dp_module.extract_text_from_pdf_stream(pdf_data)
    assert isinstance(result, str)


@pytest.mark.asyncio
async def test_extract_text_from_pdf_stream_empty_pdf():
    """Test extraction from empty PDF returns empty string."""
    pdf_data = _create_minimal_pdf("")
    result = await dp_module.extract_text_from_pdf_stream(pdf_data)
    assert result == ""


@pytest.mark.asyncio
async def test_extract_text_from_pdf_stream_closed_stream():
    """Test extraction fails with closed stream."""
    stream = BytesIO(b"test")
    stream.close()

    with pytest.raises(ValueError, match="file_stream is closed"):
        await dp_module.extract_text_from_pdf_stream(stream)


@pytest.mark.asyncio
async def test_extract_text_from_docx_stream_simple():
    """Test DOCX text extraction with simple paragraphs."""
    docx_stream = _create_test_docx("Hello", "World", paragraphs_only=True)

    result = await dp_module.extract_text_from_docx_stream(docx_stream)
    assert "Hello" in result
    assert "World" in result


@pytest.mark.asyncio
async def test_extract_text_from_docx_stream_with_tables(simple_docx):
    """Skills laid out in a table still reach the extracted text."""
    result = await dp_module.extract_text_from_docx_stream(simple_docx)
    assert "Test paragraph" in result
    assert "Test cell" in result


@pytest.mark.asyncio
async def test_extract_text_from_docx_empty():
    """Test extraction from empty DOCX returns empty string."""
    stream = BytesIO()
    Document().save(stream)

    result = await dp_module.extract_text_from_docx_stream(stream.getvalue())
    assert result == ""


@pytest.mark.asyncio
async def test_extract_document_text_dispatches_by_mime_type():
    docx_bytes = _create_test_docx("Resume body").getvalue()

    assert "Resume body" in await dp_module.extract_document_text(
        docx_bytes, dp_module.DOCX_MIME_TYPE
    )
    assert isinstance(
        await dp_module.extract_document_text(
            _create_minimal_pdf("Resume"), dp_module.PDF_MIME_TYPE
        ),
        str,
    )


@pytest.mark.asyncio
async def test_extract_document_text_legacy_doc_is_not_read_locally():
    assert await dp_module.extract_document_text(b"\xd0\xcf\x11\xe0", dp_module.DOC_MIME_TYPE) is None


@pytest.mark.asyncio
async def test_extract_document_text_corrupt_pdf_raises():
    with pytest.raises(Exception):
        await dp_module.extract_document_text(b"not a pdf", dp_module.PDF_MIME_TYPE)


def test_normalize_text_basic():
    """Test whitespace normalization."""
    chunks = ["Hello", "  World  ", "Test"]
    result = dp_module._normalize_text(chunks)
    assert result == "Hello\nWorld\nTest"


def test_normalize_text_drops_blank_chunks():
    chunks = ["Line1", "", "   ", "Line2"]
    assert dp_module._normalize_text(chunks) == "Line1\nLine2"


def test_normalize_text_empty():
    """Test normalization with empty input."""
    assert dp_module._normalize_text([]) == ""


def test_prepare_stream_with_bytes():
    """Test stream preparation converts bytes to BytesIO."""
    data = b"test data"
    stream = dp_module._prepare_stream(data)
    assert isinstance(stream, BytesIO)
    assert stream.tell() == 0
    assert stream.read() == data


def test_prepare_stream_with_bytesio():
    """Test stream preparation rewinds an existing BytesIO."""
    original = BytesIO(b"test")
    original.seek(4)
    stream = dp_module._prepare_stream(original)
    assert stream is original
    assert stream.tell() == 0


def test_prepare_stream_closed_stream():
    """Test stream preparation raises on closed stream."""
    stream = BytesIO(b"test")
    stream.close()
    with pytest.raises(ValueError, match="file_stream is closed"):
        dp_module._prepare_stream(stream)
