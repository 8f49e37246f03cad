"""
Text extraction for uploaded documents (resumes).

pdfplumber and python-docx are synchronous and CPU-bound, so the public
functions run them in a worker thread.
"""

import asyncio
import logging
import re
from io import BytesIO
from typing import Iterable, Optional, Union

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOC_MIME_TYPE = "application/msword"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

Stream = Union[BytesIO, bytes, bytearray, memoryview]


async def extract_text_from_pdf_stream(file_stream: Stream) -> str:
    """Return normalized text from a PDF stream without blocking the event loop."""
    stream = _prepare_stream(file_stream)
    return await asyncio.to_thread(_extract_pdf_text_sync, stream)


async def extract_text_from_docx_stream(file_stream: Stream) -> str:
    """Return normalized text from a DOCX stream, table cells included."""
    stream = _prepare_stream(file_stream)
    return await asyncio.to_thread(_extract_docx_text_sync, stream)


async def extract_document_text(content: bytes, mime_type: str) -> Optional[str]:
    """
    Extract text for the formats we can read locally.

    Returns None for formats that need the AI service to read the raw bytes
    (legacy .doc). Parser errors propagate to the caller.
    """
    if mime_type == PDF_MIME_TYPE:
        return await extract_text_from_pdf_stream(content)
    if mime_type == DOCX_MIME_TYPE:
        return await extract_text_from_docx_stream(content)
    return None


def _extract_pdf_text_sync(file_stream: BytesIO) -> str:
    chunks: list[str] = []

    with pdfplumber.open(file_stream) as pdf:
        for idx, page in enumerate(pdf.pages, start=1):
            page_text = page.extract_text() or ""
            if page_text:
                chunks.append(page_text)
            else:
                logger.debug("PDF page %s has no text layer", idx)

    text = _normalize_text(chunks)
    if not text:
        logger.info("PDF contained no extractable text")
    return text


def _extract_docx_text_sync(file_stream: BytesIO) -> str:
    doc = Document(file_stream)
    text = _normalize_text(_iter_docx_text(doc))
    if not text:
        logger.info("DOCX contained no extractable text")
    return text


def _iter_docx_text(doc) -> Iterable[str]:
    for para in doc.paragraphs:
        if para.text:
            yield para.text

    # resumes often lay out skills and history in tables
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text:
                    yield cell.text


def _normalize_text(chunks: Iterable[str]) -> str:
    """Trim chunks, drop empty ones and cap blank-line runs at one."""
    cleaned = [chunk.strip() for chunk in chunks if chunk and chunk.strip()]
    if not cleaned:
        return ""

    text = "\n".join(cleaned)
    text = re.sub(r"[ \t]+\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _prepare_stream(file_stream: Stream) -> BytesIO:
    if isinstance(file_stream, (bytes, bytearray, memoryview)):
        stream = BytesIO(file_stream)
    else:
        stream = file_stream

    if stream.closed:
        raise ValueError("file_stream is closed")

    stream.seek(0)
    return stream
