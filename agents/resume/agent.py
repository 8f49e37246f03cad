"""Resume parsing agent."""

from typing import Any

from google.genai import types

from agents.base import AIResult, BaseAgent
from agents.common.utils import parse_json_response
from agents.resume.prompts import (
    RESUME_FILE_PROMPT,
    RESUME_PARSER_SYSTEM_PROMPT,
    RESUME_TEXT_PROMPT,
)
from api.schemas.candidates import ParsedResume
from core.parsers.document_parser import (
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    extract_document_text,
)

SUPPORTED_RESUME_TYPES = frozenset({PDF_MIME_TYPE, DOC_MIME_TYPE, DOCX_MIME_TYPE})

# Keeps the prompt well inside the model context for very long CVs
MAX_RESUME_CHARS = 50_000


class ResumeParserAgent(BaseAgent):
    """Turns an uploaded resume into a ``ParsedResume``."""

    def __init__(self):
        super().__init__(
            name="resume_parser",
            instructions=RESUME_PARSER_SYSTEM_PROMPT,
        )

    async def process(self, content: bytes, mime_type: str) -> AIResult[ParsedResume]:
        """Parse resume bytes; an all-empty ``ParsedResume`` on any failure."""
        try:
            contents = await self._build_contents(content, mime_type)
            raw = await self.run(contents, json_output=True)
            data = parse_json_response(raw)
            if data is None:
                raise ValueError("resume parser did not return a JSON object")
            return AIResult(value=ParsedResume.model_validate(data))
        except Exception as exc:
            return self.fallback(ParsedResume(), exc)

    async def _build_contents(self, content: bytes, mime_type: str) -> Any:
        if mime_type not in SUPPORTED_RESUME_TYPES:
            raise ValueError(f"unsupported resume type: {mime_type}")

        text = await extract_document_text(content, mime_type)
        if text:
            return RESUME_TEXT_PROMPT.format(text=text[:MAX_RESUME_CHARS])

        # Legacy .doc files and scanned PDFs go to the model as raw bytes
        return [
            types.Part.from_bytes(data=content, mime_type=mime_type),
            RESUME_FILE_PROMPT,
        ]
