"""
Tests for the Gemini-backed agents.

The google-genai client is replaced with a mock; no network calls are made.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agents import (
    AIUnavailableError,
    InterviewAgent,
    JobDescriptionAgent,
    ResumeMatchAgent,
    ResumeParserAgent,
)
from agents.common.utils import clamp_score, format_agent_context, parse_json_response
from api.schemas.ai import JobDescriptionRequest
from api.schemas.candidates import ParsedResume
from core.parsers.document_parser import DOC_MIME_TYPE, DOCX_MIME_TYPE, PDF_MIME_TYPE
from tests.helpers import _create_test_docx


def _mock_client(text=None, side_effect=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=text), side_effect=side_effect
    )
    return client


def _with_client(agent, **kwargs):
    agent._client = _mock_client(**kwargs)
    return agent


class TestParseJsonResponse:
    def test_plain_object(self):
        assert parse_json_response('{"a": 1}') == {"a": 1}

    def test_fenced_object(self):
        assert parse_json_response('```json\n{"a": 1}\n```') == {"a": 1}

    def test_object_inside_prose(self):
        assert parse_json_response('Here you go: {"a": 1} hope it helps') == {"a": 1}

    @pytest.mark.parametrize("text", ["", "not json", "[1, 2]", "{broken"])
    def test_unparseable(self, text):
        assert parse_json_response(text) is None


class TestUtils:
    @pytest.mark.parametrize("value,expected", [
        (85, 85), ("72", 72), (101, 100), (-4, 0), (66.6, 67), (None, 0), ("high", 0),
    ])
    def test_clamp_score(self, value, expected):
        assert clamp_score(value) == expected

    def test_format_agent_context_skips_empty(self):
        text = format_agent_context({"job_title": "QA", "notes": None, "skills": ["a"]})
        assert text == 'Job Title: QA\nSkills: ["a"]'


class TestBaseAgent:
    async def test_missing_api_key_falls_back(self):
        result = await JobDescriptionAgent().process(JobDescriptionRequest(title="QA"))

        assert result.fallback is True
        assert result.value == ""
        assert result.error == "AIUnavailableError"

    async def test_missing_api_key_raises_from_run(self):
        with pytest.raises(AIUnavailableError):
            await JobDescriptionAgent().run("hello")

    async def test_timeout_falls_back(self):
        async def slow(*args, **kwargs):
            await asyncio.sleep(1)

        agent = JobDescriptionAgent()
        agent.timeout = 0.01
        agent._client = MagicMock()
        agent._client.aio.models.generate_content = slow

        result = await agent.process(JobDescriptionRequest(title="QA"))
        assert result.fallback is True
        assert result.error == "AIUnavailableError"

    async def test_provider_error_falls_back(self):
        agent = _with_client(JobDescriptionAgent(), side_effect=RuntimeError("quota"))
        result = await agent.process(JobDescriptionRequest(title="QA"))
        assert result.fallback is True
        assert result.error == "RuntimeError"

    async def test_empty_response_falls_back(self):
        agent = _with_client(JobDescriptionAgent(), text="")
        result = await agent.process(JobDescriptionRequest(title="QA"))
        assert result.fallback is True


class TestJobDescriptionAgent:
    async def test_returns_text(self):
        agent = _with_client(JobDescriptionAgent(), text="  About the Role\n...  ")

        result = await agent.process(JobDescriptionRequest(title="QA Engineer", department="Quality"))

        assert result.fallback is False
        assert result.value == "About the Role\n..."
        call = agent._client.aio.models.generate_content.call_args
        assert "QA Engineer" in call.kwargs["contents"]
        assert "Quality" in call.kwargs["contents"]


class TestResumeParserAgent:
    RESPONSE = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": None,
        "currentPosition": "Engineer",
        "experience": "7",
        "skills": ["Python", "python", " SQL "],
        "education": [{"degree": "BSc", "field": "Maths", "institution": "UCL", "year": 1835}, "junk"],
    }

    async def test_docx_text_sent_as_prompt(self):
        agent = _with_client(ResumeParserAgent(), text=json.dumps(self.RESPONSE))
        content = _create_test_docx("Ada Lovelace, Engineer").getvalue()

        result = await agent.process(content, DOCX_MIME_TYPE)

        assert result.fallback is False
        parsed = result.value
        assert parsed.first_name == "Ada"
        assert parsed.phone == ""
        assert parsed.location == ""
        assert parsed.experience == 7
        assert parsed.skills == ["Python", "SQL"]
        assert parsed.education[0].year == "1835"
        assert len(parsed.education) == 1

        contents = agent._client.aio.models.generate_content.call_args.kwargs["contents"]
        assert "Ada Lovelace, Engineer" in contents

    async def test_doc_sent_inline(self):
        agent = _with_client(ResumeParserAgent(), text=json.dumps(self.RESPONSE))

        with patch("agents.resume.agent.types.Part.from_bytes") as from_bytes:
            result = await agent.process(b"\xd0\xcf\x11\xe0legacy", DOC_MIME_TYPE)

        assert result.fallback is False
        from_bytes.assert_called_once_with(data=b"\xd0\xcf\x11\xe0legacy", mime_type=DOC_MIME_TYPE)

    async def test_json_requested(self):
        agent = _with_client(ResumeParserAgent(), text=json.dumps(self.RESPONSE))
        await agent.process(_create_test_docx("x").getvalue(), DOCX_MIME_TYPE)

        config = agent._client.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"

    async def test_unparseable_output_falls_back_to_empty_fields(self):
        agent = _with_client(ResumeParserAgent(), text="Sorry, I cannot read this.")

        result = await agent.process(_create_test_docx("x").getvalue(), DOCX_MIME_TYPE)

        assert result.fallback is True
        assert result.value == ParsedResume()
        dumped = result.value.model_dump(by_alias=True)
        assert set(dumped) == {
            "firstName", "lastName", "email", "phone", "location",
            "currentPosition", "currentCompany", "experience", "skills", "education",
        }

    async def test_corrupt_pdf_falls_back(self):
        agent = _with_client(ResumeParserAgent(), text=json.dumps(self.RESPONSE))
        result = await agent.process(b"not really a pdf", PDF_MIME_TYPE)
        assert result.fallback is True

    async def test_unsupported_type_falls_back(self):
        agent = _with_client(ResumeParserAgent(), text=json.dumps(self.RESPONSE))
        result = await agent.process(b"hello", "text/plain")
        assert result.fallback is True
        agent._client.aio.models.generate_content.assert_not_called()


class TestResumeMatchAgent:
    async def test_score_clamped(self):
        response = {"matchScore": 130, "strengths": ["Python"], "gaps": [], "recommendation": "Hire"}
        agent = _with_client(ResumeMatchAgent(), text=json.dumps(response))

        result = await agent.process({"name": "Ada"}, {"title": "Engineer"})

        assert result.fallback is False
        assert result.value.match_score == 100
        assert result.value.strengths == ["Python"]

    async def test_uses_reasoning_model(self):
        agent = _with_client(ResumeMatchAgent(), text='{"matchScore": 50}')
        await agent.process({"name": "Ada"}, {"title": "Engineer"})
        assert agent._client.aio.models.generate_content.call_args.kwargs["model"] == "gemini-2.5-pro"

    async def test_fallback(self):
        result = await ResumeMatchAgent().process({"name": "Ada"}, {"title": "Engineer"})

        assert result.fallback is True
        assert result.value.match_score == 0
        assert result.value.strengths == []
        assert result.value.gaps == []
        assert result.value.recommendation == "Unable to provide recommendation"


class TestInterviewAgent:
    async def test_generate_questions(self):
        response = {"technical": ["Explain indexes"], "behavioral": ["Tell me about a conflict"], "roleSpecific": []}
        agent = _with_client(InterviewAgent(), text=json.dumps(response))

        result = await agent.generate_questions({"title": "DBA"}, "10 years of Postgres")

        assert result.value.technical == ["Explain indexes"]
        assert result.value.role_specific == []
        contents = agent._client.aio.models.generate_content.call_args.kwargs["contents"]
        assert "10 years of Postgres" in contents

    async def test_generate_questions_fallback(self):
        result = await InterviewAgent().generate_questions({"title": "DBA"})
        assert result.fallback is True
        assert result.value.model_dump() == {"technical": [], "behavioral": [], "role_specific": []}

    async def test_summarize(self):
        agent = _with_client(InterviewAgent(), text="Strong SQL. Next: onsite.")
        result = await agent.summarize("Good at SQL", "Ada Lovelace", "DBA")

        assert result.value == "Strong SQL. Next: onsite."
        contents = agent._client.aio.models.generate_content.call_args.kwargs["contents"]
        assert "Ada Lovelace" in contents
        assert "Good at SQL" in contents
