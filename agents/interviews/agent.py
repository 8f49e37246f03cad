"""Interview question generation and interview summary agent."""

from typing import Any, Dict, Optional

from agents.base import AIResult, BaseAgent
from agents.common.utils import format_agent_context, parse_json_response
from agents.interviews.prompts import (
    INTERVIEW_QUESTIONS_PROMPT,
    INTERVIEW_SUMMARY_PROMPT,
    INTERVIEW_SYSTEM_PROMPT,
)
from api.schemas.ai import InterviewQuestions


class InterviewAgent(BaseAgent):
    """Prepares questions before an interview and summarizes notes after it."""

    def __init__(self):
        super().__init__(
            name="interview",
            instructions=INTERVIEW_SYSTEM_PROMPT,
        )

    async def process(
        self, job: Dict[str, Any], candidate_background: Optional[str] = None
    ) -> AIResult[InterviewQuestions]:
        return await self.generate_questions(job, candidate_background)

    async def generate_questions(
        self, job: Dict[str, Any], candidate_background: Optional[str] = None
    ) -> AIResult[InterviewQuestions]:
        """Question set for ``job``; three empty lists on failure."""
        try:
            prompt = INTERVIEW_QUESTIONS_PROMPT.format(
                job=format_agent_context(job),
                background=candidate_background or "Not provided",
            )
            data = parse_json_response(await self.run(prompt, json_output=True))
            if data is None:
                raise ValueError("interview agent did not return a JSON object")
            return AIResult(value=InterviewQuestions.model_validate(data))
        except Exception as exc:
            return self.fallback(InterviewQuestions(), exc)

    async def summarize(self, notes: str, candidate: str, position: str) -> AIResult[str]:
        """Summary of interviewer notes; empty string on failure."""
        try:
            prompt = INTERVIEW_SUMMARY_PROMPT.format(
                notes=notes, candidate=candidate, position=position
            )
            text = await self.run(prompt)
            return AIResult(value=text.strip())
        except Exception as exc:
            return self.fallback("", exc)
