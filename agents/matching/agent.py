"""Candidate/job match assessment agent."""

from typing import Any, Dict

from agents.base import AIResult, BaseAgent
from agents.common.utils import clamp_score, format_agent_context, parse_json_response
from agents.matching.prompts import RESUME_MATCH_PROMPT, RESUME_MATCH_SYSTEM_PROMPT
from api.schemas.ai import MatchAssessment
from core.config import settings


class ResumeMatchAgent(BaseAgent):
    """
    Scores how well a candidate fits a job.

    Uses the reasoning model. Scores outside 0-100 are clamped rather than
    rejected; any other malformed answer yields the default assessment.
    """

    def __init__(self):
        super().__init__(
            name="resume_match",
            instructions=RESUME_MATCH_SYSTEM_PROMPT,
            model=settings.gemini_reasoning_model,
        )

    async def process(
        self, candidate: Dict[str, Any], job: Dict[str, Any]
    ) -> AIResult[MatchAssessment]:
        try:
            prompt = RESUME_MATCH_PROMPT.format(
                job=format_agent_context(job),
                candidate=format_agent_context(candidate),
            )
            data = parse_json_response(await self.run(prompt, json_output=True))
            if data is None:
                raise ValueError("match agent did not return a JSON object")

            score = data.get("matchScore", data.get("match_score"))
            data["matchScore"] = clamp_score(score)
            data.pop("match_score", None)
            return AIResult(value=MatchAssessment.model_validate(data))
        except Exception as exc:
            return self.fallback(MatchAssessment(), exc)
