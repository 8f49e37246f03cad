"""Job description generation agent."""

from agents.base import AIResult, BaseAgent
from agents.common.utils import format_agent_context
from agents.jobs.prompts import JOB_DESCRIPTION_PROMPT, JOB_DESCRIPTION_SYSTEM_PROMPT
from api.schemas.ai import JobDescriptionRequest


class JobDescriptionAgent(BaseAgent):
    def __init__(self):
        super().__init__(
            name="job_description",
            instructions=JOB_DESCRIPTION_SYSTEM_PROMPT,
        )

    async def process(self, job: JobDescriptionRequest) -> AIResult[str]:
        """Draft a description for ``job``; empty string on failure."""
        try:
            context = format_agent_context(job.model_dump(mode="json"))
            text = await self.run(JOB_DESCRIPTION_PROMPT.format(context=context))
            return AIResult(value=text.strip())
        except Exception as exc:
            return self.fallback("", exc)
