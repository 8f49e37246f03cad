"""
Gemini-backed agents for the HR desk.

Each agent lives in its own package with agent.py and prompts.py, and
returns an ``AIResult`` instead of raising.
"""

from agents.base import AIResult, AIUnavailableError, BaseAgent
from agents.interviews.agent import InterviewAgent
from agents.jobs.agent import JobDescriptionAgent
from agents.matching.agent import ResumeMatchAgent
from agents.resume.agent import SUPPORTED_RESUME_TYPES, ResumeParserAgent

__all__ = [
    "AIResult",
    "AIUnavailableError",
    "BaseAgent",
    "InterviewAgent",
    "JobDescriptionAgent",
    "ResumeMatchAgent",
    "ResumeParserAgent",
    "SUPPORTED_RESUME_TYPES",
]
