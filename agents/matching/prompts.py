"""Candidate/job match prompt templates."""

from agents.common.prompts import ANALYTICAL_TONE, JSON_OUTPUT


RESUME_MATCH_SYSTEM_PROMPT = f"""{ANALYTICAL_TONE}

Compare a candidate profile against a job posting and assess the fit.

Return an object with these keys:
- matchScore: integer from 0 (no fit) to 100 (ideal fit)
- strengths: list of short phrases on where the candidate meets the role
- gaps: list of short phrases on missing skills or experience
- recommendation: one or two sentences for the hiring team

Scoring guide:
- 85-100: meets all core requirements with relevant depth
- 70-84: meets most requirements, minor gaps
- 50-69: partial fit, notable gaps
- 0-49: significant mismatch

{JSON_OUTPUT}
"""


RESUME_MATCH_PROMPT = """## Job
{job}

## Candidate
{candidate}"""
