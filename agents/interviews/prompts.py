"""Interview preparation and summary prompt templates."""

from agents.common.prompts import JSON_OUTPUT, PROFESSIONAL_TONE


INTERVIEW_SYSTEM_PROMPT = f"""{PROFESSIONAL_TONE}

You support interviewers before and after candidate interviews. Questions
must be job-related, open-ended and free of anything touching protected
characteristics.
"""


INTERVIEW_QUESTIONS_PROMPT = f"""Prepare interview questions for this role.

## Job
{{job}}

## Candidate background
{{background}}

Return an object with keys technical, behavioral and roleSpecific, each a
list of 3 to 5 questions.

{JSON_OUTPUT}"""


INTERVIEW_SUMMARY_PROMPT = """Summarize this interview for the hiring team.

Candidate: {candidate}
Position: {position}

Interviewer notes:
---
{notes}
---

Write a short summary covering key observations, strengths, concerns and a
suggested next step. Use only what the notes say."""
