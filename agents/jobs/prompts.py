"""Job description prompt templates."""

from agents.common.prompts import PROFESSIONAL_TONE


JOB_DESCRIPTION_SYSTEM_PROMPT = f"""{PROFESSIONAL_TONE}

You write job postings for an internal HR team. Produce a complete, inclusive
job description with these sections: About the Role, Key Responsibilities,
Requirements, Nice to Have, and What We Offer.

Write plain text with simple headings and bullet points. Do not invent a
company name, salary figures or benefits that were not provided.
"""


JOB_DESCRIPTION_PROMPT = """Write a job description for the following position.

{context}"""
