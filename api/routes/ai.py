"""
AI-assisted endpoints.

These never fail because of the AI service: on any provider problem the
agent's default value is returned with ``X-AI-Fallback: true``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from agents import InterviewAgent, JobDescriptionAgent, ResumeMatchAgent
from agents.base import AIResult
from api.dependencies import require_active_user
from api.schemas.ai import (
    InterviewQuestions,
    InterviewQuestionsRequest,
    InterviewSummaryRequest,
    InterviewSummaryResponse,
    JobDescriptionRequest,
    JobDescriptionResponse,
    MatchAssessment,
    MatchResumeRequest,
)
from api.services import applications as application_service
from api.services import candidates as candidate_service
from api.services import interviews as interview_service
from api.services import jobs as job_service
from database.engine import get_db
from database.models import Candidate, Job, User

router = APIRouter(prefix="/ai", tags=["ai"])


def _mark_fallback(response: Response, result: AIResult) -> None:
    response.headers["X-AI-Fallback"] = "true" if result.fallback else "false"


def job_context(job: Job) -> Dict[str, Any]:
    return {
        "title": job.title,
        "department": job.department,
        "experience_level": job.experience_level.value,
        "employment_type": job.employment_type.value,
        "description": job.description,
        "requirements": job.requirements,
        "responsibilities": job.responsibilities,
    }


def candidate_context(candidate: Candidate) -> Dict[str, Any]:
    return {
        "name": candidate.full_name,
        "current_position": candidate.current_position,
        "current_company": candidate.current_company,
        "years_of_experience": candidate.experience,
        "skills": candidate.skills,
        "education": candidate.education,
        "notes": candidate.notes,
    }


async def _require_job(db: AsyncSession, job_id: int) -> Job:
    job = await job_service.get_job(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post(
    "/generate-job-description",
    response_model=JobDescriptionResponse,
    summary="Generate Job Description",
)
async def generate_job_description(
    payload: JobDescriptionRequest,
    response: Response,
    current_user: User = Depends(require_active_user),
):
    result = await JobDescriptionAgent().process(payload)
    _mark_fallback(response, result)
    return JobDescriptionResponse(description=result.value)


@router.post(
    "/match-resume",
    response_model=MatchAssessment,
    summary="Match Candidate To Job",
    description="Score how well a stored candidate fits a stored job (0-100).",
)
async def match_resume(
    payload: MatchResumeRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    candidate = await candidate_service.get_candidate(db, payload.candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    job = await _require_job(db, payload.job_id)

    result = await ResumeMatchAgent().process(candidate_context(candidate), job_context(job))
    _mark_fallback(response, result)
    return result.value


@router.post(
    "/interview-questions",
    response_model=InterviewQuestions,
    summary="Generate Interview Questions",
)
async def interview_questions(
    payload: InterviewQuestionsRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    job = await _require_job(db, payload.job_id)

    result = await InterviewAgent().generate_questions(
        job_context(job), payload.candidate_background
    )
    _mark_fallback(response, result)
    return result.value


@router.post(
    "/summarize-interview",
    response_model=InterviewSummaryResponse,
    summary="Summarize Interview",
    description="Summarize an interview's notes and feedback for the hiring team.",
)
async def summarize_interview(
    payload: InterviewSummaryRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    interview = await interview_service.get_interview(db, payload.interview_id)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")

    notes = "\n\n".join(part for part in (interview.notes, interview.feedback) if part)
    if not notes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Interview has no notes or feedback to summarize",
        )

    candidate_name, position = "Unknown candidate", "Unknown position"
    application = await application_service.get_application(db, interview.application_id)
    if application:
        candidate = await candidate_service.get_candidate(db, application.candidate_id)
        job = await job_service.get_job(db, application.job_id)
        if candidate:
            candidate_name = candidate.full_name
        if job:
            position = job.title

    result = await InterviewAgent().summarize(notes, candidate_name, position)
    _mark_fallback(response, result)
    return InterviewSummaryResponse(summary=result.value)
