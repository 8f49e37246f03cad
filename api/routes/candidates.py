"""
Candidate management endpoints, including AI resume parsing.
"""

import logging
from typing import Optional

from fastapi import (
    APIRouter,
    Depends,
    File,
    HTTPException,
    Path,
    Query,
    Response,
    UploadFile,
    status,
)
from sqlalchemy.ext.asyncio import AsyncSession

from agents.resume.agent import ResumeParserAgent, SUPPORTED_RESUME_TYPES
from api.dependencies import require_active_user
from api.schemas.candidates import (
    CandidateCreate,
    CandidateFilters,
    CandidateResponse,
    CandidateUpdate,
    ParsedResume,
)
from api.services import candidates as candidate_service
from api.services.activity import record_activity
from core.config import settings
from database.engine import get_db
from database.models import CandidateStatus, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/candidates", tags=["candidates"])

INVALID_RESUME_TYPE = "Invalid file type. Only PDF, DOC, and DOCX files are allowed."


def parse_skills_param(skills: Optional[str]) -> Optional[list[str]]:
    """``"python, SQL,,"`` -> ``["python", "SQL"]``; blank input means no filter."""
    if not skills:
        return None
    parsed = [s.strip() for s in skills.split(",") if s.strip()]
    return parsed or None


@router.get(
    "",
    response_model=list[CandidateResponse],
    summary="List Candidates",
    description=(
        "List candidates, newest first. `skills` is comma-separated and matches "
        "candidates listing all of them."
    ),
)
async def list_candidates(
    status: Optional[CandidateStatus] = Query(None, description="Filter by status"),
    experience: Optional[int] = Query(None, ge=0, description="Exact years of experience"),
    skills: Optional[str] = Query(None, description="Comma-separated skills"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = CandidateFilters(
        status=status, experience=experience, skills=parse_skills_param(skills)
    )
    return await candidate_service.list_candidates(db, filters)


@router.post(
    "/parse-resume",
    response_model=ParsedResume,
    summary="Parse Resume",
    description=(
        "Extract candidate fields from an uploaded resume (PDF, DOC or DOCX, "
        "10MB max). Nothing is saved. If the AI service fails, every field is "
        "returned empty and the `X-AI-Fallback` header is `true`."
    ),
)
async def parse_resume(
    response: Response,
    resume: UploadFile = File(..., description="Resume file"),
    current_user: User = Depends(require_active_user),
):
    if resume.content_type not in SUPPORTED_RESUME_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_RESUME_TYPE)

    content = await resume.read(settings.resume_max_bytes + 1)
    if len(content) > settings.resume_max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="File too large. Maximum size is 10MB.",
        )
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")

    result = await ResumeParserAgent().process(content, resume.content_type)
    response.headers["X-AI-Fallback"] = "true" if result.fallback else "false"
    return result.value


@router.get("/{candidate_id}", response_model=CandidateResponse, summary="Get Candidate")
async def get_candidate(
    candidate_id: int = Path(..., description="Candidate ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    candidate = await candidate_service.get_candidate(db, candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return candidate


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Candidate",
)
async def create_candidate(
    payload: CandidateCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    candidate = await candidate_service.create_candidate(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_candidate",
        entity_type="candidate",
        entity_id=candidate.id,
        description=f"Added new candidate: {candidate.full_name}",
    )
    return candidate


@router.put("/{candidate_id}", response_model=CandidateResponse, summary="Update Candidate")
async def update_candidate(
    payload: CandidateUpdate,
    candidate_id: int = Path(..., description="Candidate ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    candidate = await candidate_service.update_candidate(db, candidate_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_candidate",
        entity_type="candidate",
        entity_id=candidate.id,
        description=f"Updated candidate: {candidate.full_name}",
        metadata={"fields": sorted(changes)},
    )
    return candidate


@router.delete(
    "/{candidate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Candidate",
)
async def delete_candidate(
    candidate_id: int = Path(..., description="Candidate ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    candidate = await candidate_service.get_candidate(db, candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    await candidate_service.delete_candidate(db, candidate_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_candidate",
        entity_type="candidate",
        entity_id=candidate_id,
        description=f"Deleted candidate: {candidate.full_name}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
