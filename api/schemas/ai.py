"""Request and response models for the AI-assisted endpoints."""

from typing import Optional
from pydantic import Field

from api.schemas.common import CamelModel
from database.models import EmploymentType, ExperienceLevel, WorkLocation


class JobDescriptionRequest(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    department: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    employment_type: Optional[EmploymentType] = None
    work_location: Optional[WorkLocation] = None
    requirements: Optional[str] = Field(None, description="Notes to work into the description")


class JobDescriptionResponse(CamelModel):
    description: str


class MatchResumeRequest(CamelModel):
    candidate_id: int = Field(gt=0)
    job_id: int = Field(gt=0)


class MatchAssessment(CamelModel):
    match_score: int = Field(0, ge=0, le=100)
    strengths: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    recommendation: str = "Unable to provide recommendation"


class InterviewQuestionsRequest(CamelModel):
    job_id: int = Field(gt=0)
    candidate_background: Optional[str] = Field(None, max_length=5000)


class InterviewQuestions(CamelModel):
    technical: list[str] = Field(default_factory=list)
    behavioral: list[str] = Field(default_factory=list)
    role_specific: list[str] = Field(default_factory=list)


class InterviewSummaryRequest(CamelModel):
    interview_id: int = Field(gt=0)


class InterviewSummaryResponse(CamelModel):
    summary: str
