"""Candidate and application schemas."""

from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from api.schemas.common import (
    CamelModel,
    FilterModel,
    TimestampMixin,
    UpdateModel,
    blank_to_none,
)
from database.models import ApplicationStatus, CandidateSource, CandidateStatus


class EducationEntry(CamelModel):
    degree: str = ""
    field: str = ""
    institution: str = ""
    year: Optional[str] = Field(None, description="Graduation year, as written on the resume")

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, v):
        if isinstance(v, int):
            return str(v)
        return blank_to_none(v)


def _clean_skills(skills: Optional[list[str]]) -> Optional[list[str]]:
    """Trim entries, drop blanks and case-insensitive duplicates, keep order."""
    if skills is None:
        return None
    seen: set[str] = set()
    cleaned = []
    for skill in skills:
        skill = skill.strip()
        if skill and skill.lower() not in seen:
            seen.add(skill.lower())
            cleaned.append(skill)
    return cleaned


# ==================== Candidates ===================== #
class CandidateFields(CamelModel):
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    experience: Optional[int] = Field(None, ge=0, le=80, description="Years of experience")
    current_position: Optional[str] = Field(None, max_length=255)
    current_company: Optional[str] = Field(None, max_length=255)
    resume_url: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    github_url: Optional[str] = Field(None, max_length=500)
    portfolio_url: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None

    @field_validator("experience", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)


class CandidateCreate(CandidateFields):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    status: CandidateStatus = CandidateStatus.NEW
    source: CandidateSource = CandidateSource.DIRECT

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, v):
        """Strip whitespace from name fields."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v):
        return _clean_skills(v)


class CandidateUpdate(UpdateModel, CandidateFields):
    non_nullable = (
        "first_name", "last_name", "email", "skills", "education", "status", "source"
    )

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    skills: Optional[list[str]] = None
    education: Optional[list[EducationEntry]] = None
    status: Optional[CandidateStatus] = None
    source: Optional[CandidateSource] = None

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v):
        return _clean_skills(v)


class CandidateResponse(TimestampMixin):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[int] = None
    current_position: Optional[str] = None
    current_company: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    status: CandidateStatus
    source: CandidateSource
    notes: Optional[str] = None


class CandidateFilters(FilterModel):
    status: Optional[CandidateStatus] = None
    experience: Optional[int] = Field(None, ge=0)
    skills: Optional[list[str]] = Field(
        None, description="Candidate must list every one of these (case-insensitive)"
    )


class ParsedResume(CamelModel):
    """
    Fields extracted from a resume. Every key is always present so the
    client can prefill a form without checking for gaps.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    current_position: str = ""
    current_company: str = ""
    experience: int = Field(0, ge=0)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    @field_validator(
        "first_name",
        "last_name",
        "email",
        "phone",
        "location",
        "current_position",
        "current_company",
        mode="before",
    )
    @classmethod
    def none_is_empty(cls, v):
        return "" if v is None else v

    @field_validator("experience", mode="before")
    @classmethod
    def coerce_experience(cls, v):
        if v is None or v == "":
            return 0
        if isinstance(v, float):
            return max(int(v), 0)
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return _clean_skills([str(s) for s in v])

    @field_validator("education", mode="before")
    @classmethod
    def drop_malformed_education(cls, v):
        if not isinstance(v, list):
            return []
        return [entry for entry in v if isinstance(entry, dict)]


# ==================== Applications ===================== #
class ApplicationCreate(CamelModel):
    job_id: int = Field(gt=0)
    candidate_id: int = Field(gt=0)
    status: ApplicationStatus = ApplicationStatus.APPLIED
    ai_match_score: int = Field(0, ge=0, le=100)
    cover_letter: Optional[str] = None


class ApplicationUpdate(UpdateModel):
    non_nullable = ("status", "ai_match_score")

    status: Optional[ApplicationStatus] = None
    ai_match_score: Optional[int] = Field(None, ge=0, le=100)
    cover_letter: Optional[str] = None


class ApplicationResponse(CamelModel):
    id: int
    job_id: int
    candidate_id: int
    status: ApplicationStatus
    ai_match_score: int
    cover_letter: Optional[str] = None
    applied_at: datetime
    updated_at: datetime


class ApplicationFilters(FilterModel):
    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    status: Optional[ApplicationStatus] = None
