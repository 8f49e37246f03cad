"""Job posting and job template schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field, field_validator, model_validator

from api.schemas.common import (
    CamelModel,
    FilterModel,
    TimestampMixin,
    UpdateModel,
    blank_to_none,
)
from database.models import EmploymentType, ExperienceLevel, JobStatus, WorkLocation


def _check_salary_range(salary_min, salary_max) -> None:
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise ValueError("salaryMin cannot be greater than salaryMax")


# ==================== Jobs ===================== #
class JobFields(CamelModel):
    """Optional job attributes shared by create and update."""

    description: Optional[str] = None
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    department: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=255)
    salary_min: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    salary_max: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    application_deadline: Optional[date] = Field(
        None, description="Last day to apply (YYYY-MM-DD); an empty string is ignored"
    )

    @field_validator(
        "application_deadline", "salary_min", "salary_max", "department", mode="before"
    )
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)


class JobCreate(JobFields):
    title: str = Field(min_length=1, max_length=255)
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    work_location: WorkLocation = WorkLocation.ON_SITE
    experience_level: ExperienceLevel = ExperienceLevel.MID
    status: JobStatus = JobStatus.DRAFT

    @model_validator(mode="after")
    def check_salary_range(self):
        _check_salary_range(self.salary_min, self.salary_max)
        return self


class JobUpdate(UpdateModel, JobFields):
    non_nullable = ("title", "employment_type", "work_location", "experience_level", "status")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    employment_type: Optional[EmploymentType] = None
    work_location: Optional[WorkLocation] = None
    experience_level: Optional[ExperienceLevel] = None
    status: Optional[JobStatus] = None

    @model_validator(mode="after")
    def check_salary_range(self):
        _check_salary_range(self.salary_min, self.salary_max)
        return self


class JobResponse(TimestampMixin):
    id: int
    title: str
    description: Optional[str] = None
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    employment_type: EmploymentType
    work_location: WorkLocation
    experience_level: ExperienceLevel
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    status: JobStatus
    application_deadline: Optional[date] = None
    posted_by: Optional[int] = None
    ai_score: int = 0


class JobFilters(FilterModel):
    status: Optional[JobStatus] = None
    department: Optional[str] = None
    limit: Optional[int] = Field(None, ge=1, le=500)


# ==================== Job Templates ===================== #
class JobTemplateCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=255)
    department: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    employment_type: Optional[EmploymentType] = None
    experience_level: Optional[ExperienceLevel] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    skills: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_salary_range(self):
        _check_salary_range(self.salary_min, self.salary_max)
        return self


class JobTemplateUpdate(UpdateModel):
    non_nullable = ("name", "title", "department", "skills", "benefits")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    employment_type: Optional[EmploymentType] = None
    experience_level: Optional[ExperienceLevel] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    skills: Optional[list[str]] = None
    benefits: Optional[list[str]] = None

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_salary_range(self):
        _check_salary_range(self.salary_min, self.salary_max)
        return self


class JobTemplateResponse(TimestampMixin):
    id: int
    name: str
    title: str
    department: str
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    experience_level: Optional[ExperienceLevel] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    skills: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    is_active: bool


class JobTemplateFilters(FilterModel):
    include_inactive: bool = False
