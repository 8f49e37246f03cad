"""Performance review schemas."""

from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator

from api.schemas.common import (
    CamelModel,
    FilterModel,
    TimestampMixin,
    UpdateModel,
    blank_to_none,
)
from database.models import ReviewStatus, ReviewType


class ReviewGoal(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    progress: int = Field(0, ge=0, le=100, description="Percent complete")
    status: str = Field("not_started", max_length=50)


class PerformanceReviewFields(CamelModel):
    reviewer_id: Optional[int] = Field(None, gt=0)
    achievements: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    due_date: Optional[date] = None

    @field_validator("reviewer_id", "rating", "due_date", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)


class PerformanceReviewCreate(PerformanceReviewFields):
    employee_id: int = Field(gt=0)
    period: str = Field(min_length=1, max_length=50, description='e.g. "Q1 2025"')
    type: ReviewType = ReviewType.QUARTERLY
    goals: list[ReviewGoal] = Field(default_factory=list)
    status: ReviewStatus = ReviewStatus.DRAFT


class PerformanceReviewUpdate(UpdateModel, PerformanceReviewFields):
    non_nullable = ("employee_id", "period", "type", "goals", "status")

    employee_id: Optional[int] = Field(None, gt=0)
    period: Optional[str] = Field(None, min_length=1, max_length=50)
    type: Optional[ReviewType] = None
    goals: Optional[list[ReviewGoal]] = None
    status: Optional[ReviewStatus] = None


class PerformanceReviewResponse(TimestampMixin):
    id: int
    employee_id: int
    reviewer_id: Optional[int] = None
    period: str
    type: ReviewType
    goals: list[ReviewGoal] = Field(default_factory=list)
    achievements: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = None
    status: ReviewStatus
    due_date: Optional[date] = None
    submitted_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None


class PerformanceReviewFilters(FilterModel):
    employee_id: Optional[int] = None
