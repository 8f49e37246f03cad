"""Interview schemas."""

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
from core.utils.datetime import as_utc
from database.models import InterviewRecommendation, InterviewStatus, InterviewType


class InterviewFields(CamelModel):
    interviewer_id: Optional[int] = Field(None, gt=0)
    location: Optional[str] = Field(None, max_length=255)
    meeting_link: Optional[str] = Field(None, max_length=500)
    feedback: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    recommendation: Optional[InterviewRecommendation] = None
    notes: Optional[str] = None

    @field_validator("interviewer_id", "rating", "recommendation", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)


class InterviewCreate(InterviewFields):
    application_id: int = Field(gt=0)
    scheduled_at: datetime
    duration: int = Field(60, gt=0, le=24 * 60, description="Length in minutes")
    type: InterviewType = InterviewType.VIDEO
    status: InterviewStatus = InterviewStatus.SCHEDULED

    @field_validator("scheduled_at")
    @classmethod
    def normalize_to_utc(cls, v):
        return as_utc(v)


class InterviewUpdate(UpdateModel, InterviewFields):
    non_nullable = ("scheduled_at", "duration", "type", "status")

    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0, le=24 * 60)
    type: Optional[InterviewType] = None
    status: Optional[InterviewStatus] = None

    @field_validator("scheduled_at")
    @classmethod
    def normalize_to_utc(cls, v):
        return as_utc(v) if v is not None else v


class InterviewResponse(TimestampMixin):
    id: int
    application_id: int
    interviewer_id: Optional[int] = None
    scheduled_at: datetime
    duration: int
    type: InterviewType
    location: Optional[str] = None
    meeting_link: Optional[str] = None
    status: InterviewStatus
    feedback: Optional[str] = None
    rating: Optional[int] = None
    recommendation: Optional[InterviewRecommendation] = None
    notes: Optional[str] = None


class InterviewFilters(FilterModel):
    on_date: Optional[date] = Field(None, description="Calendar day (UTC) of scheduledAt")
    interviewer_id: Optional[int] = None
    status: Optional[InterviewStatus] = None
