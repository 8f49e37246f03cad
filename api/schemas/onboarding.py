"""Onboarding task schemas."""

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
from database.models import TaskCategory, TaskPriority, TaskStatus


class OnboardingTaskFields(CamelModel):
    description: Optional[str] = None
    assigned_to: Optional[int] = Field(None, gt=0)
    due_date: Optional[date] = None

    @field_validator("assigned_to", "due_date", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return blank_to_none(v)


class OnboardingTaskCreate(OnboardingTaskFields):
    employee_id: int = Field(gt=0)
    title: str = Field(min_length=1, max_length=255)
    category: TaskCategory = TaskCategory.HR
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM


class OnboardingTaskUpdate(UpdateModel, OnboardingTaskFields):
    non_nullable = ("employee_id", "title", "category", "status", "priority")

    employee_id: Optional[int] = Field(None, gt=0)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[TaskCategory] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None


class OnboardingTaskResponse(TimestampMixin):
    id: int
    employee_id: int
    title: str
    description: Optional[str] = None
    category: TaskCategory
    assigned_to: Optional[int] = None
    due_date: Optional[date] = None
    status: TaskStatus
    priority: TaskPriority
    completed_at: Optional[datetime] = None


class OnboardingTaskFilters(FilterModel):
    employee_id: Optional[int] = None
