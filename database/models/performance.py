from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    ForeignKey,
    Integer,
    Date,
    DateTime,
    func,
    Text,
    JSON,
    Enum as SQLEnum,
)
from database.engine import Base
from datetime import date, datetime
from enum import Enum as PyEnum
from typing import Any


# ==================== Review Enums ===================== #
class ReviewType(str, PyEnum):
    QUARTERLY = "quarterly"
    ANNUAL = "annual"
    DAY_30 = "30_day"
    DAY_60 = "60_day"
    DAY_90 = "90_day"


class ReviewStatus(str, PyEnum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    REVIEWED = "reviewed"
    COMPLETED = "completed"


# ==================== Models ===================== #
class PerformanceReview(Base):
    """
    Periodic review of an employee.

    goals holds a list of {title, progress (0-100), status} objects.
    """

    __tablename__: str = "performance_reviews"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reviewer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL")
    )
    period: Mapped[str] = mapped_column(String(50), nullable=False)
    type: Mapped[ReviewType] = mapped_column(
        SQLEnum(ReviewType, native_enum=False, length=50),
        nullable=False,
        default=ReviewType.QUARTERLY,
    )
    goals: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    achievements: Mapped[str | None] = mapped_column(Text)
    feedback: Mapped[str | None] = mapped_column(Text)
    rating: Mapped[int | None] = mapped_column(Integer)  # 1-5
    status: Mapped[ReviewStatus] = mapped_column(
        SQLEnum(ReviewStatus, native_enum=False, length=50),
        nullable=False,
        default=ReviewStatus.DRAFT,
    )
    due_date: Mapped[date | None] = mapped_column(Date)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
