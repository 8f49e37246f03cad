from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    ForeignKey,
    Integer,
    DateTime,
    func,
    Text,
    Enum as SQLEnum,
    Index,
)
from database.engine import Base
from datetime import datetime
from enum import Enum as PyEnum


# ==================== Interview Enums ===================== #
class InterviewType(str, PyEnum):
    PHONE = "phone"
    VIDEO = "video"
    ON_SITE = "on_site"
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"


class InterviewStatus(str, PyEnum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


# Interviews in these statuses no longer take place on their scheduled day
INACTIVE_INTERVIEW_STATUSES = (InterviewStatus.CANCELLED, InterviewStatus.RESCHEDULED)


class InterviewRecommendation(str, PyEnum):
    STRONG_HIRE = "strong_hire"
    HIRE = "hire"
    NO_HIRE = "no_hire"
    STRONG_NO_HIRE = "strong_no_hire"


# ==================== Models ===================== #
class Interview(Base):
    """Scheduled interview for an application."""

    __tablename__: str = "interviews"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    application_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    interviewer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True
    )
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=60)
    type: Mapped[InterviewType] = mapped_column(
        SQLEnum(InterviewType, native_enum=False, length=50),
        nullable=False,
        default=InterviewType.VIDEO,
    )
    location: Mapped[str | None] = mapped_column(String(255))
    meeting_link: Mapped[str | None] = mapped_column(String(500))
    status: Mapped[InterviewStatus] = mapped_column(
        SQLEnum(InterviewStatus, native_enum=False, length=50),
        nullable=False,
        default=InterviewStatus.SCHEDULED,
    )
    feedback: Mapped[str | None] = mapped_column(Text)
    rating: Mapped[int | None] = mapped_column(Integer)  # 1-5
    recommendation: Mapped[InterviewRecommendation | None] = mapped_column(
        SQLEnum(InterviewRecommendation, native_enum=False, length=50)
    )
    notes: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_interview_scheduled_at", "scheduled_at"),)
