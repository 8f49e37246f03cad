from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    ForeignKey,
    Integer,
    DateTime,
    func,
    Text,
    JSON,
    Enum as SQLEnum,
    Index,
)
from database.engine import Base
from datetime import datetime
from enum import Enum as PyEnum
from typing import Any


# ==================== Candidate Enums ===================== #
class CandidateStatus(str, PyEnum):
    NEW = "new"
    REVIEWING = "reviewing"
    SHORTLISTED = "shortlisted"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    HIRED = "hired"
    REJECTED = "rejected"


# Statuses counted as "active" in the pipeline
ACTIVE_CANDIDATE_STATUSES = (
    CandidateStatus.REVIEWING,
    CandidateStatus.SHORTLISTED,
    CandidateStatus.INTERVIEWING,
)


class CandidateSource(str, PyEnum):
    DIRECT = "direct"
    LINKEDIN = "linkedin"
    REFERRAL = "referral"
    JOB_BOARD = "job_board"
    CAREER_PAGE = "career_page"


class ApplicationStatus(str, PyEnum):
    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    HIRED = "hired"
    REJECTED = "rejected"


# ==================== Models ===================== #
class Candidate(Base):
    """
    A person in the hiring pipeline.

    skills is an ordered list of strings; education is a list of
    {degree, field, institution, year} objects, validated at the API boundary.
    """

    __tablename__: str = "candidates"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    location: Mapped[str | None] = mapped_column(String(255))
    experience: Mapped[int | None] = mapped_column("experience_years", Integer)
    current_position: Mapped[str | None] = mapped_column(String(255))
    current_company: Mapped[str | None] = mapped_column(String(255))
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    education: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    resume_url: Mapped[str | None] = mapped_column(String(500))
    linkedin_url: Mapped[str | None] = mapped_column(String(500))
    github_url: Mapped[str | None] = mapped_column(String(500))
    portfolio_url: Mapped[str | None] = mapped_column(String(500))
    status: Mapped[CandidateStatus] = mapped_column(
        SQLEnum(CandidateStatus, native_enum=False, length=50),
        nullable=False,
        default=CandidateStatus.NEW,
    )
    source: Mapped[CandidateSource] = mapped_column(
        SQLEnum(CandidateSource, native_enum=False, length=50),
        nullable=False,
        default=CandidateSource.DIRECT,
    )
    notes: Mapped[str | None] = mapped_column(Text)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        Index("idx_candidate_status", "status"),
        Index("idx_candidate_created_at", "created_at"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Application(Base):
    """
    A candidate applying to a job. The (job, candidate) pair is intentionally
    not unique.
    """

    __tablename__: str = "applications"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    candidate_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[ApplicationStatus] = mapped_column(
        SQLEnum(ApplicationStatus, native_enum=False, length=50),
        nullable=False,
        default=ApplicationStatus.APPLIED,
    )
    ai_match_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cover_letter: Mapped[str | None] = mapped_column(Text)
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
