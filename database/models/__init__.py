"""
Database models. Importing this package registers every table on Base.metadata.
"""

from database.models.users import User, UserRole, UserSession
from database.models.jobs import (
    Job,
    JobTemplate,
    JobStatus,
    EmploymentType,
    WorkLocation,
    ExperienceLevel,
)
from database.models.candidates import (
    Candidate,
    CandidateStatus,
    CandidateSource,
    Application,
    ApplicationStatus,
    ACTIVE_CANDIDATE_STATUSES,
)
from database.models.interviews import (
    Interview,
    InterviewType,
    InterviewStatus,
    InterviewRecommendation,
    INACTIVE_INTERVIEW_STATUSES,
)
from database.models.onboarding import (
    OnboardingTask,
    TaskCategory,
    TaskStatus,
    TaskPriority,
)
from database.models.performance import PerformanceReview, ReviewType, ReviewStatus
from database.models.activity import ActivityLog

__all__ = [
    "User",
    "UserRole",
    "UserSession",
    "Job",
    "JobTemplate",
    "JobStatus",
    "EmploymentType",
    "WorkLocation",
    "ExperienceLevel",
    "Candidate",
    "CandidateStatus",
    "CandidateSource",
    "Application",
    "ApplicationStatus",
    "ACTIVE_CANDIDATE_STATUSES",
    "Interview",
    "InterviewType",
    "InterviewStatus",
    "InterviewRecommendation",
    "INACTIVE_INTERVIEW_STATUSES",
    "OnboardingTask",
    "TaskCategory",
    "TaskStatus",
    "TaskPriority",
    "PerformanceReview",
    "ReviewType",
    "ReviewStatus",
    "ActivityLog",
]
