"""
API Services Layer.

Storage operations for API endpoints. Every function takes the request's
AsyncSession as its first argument; list functions take an explicit filter
model from api.schemas.
"""

from api.services.jobs import (
    list_jobs,
    get_job,
    create_job,
    update_job,
    delete_job,
)

from api.services.candidates import (
    list_candidates,
    get_candidate,
    get_candidate_by_email,
    create_candidate,
    update_candidate,
    delete_candidate,
)

from api.services.applications import (
    list_applications,
    get_application,
    create_application,
    update_application,
    delete_application,
)

from api.services.interviews import (
    list_interviews,
    get_interview,
    create_interview,
    update_interview,
    delete_interview,
)

from api.services.onboarding import (
    list_onboarding_tasks,
    get_onboarding_task,
    create_onboarding_task,
    update_onboarding_task,
    delete_onboarding_task,
)

from api.services.performance import (
    list_performance_reviews,
    get_performance_review,
    create_performance_review,
    update_performance_review,
    delete_performance_review,
)

from api.services.job_templates import (
    list_job_templates,
    get_job_template,
    create_job_template,
    update_job_template,
    delete_job_template,
)

from api.services.activity import (
    record_activity,
    list_activity_logs,
    get_activity_log,
)

from api.services.users import (
    get_user,
    get_user_by_email,
    create_user,
    list_users,
    update_user,
    create_session,
    delete_session,
)

from api.services.dashboard import get_dashboard_stats

__all__ = [
    # Jobs
    "list_jobs",
    "get_job",
    "create_job",
    "update_job",
    "delete_job",
    # Candidates
    "list_candidates",
    "get_candidate",
    "get_candidate_by_email",
    "create_candidate",
    "update_candidate",
    "delete_candidate",
    # Applications
    "list_applications",
    "get_application",
    "create_application",
    "update_application",
    "delete_application",
    # Interviews
    "list_interviews",
    "get_interview",
    "create_interview",
    "update_interview",
    "delete_interview",
    # Onboarding
    "list_onboarding_tasks",
    "get_onboarding_task",
    "create_onboarding_task",
    "update_onboarding_task",
    "delete_onboarding_task",
    # Performance
    "list_performance_reviews",
    "get_performance_review",
    "create_performance_review",
    "update_performance_review",
    "delete_performance_review",
    # Job templates
    "list_job_templates",
    "get_job_template",
    "create_job_template",
    "update_job_template",
    "delete_job_template",
    # Activity
    "record_activity",
    "list_activity_logs",
    "get_activity_log",
    # Users
    "get_user",
    "get_user_by_email",
    "create_user",
    "list_users",
    "update_user",
    "create_session",
    "delete_session",
    # Dashboard
    "get_dashboard_stats",
]
