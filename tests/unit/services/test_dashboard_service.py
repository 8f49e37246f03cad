"""Dashboard counters."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import update

from api.services import applications as application_service
from api.services import candidates as candidate_service
from api.services import interviews as interview_service
from api.services import jobs as job_service
from api.services.dashboard import get_dashboard_stats
from database.models import Candidate, CandidateStatus, InterviewStatus, JobStatus

NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


async def _candidate(db_session, email, status):
    return await candidate_service.create_candidate(
        db_session, {"first_name": "C", "last_name": "D", "email": email, "status": status}
    )


async def test_empty_database(session_factory):
    stats = await get_dashboard_stats(session_factory, now=NOW)
    assert stats == {
        "open_positions": 0,
        "active_candidates": 0,
        "interviews_today": 0,
        "new_hires": 0,
    }


async def test_counts(session_factory, db_session):
    for status in (JobStatus.ACTIVE, JobStatus.ACTIVE, JobStatus.DRAFT, JobStatus.CLOSED):
        job = await job_service.create_job(db_session, {"title": "Role", "status": status})

    for i, status in enumerate(
        (
            CandidateStatus.NEW,
            CandidateStatus.REVIEWING,
            CandidateStatus.SHORTLISTED,
            CandidateStatus.INTERVIEWING,
            CandidateStatus.OFFERED,
            CandidateStatus.REJECTED,
        )
    ):
        candidate = await _candidate(db_session, f"c{i}@example.com", status)

    recent_hire = await _candidate(db_session, "recent@example.com", CandidateStatus.HIRED)
    old_hire = await _candidate(db_session, "old@example.com", CandidateStatus.HIRED)
    await db_session.execute(
        update(Candidate)
        .where(Candidate.id == recent_hire.id)
        .values(updated_at=NOW - timedelta(days=3))
    )
    await db_session.execute(
        update(Candidate)
        .where(Candidate.id == old_hire.id)
        .values(updated_at=NOW - timedelta(days=45))
    )
    await db_session.commit()

    application = await application_service.create_application(
        db_session, {"job_id": job.id, "candidate_id": candidate.id}
    )
    for scheduled, status in (
        (NOW.replace(hour=9), InterviewStatus.SCHEDULED),
        (NOW.replace(hour=16), InterviewStatus.COMPLETED),
        (NOW.replace(hour=10), InterviewStatus.CANCELLED),
        (NOW.replace(hour=11), InterviewStatus.RESCHEDULED),
        (NOW - timedelta(days=1), InterviewStatus.SCHEDULED),
        (NOW + timedelta(days=1), InterviewStatus.SCHEDULED),
    ):
        await interview_service.create_interview(
            db_session,
            {"application_id": application.id, "scheduled_at": scheduled, "status": status},
        )

    stats = await get_dashboard_stats(session_factory, now=NOW)

    assert stats == {
        "open_positions": 2,
        "active_candidates": 3,
        "interviews_today": 2,
        "new_hires": 1,
    }
