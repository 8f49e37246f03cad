"""
End-to-end hiring flow through the public API.

Signup → login → post a job → add a candidate → apply → interview →
hire → onboard, checking the dashboard and activity trail along the way.
"""

from datetime import datetime, timezone

from tests.helpers import candidate_payload, job_payload, login, signup


def test_candidate_hired_end_to_end(client):
    assert signup(client).status_code == 201
    assert login(client).status_code == 200
    me = client.get("/api/auth/user").json()

    job = client.post("/api/jobs", json=job_payload(status="draft")).json()
    client.put(f"/api/jobs/{job['id']}", json={"status": "active"})

    candidate = client.post(
        "/api/candidates", json=candidate_payload(status="reviewing")
    ).json()
    application = client.post(
        "/api/applications",
        json={"candidateId": candidate["id"], "jobId": job["id"]},
    ).json()
    assert application["status"] == "applied"

    stats = client.get("/api/dashboard/stats").json()
    assert stats == {
        "openPositions": 1,
        "activeCandidates": 1,
        "interviewsToday": 0,
        "newHires": 0,
    }

    now = datetime.now(timezone.utc).replace(microsecond=0)
    interview = client.post(
        "/api/interviews",
        json={
            "applicationId": application["id"],
            "interviewerId": me["id"],
            "scheduledAt": now.isoformat(),
            "type": "technical",
        },
    ).json()
    client.put(f"/api/candidates/{candidate['id']}", json={"status": "interviewing"})
    assert client.get("/api/dashboard/stats").json()["interviewsToday"] == 1

    client.put(
        f"/api/interviews/{interview['id']}",
        json={
            "status": "completed",
            "rating": 5,
            "recommendation": "strong_hire",
            "feedback": "Excellent systems knowledge",
        },
    )
    summary = client.post(
        "/api/ai/summarize-interview", json={"interviewId": interview["id"]}
    )
    assert summary.status_code == 200
    assert summary.headers["X-AI-Fallback"] == "true"

    client.put(f"/api/applications/{application['id']}", json={"status": "hired"})
    client.put(f"/api/candidates/{candidate['id']}", json={"status": "hired"})

    stats = client.get("/api/dashboard/stats").json()
    assert stats["activeCandidates"] == 0
    assert stats["newHires"] == 1
    assert stats["interviewsToday"] == 1

    task = client.post(
        "/api/onboarding/tasks",
        json={"employeeId": me["id"], "title": "Prepare workstation", "category": "it"},
    )
    assert task.status_code == 201

    actions = [e["action"] for e in client.get("/api/activity-logs").json()]
    assert actions[0] == "create_onboarding_task"
    for expected in (
        "create_user",
        "create_job",
        "update_job",
        "create_candidate",
        "create_application",
        "schedule_interview",
        "update_interview",
        "update_application",
        "update_candidate",
    ):
        assert expected in actions

    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/dashboard/stats").status_code == 401
