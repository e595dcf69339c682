from app.schemas import CandidateUpdate


def test_schedule_interviews_mixed_ids(client, storage):
    response = client.post(
        "/api/interviews/schedule",
        json={
            "candidateIds": ["cand-1", "missing"],
            "date": "2024-12-20",
            "time": "10:00",
            "emailMessage": "Looking forward to meeting you",
            "whatsAppMessage": "See you soon",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Interviews scheduled successfully"
    assert body["requested"] == 2
    assert body["count"] == 1

    scheduled, missing = body["results"]
    assert scheduled["success"] is True
    assert scheduled["interview"]["channel"] == "email,whatsapp"
    assert scheduled["interview"]["type"] == "interview"
    assert missing == {
        "candidateId": "missing",
        "success": False,
        "reason": "Candidate not found",
        "interview": None,
        "email": None,
    }

    interviews = client.get("/api/interviews").json()
    assert len(interviews) == 1
    assert interviews[0]["candidateId"] == "cand-1"
    assert interviews[0]["jobId"] == "job-1"
    assert interviews[0]["status"] == "scheduled"

    assert storage.get_candidate("cand-1").status == "interview_scheduled"
    changed = [c for c in storage.list_candidates() if c.status != "pending"]
    assert len(changed) == 1


def test_schedule_interviews_requires_candidates(client):
    response = client.post(
        "/api/interviews/schedule",
        json={"candidateIds": [], "date": "2024-12-20", "time": "10:00"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "No candidates selected"
    assert client.get("/api/interviews").json() == []


def test_schedule_interview_for_hired_candidate_fails(client, storage):
    storage.update_candidate("cand-2", CandidateUpdate(status="hired"))
    body = client.post(
        "/api/interviews/schedule",
        json={"candidateIds": ["cand-2"], "date": "2024-12-20", "time": "10:00"},
    ).json()
    assert body["count"] == 0
    assert body["results"][0]["reason"] == "Cannot move candidate from 'hired' to 'interview_scheduled'"
    assert storage.list_interviews() == []


def test_schedule_prescreen(client, storage):
    response = client.post(
        "/api/prescreen/schedule",
        json={
            "candidateIds": ["cand-4", "cand-5"],
            "date": "2024-12-18",
            "time": "15:30",
            "message": "Quick call about your application",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Pre-screen calls scheduled successfully"
    assert body["count"] == 2

    for result in body["results"]:
        assert result["interview"]["type"] == "prescreen"
        assert result["interview"]["channel"] == "phone"
        assert result["interview"]["message"] == "Quick call about your application"
    assert storage.get_candidate("cand-4").status == "prescreen_scheduled"


def test_prescreen_then_interview(client, storage):
    payload = {"candidateIds": ["cand-6"], "date": "2024-12-18", "time": "09:00"}
    client.post("/api/prescreen/schedule", json=payload)
    body = client.post("/api/interviews/schedule", json=payload).json()
    assert body["count"] == 1
    assert storage.get_candidate("cand-6").status == "interview_scheduled"
    assert len(storage.list_interviews()) == 2


def test_create_and_update_interview(client):
    response = client.post(
        "/api/interviews",
        json={
            "candidateId": "cand-3",
            "jobId": "job-1",
            "type": "interview",
            "scheduledDate": "2024-12-21",
            "scheduledTime": "11:00",
            "channel": "email",
        },
    )
    assert response.status_code == 201
    interview = response.json()
    assert interview["status"] == "scheduled"

    response = client.patch(f"/api/interviews/{interview['id']}", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["scheduledTime"] == "11:00"

    assert client.get(f"/api/interviews/{interview['id']}").json()["status"] == "completed"


def test_create_interview_for_unknown_candidate(client):
    response = client.post(
        "/api/interviews",
        json={
            "candidateId": "nope",
            "jobId": "job-1",
            "type": "interview",
            "scheduledDate": "2024-12-21",
            "scheduledTime": "11:00",
            "channel": "email",
        },
    )
    assert response.status_code == 400


def test_interview_not_found(client):
    assert client.get("/api/interviews/nope").status_code == 404
    assert client.patch("/api/interviews/nope", json={"status": "cancelled"}).status_code == 404
