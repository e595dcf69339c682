import csv
import io
from datetime import date


def test_create_candidate_increments_job_count(client, new_job, candidate_payload):
    response = client.post("/api/candidates", json=candidate_payload(new_job["id"]))
    assert response.status_code == 201
    candidate = response.json()
    assert candidate["status"] == "pending"
    assert candidate["appliedDate"] == date.today().isoformat()

    job = client.get(f"/api/jobs/{new_job['id']}").json()
    assert job["applicantsCount"] == 1


def test_delete_candidate_decrements_job_count(client, new_job, candidate_payload):
    candidate = client.post("/api/candidates", json=candidate_payload(new_job["id"])).json()

    assert client.delete(f"/api/candidates/{candidate['id']}").status_code == 204
    assert client.get(f"/api/jobs/{new_job['id']}").json()["applicantsCount"] == 0
    assert client.get(f"/api/candidates/{candidate['id']}").status_code == 404


def test_delete_missing_candidate(client):
    assert client.delete("/api/candidates/nope").status_code == 404


def test_create_candidate_for_unknown_job(client, candidate_payload):
    response = client.post("/api/candidates", json=candidate_payload("nope"))
    assert response.status_code == 400
    assert response.json()["detail"] == "Unknown jobId 'nope'"


def test_create_candidate_score_out_of_range(client, candidate_payload):
    response = client.post("/api/candidates", json=candidate_payload("job-1", resumeScore=101))
    assert response.status_code == 400


def test_create_candidate_invalid_email(client, candidate_payload):
    response = client.post("/api/candidates", json=candidate_payload("job-1", email="not-an-email"))
    assert response.status_code == 400


def test_update_stamps_last_updated(client):
    assert client.get("/api/candidates/cand-1").json()["lastUpdated"] == "2024-12-14"

    response = client.patch("/api/candidates/cand-1", json={"phone": "+91 11111 11111"})
    assert response.status_code == 200
    candidate = response.json()
    assert candidate["phone"] == "+91 11111 11111"
    assert candidate["name"] == "Priya Sharma"
    assert candidate["lastUpdated"] == date.today().isoformat()


def test_update_missing_candidate_creates_nothing(client):
    response = client.patch("/api/candidates/nope", json={"name": "Ghost"})
    assert response.status_code == 404
    assert len(client.get("/api/candidates").json()) == 12


def test_update_allowed_status(client):
    response = client.patch("/api/candidates/cand-4", json={"status": "rejected"})
    assert response.status_code == 200
    assert response.json()["status"] == "rejected"


def test_update_illegal_status_is_conflict(client):
    response = client.patch("/api/candidates/cand-1", json={"status": "hired"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Cannot move candidate from 'pending' to 'hired'"
    assert client.get("/api/candidates/cand-1").json()["status"] == "pending"


def test_terminal_status_cannot_be_left(client):
    client.patch("/api/candidates/cand-9", json={"status": "rejected"})
    response = client.patch("/api/candidates/cand-9", json={"status": "pending"})
    assert response.status_code == 409


def test_unknown_status_is_validation_error(client):
    response = client.patch("/api/candidates/cand-1", json={"status": "archived"})
    assert response.status_code == 400


def test_moving_candidate_between_jobs_moves_counts(client):
    response = client.patch("/api/candidates/cand-2", json={"jobId": "job-2"})
    assert response.status_code == 200
    assert response.json()["jobId"] == "job-2"

    assert client.get("/api/jobs/job-1").json()["applicantsCount"] == 9
    assert client.get("/api/jobs/job-2").json()["applicantsCount"] == 2


def test_moving_candidate_to_unknown_job(client):
    response = client.patch("/api/candidates/cand-2", json={"jobId": "nope"})
    assert response.status_code == 400
    assert client.get("/api/candidates/cand-2").json()["jobId"] == "job-1"


def test_export_csv(client):
    response = client.get("/api/candidates/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "candidates.csv" in response.headers["content-disposition"]

    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0][:4] == ["Name", "Email", "Phone", "Position"]
    assert len(rows) == 13
    priya = next(row for row in rows if row[0] == "Priya Sharma")
    assert priya[3] == "Senior Frontend Developer"
    assert priya[4] == "92"
    assert priya[7] == "2024-12-10"


def test_import_managed_rows(client):
    rows = [
        {
            "id": "row-1",
            "job_id": "job-2",
            "name": "Rohan Mehta",
            "email": "rohan.mehta@example.com",
            "ai_score": 77,
            "ai_summary": "Good product sense",
            "ai_recommendation": "strong-maybe",
            "stage": "analyzed",
            "created_at": "2025-01-05T10:00:00Z",
        },
        {
            "id": "row-2",
            "job_id": "job-2",
            "name": "Unsure Person",
            "email": "unsure@example.com",
            "ai_recommendation": "maybe",
        },
        {
            "id": "row-3",
            "job_id": "nope",
            "name": "Lost Person",
            "email": "lost@example.com",
            "ai_recommendation": "reject",
        },
    ]
    response = client.post("/api/candidates/import", json=rows)
    assert response.status_code == 200
    body = response.json()
    assert body["requested"] == 3
    assert body["count"] == 1

    ok, unknown_recommendation, unknown_job = body["results"]
    assert ok["success"] is True
    assert unknown_recommendation["reason"] == "Unknown recommendation 'maybe'"
    assert unknown_job["reason"] == "Unknown jobId 'nope'"

    imported = client.get(f"/api/candidates/{ok['candidateId']}").json()
    assert imported["resumeScore"] == 77
    assert imported["rationale"] == "Good product sense"
    assert imported["recommendation"] == "interview"
    assert imported["status"] == "screened"
    assert imported["appliedDate"] == "2025-01-05"
    assert client.get("/api/jobs/job-2").json()["applicantsCount"] == 2
