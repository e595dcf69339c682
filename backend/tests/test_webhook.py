import json

import httpx

APPLICATION_FORM = {
    "job_id": "job-1",
    "job_title": "Senior Frontend Developer",
    "job_description": "Build user interfaces",
    "job_department": "Engineering",
    "job_requirements": "React",
    "job_location": "Mumbai, Hybrid",
    "job_type": "full-time",
    "job_status": "active",
    "candidate_name": "Jane Doe",
    "email": "jane.doe@example.com",
    "whatsapp_number": "+91 90000 00000",
}


def test_test_proxy(client):
    response = client.get("/webhook/test-proxy")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["target"] == client.app.state.webhook_relay.application_url


def test_submit_application_requires_resume(client, upstream):
    response = client.post("/webhook/submit-application", data=APPLICATION_FORM)
    assert response.status_code == 400
    assert response.json()["detail"] == "Resume file is required"
    assert upstream.requests == []


def test_submit_application_forwards_multipart(client, upstream):
    response = client.post(
        "/webhook/submit-application",
        data=APPLICATION_FORM,
        files={"resume": ("jane_doe.pdf", b"%PDF-1.4 resume", "application/pdf")},
    )
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    assert len(upstream.requests) == 1
    forwarded = upstream.requests[0]
    assert str(forwarded.url) == client.app.state.webhook_relay.application_url
    assert forwarded.method == "POST"
    assert forwarded.headers["content-type"].startswith("multipart/form-data")
    assert b'name="candidate_name"' in forwarded.content
    assert b"Jane Doe" in forwarded.content
    assert b'filename="jane_doe.pdf"' in forwarded.content
    assert b"%PDF-1.4 resume" in forwarded.content


def test_submit_application_relays_upstream_status(client, upstream):
    upstream.response = httpx.Response(
        422,
        content=b"Workflow rejected the payload",
        headers={"content-type": "text/plain"},
    )
    response = client.post(
        "/webhook/submit-application",
        data=APPLICATION_FORM,
        files={"resume": ("cv.docx", b"resume bytes", "application/octet-stream")},
    )
    assert response.status_code == 422
    assert response.text == "Workflow rejected the payload"
    assert response.headers["content-type"].startswith("text/plain")


def test_submit_application_transport_failure_is_502(client, upstream):
    upstream.error = httpx.ConnectError("Connection refused")
    response = client.post(
        "/webhook/submit-application",
        data=APPLICATION_FORM,
        files={"resume": ("cv.pdf", b"resume bytes", "application/pdf")},
    )
    assert response.status_code == 502
    assert response.json()["detail"] == "Connection refused"


def test_candidate_action_relays_json(client, upstream):
    upstream.response = httpx.Response(202, json={"queued": True})
    payload = {
        "candidate_name": "Priya Sharma",
        "email": "priya.sharma@email.com",
        "phone": "+91 98765 43210",
        "action": "interview",
    }
    response = client.post("/webhook/candidate-action", json=payload)
    assert response.status_code == 202
    assert response.json() == {"queued": True}

    forwarded = upstream.requests[0]
    assert str(forwarded.url) == client.app.state.webhook_relay.candidate_action_url
    assert json.loads(forwarded.content) == payload


def test_candidate_action_rejects_unknown_action(client, upstream):
    response = client.post(
        "/webhook/candidate-action",
        json={"candidate_name": "X", "email": "x@example.com", "action": "promote"},
    )
    assert response.status_code == 400
    assert upstream.requests == []
