from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.db.memory import MemoryStorage
from app.main import create_app
from app.services.webhook import WebhookRelay

APPLICATION_URL = "https://n8n.example.com/webhook/submit-application"
CANDIDATE_ACTION_URL = "https://n8n.example.com/webhook/candidate_action"


class FakeUpstream:
    """Records webhook requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"ok": True})
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def storage():
    return MemoryStorage(seed=True)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(storage, upstream):
    relay = WebhookRelay(
        application_url=APPLICATION_URL,
        candidate_action_url=CANDIDATE_ACTION_URL,
        timeout=5,
        transport=httpx.MockTransport(upstream),
    )
    app = create_app(storage=storage, webhook_relay=relay)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_job(client):
    response = client.post(
        "/api/jobs",
        json={
            "title": "Backend Engineer",
            "department": "Engineering",
            "description": "Build APIs",
            "requirements": "Python",
            "location": "Remote",
            "type": "full-time",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def candidate_payload():
    """Build a valid candidate create body for the given job."""

    def build(job_id: str, **overrides) -> dict:
        payload = {
            "jobId": job_id,
            "name": "Jane Doe",
            "email": "jane.doe@example.com",
            "phone": "+1 555 0100",
            "resumeScore": 80,
            "rationale": "Solid Python background",
            "recommendation": "interview",
        }
        payload.update(overrides)
        return payload

    return build
