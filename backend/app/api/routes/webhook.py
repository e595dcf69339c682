"""
Webhook proxy endpoints.

The public application form posts here; the form is re-encoded and relayed
to the n8n application webhook and the upstream answer is passed back as-is.
"""

import logging
from typing import Literal, Optional

import httpx
from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status
from pydantic import BaseModel

from app.api.deps import get_webhook_relay
from app.services.webhook import WebhookRelay, WebhookUnavailableError

logger = logging.getLogger("webhook")

router = APIRouter()


class CandidateActionRequest(BaseModel):
    candidate_name: str
    email: str
    phone: str = ""
    action: Literal["interview", "reject", "hold"]


def _relay(upstream: httpx.Response) -> Response:
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )


@router.post("/submit-application")
async def submit_application(
    job_id: str = Form(""),
    job_title: str = Form(""),
    job_description: str = Form(""),
    job_department: str = Form(""),
    job_requirements: str = Form(""),
    job_location: str = Form(""),
    job_type: str = Form(""),
    job_status: str = Form(""),
    candidate_name: str = Form(""),
    email: str = Form(""),
    whatsapp_number: str = Form(""),
    resume: Optional[UploadFile] = File(default=None),
    relay: WebhookRelay = Depends(get_webhook_relay),
):
    """
    Forward a job application (form fields plus resume file) to n8n.

    The resume is mandatory; without it nothing is sent upstream.
    """
    if resume is None or not resume.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Resume file is required")

    content = await resume.read()
    fields = {
        "job_id": job_id,
        "job_title": job_title,
        "job_description": job_description,
        "job_department": job_department,
        "job_requirements": job_requirements,
        "job_location": job_location,
        "job_type": job_type,
        "job_status": job_status,
        "candidate_name": candidate_name,
        "email": email,
        "whatsapp_number": whatsapp_number,
    }

    try:
        upstream = await relay.submit_application(
            fields,
            resume_filename=resume.filename,
            resume_content=content,
            resume_content_type=resume.content_type,
        )
    except WebhookUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return _relay(upstream)


@router.get("/test-proxy")
async def test_proxy(relay: WebhookRelay = Depends(get_webhook_relay)):
    """Check that the proxy is mounted and show where it forwards to."""
    return {
        "status": "ok",
        "message": "Webhook proxy is running",
        "target": relay.application_url,
    }


@router.post("/candidate-action")
async def candidate_action(
    request: CandidateActionRequest,
    relay: WebhookRelay = Depends(get_webhook_relay),
):
    """Relay a recruiter quick action (interview / reject / hold) to n8n."""
    logger.info(f"Candidate action '{request.action}' for {request.email}")
    try:
        upstream = await relay.candidate_action(request.model_dump())
    except WebhookUnavailableError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return _relay(upstream)
