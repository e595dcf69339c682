"""
Bulk e-mail endpoints and the rejection template catalogue.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_storage
from app.db.repository import Storage
from app.schemas import EmailTemplate, EmailTemplateCreate
from app.schemas.batch import BatchResponse, EmailSendRequest
from app.services.workflows import send_emails

logger = logging.getLogger("emails")

router = APIRouter()

TEMPLATE_NOT_FOUND = "Email template not found"


@router.post("/emails/send", response_model=BatchResponse)
async def send_bulk_emails(request: EmailSendRequest, storage: Storage = Depends(get_storage)):
    """
    Mark the selected candidates as emailed.

    The subject/body (or the referenced template) is rendered per candidate
    and returned; delivery itself is handled by the notification workflow.
    """
    if not request.candidate_ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No candidates selected")

    template: Optional[EmailTemplate] = None
    if request.template_id:
        template = storage.get_email_template(request.template_id)
        if not template:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEMPLATE_NOT_FOUND)

    if not template and not (request.subject and request.body):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide subject and body, or a templateId",
        )

    results = send_emails(
        storage,
        request.candidate_ids,
        subject=request.subject,
        body=request.body,
        template=template,
    )
    return BatchResponse(
        message="Emails sent successfully",
        requested=len(request.candidate_ids),
        count=sum(r.success for r in results),
        results=results,
    )


@router.get("/email-templates", response_model=list[EmailTemplate])
async def list_email_templates(storage: Storage = Depends(get_storage)):
    return storage.list_email_templates()


@router.get("/email-templates/{template_id}", response_model=EmailTemplate)
async def get_email_template(template_id: str, storage: Storage = Depends(get_storage)):
    template = storage.get_email_template(template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TEMPLATE_NOT_FOUND)
    return template


@router.post("/email-templates", response_model=EmailTemplate, status_code=status.HTTP_201_CREATED)
async def create_email_template(data: EmailTemplateCreate, storage: Storage = Depends(get_storage)):
    template = storage.create_email_template(data)
    logger.info(f"Created email template {template.id} ({template.name})")
    return template
