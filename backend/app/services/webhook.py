"""
Relay to the n8n automation webhooks.

The browser cannot post to n8n directly (CORS), so the public application
form and the recruiter quick actions go through this service. Responses are
returned untouched; only transport failures are turned into an error.
"""

import logging
from typing import Any, Optional

import httpx

from app.core.config import settings
from app.core.errors import RecruitFlowError

logger = logging.getLogger("webhook")

APPLICATION_FIELDS = [
    "job_id",
    "job_title",
    "job_description",
    "job_department",
    "job_requirements",
    "job_location",
    "job_type",
    "job_status",
    "candidate_name",
    "email",
    "whatsapp_number",
]


class WebhookUnavailableError(RecruitFlowError):
    """The upstream webhook could not be reached or did not answer in time."""


class WebhookRelay:
    def __init__(
        self,
        application_url: str,
        candidate_action_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.application_url = application_url
        self.candidate_action_url = candidate_action_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "WebhookRelay":
        return cls(
            application_url=settings.APPLICATION_WEBHOOK_URL,
            candidate_action_url=settings.CANDIDATE_ACTION_WEBHOOK_URL,
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
        )

    async def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Webhook request to {url} failed: {e!r}")
            raise WebhookUnavailableError(str(e) or e.__class__.__name__) from e

        logger.info(f"Webhook {url} answered {response.status_code}")
        return response

    async def submit_application(
        self,
        fields: dict[str, str],
        resume_filename: str,
        resume_content: bytes,
        resume_content_type: Optional[str] = None,
    ) -> httpx.Response:
        """Re-encode the application form as multipart and forward it."""
        data = {name: fields.get(name, "") for name in APPLICATION_FIELDS}
        files = {
            "resume": (
                resume_filename,
                resume_content,
                resume_content_type or "application/octet-stream",
            )
        }
        logger.info(
            f"Forwarding application from {data['candidate_name']!r} for job {data['job_id']!r} "
            f"({len(resume_content)} byte resume)"
        )
        return await self._post(self.application_url, data=data, files=files)

    async def candidate_action(self, payload: dict[str, Any]) -> httpx.Response:
        """Forward a recruiter decision (interview / reject / hold) as JSON."""
        return await self._post(self.candidate_action_url, json=payload)
