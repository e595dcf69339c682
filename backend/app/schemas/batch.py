from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.interview import Interview


class CandidateBatchRequest(CamelModel):
    candidate_ids: list[str] = Field(default_factory=list)


class InterviewScheduleRequest(CandidateBatchRequest):
    date: str
    time: str
    email_message: str = ""
    whats_app_message: str = ""


class PrescreenScheduleRequest(CandidateBatchRequest):
    date: str
    time: str
    message: str = ""


class EmailSendRequest(CandidateBatchRequest):
    subject: str = ""
    body: str = ""
    template_id: Optional[str] = None


class RenderedEmail(CamelModel):
    to: str
    subject: str
    body: str


class ItemResult(CamelModel):
    """Outcome for one candidate id in a batch operation."""

    candidate_id: str
    success: bool
    reason: Optional[str] = None
    interview: Optional[Interview] = None
    email: Optional[RenderedEmail] = None


class BatchResponse(CamelModel):
    message: str
    requested: int
    count: int
    results: list[ItemResult]


class ScreenResponse(CamelModel):
    message: str = "Screening complete"
    candidates_processed: int
    results: list[ItemResult]
