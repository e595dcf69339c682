"""
Mapping between the managed backend's candidate rows and the canonical schema.

The hosted database stores applicants as
    {id, created_at, job_id, ai_score, phone, resume_text, ai_key_strengths,
     stage, ai_red_flags, ai_recommendation, ai_summary, name, email}
while the API speaks Candidate. Nothing outside this module should touch
the row shape.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas import CandidateCreate
from app.services.pipeline import CandidateStatus, Recommendation

RECOMMENDATION_ALIASES = {
    "interview": Recommendation.INTERVIEW,
    "hire": Recommendation.INTERVIEW,
    "strong-maybe": Recommendation.INTERVIEW,
    "hold": Recommendation.ON_HOLD,
    "on-hold": Recommendation.ON_HOLD,
    "weak-maybe": Recommendation.ON_HOLD,
    "reject": Recommendation.REJECT,
    "rejected": Recommendation.REJECT,
}

STAGE_ALIASES = {
    "": CandidateStatus.PENDING,
    "new": CandidateStatus.PENDING,
    "pending": CandidateStatus.PENDING,
    "analyzed": CandidateStatus.SCREENED,
    "screened": CandidateStatus.SCREENED,
    "prescreen_scheduled": CandidateStatus.PRESCREEN_SCHEDULED,
    "interview_scheduled": CandidateStatus.INTERVIEW_SCHEDULED,
    "email_sent": CandidateStatus.EMAIL_SENT,
    "hired": CandidateStatus.HIRED,
    "rejected": CandidateStatus.REJECTED,
}


class ManagedCandidateRow(BaseModel):
    """Candidate row as stored by the managed backend."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    job_id: str
    name: str
    email: str
    phone: str = ""
    ai_score: Optional[int] = None
    ai_summary: Optional[str] = None
    ai_recommendation: Optional[str] = None
    ai_key_strengths: list[str] = []
    ai_red_flags: list[str] = []
    resume_text: Optional[str] = None
    stage: Optional[str] = None


class MappingError(ValueError):
    """Raised when a managed row cannot be expressed in the canonical schema."""


def _recommendation(value: Optional[str]) -> Recommendation:
    key = (value or "").strip().lower()
    if key not in RECOMMENDATION_ALIASES:
        raise MappingError(f"Unknown recommendation '{value}'")
    return RECOMMENDATION_ALIASES[key]


def _stage(value: Optional[str]) -> CandidateStatus:
    key = (value or "").strip().lower()
    if key not in STAGE_ALIASES:
        raise MappingError(f"Unknown stage '{value}'")
    return STAGE_ALIASES[key]


def from_managed_row(row: ManagedCandidateRow) -> CandidateCreate:
    """Translate a managed-backend row into a canonical create payload."""
    applied = row.created_at.date() if row.created_at else date.today()
    return CandidateCreate(
        job_id=row.job_id,
        name=row.name,
        email=row.email,
        phone=row.phone,
        resume_score=max(0, min(100, row.ai_score or 0)),
        rationale=row.ai_summary or "",
        recommendation=_recommendation(row.ai_recommendation),
        status=_stage(row.stage),
        applied_date=applied,
        last_updated=applied,
    )

