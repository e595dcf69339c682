from datetime import date
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, PartialModel, today
from app.services.pipeline import CandidateStatus, Recommendation


class CandidateCreate(CamelModel):
    """Schema for candidate creation."""

    job_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str
    resume_score: int = Field(ge=0, le=100)
    rationale: str
    recommendation: Recommendation
    status: CandidateStatus = CandidateStatus.PENDING
    applied_date: date = Field(default_factory=today)
    last_updated: date = Field(default_factory=today)


class CandidateUpdate(PartialModel):
    """Partial candidate update. lastUpdated is always restamped by the store."""

    job_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    resume_score: Optional[int] = Field(default=None, ge=0, le=100)
    rationale: Optional[str] = None
    recommendation: Optional[Recommendation] = None
    status: Optional[CandidateStatus] = None
    applied_date: Optional[date] = None


class Candidate(CandidateCreate):
    id: str
