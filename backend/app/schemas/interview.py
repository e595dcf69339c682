from enum import Enum
from typing import Optional

from app.schemas.common import CamelModel, PartialModel


class InterviewType(str, Enum):
    INTERVIEW = "interview"
    PRESCREEN = "prescreen"


class InterviewStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class InterviewCreate(CamelModel):
    candidate_id: str
    job_id: str
    type: InterviewType
    scheduled_date: str
    scheduled_time: str
    message: str = ""
    channel: str  # comma-joined, e.g. "email,whatsapp"
    status: InterviewStatus = InterviewStatus.SCHEDULED


class InterviewUpdate(PartialModel):
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    message: Optional[str] = None
    channel: Optional[str] = None
    status: Optional[InterviewStatus] = None


class Interview(InterviewCreate):
    id: str
