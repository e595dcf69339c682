from app.schemas.job import Job, JobCreate, JobUpdate, JobStatus, JobType
from app.schemas.candidate import Candidate, CandidateCreate, CandidateUpdate
from app.schemas.interview import (
    Interview,
    InterviewCreate,
    InterviewUpdate,
    InterviewStatus,
    InterviewType,
)
from app.schemas.email_template import EmailTemplate, EmailTemplateCreate
from app.schemas.user import User, UserCreate, UserResponse

__all__ = [
    "Job",
    "JobCreate",
    "JobUpdate",
    "JobStatus",
    "JobType",
    "Candidate",
    "CandidateCreate",
    "CandidateUpdate",
    "Interview",
    "InterviewCreate",
    "InterviewUpdate",
    "InterviewStatus",
    "InterviewType",
    "EmailTemplate",
    "EmailTemplateCreate",
    "User",
    "UserCreate",
    "UserResponse",
]
