from enum import Enum
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, PartialModel


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class JobStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    CLOSED = "closed"
    DRAFT = "draft"


class JobCreate(CamelModel):
    """Schema for job creation. applicantsCount is derived and never accepted."""

    title: str = Field(min_length=1)
    department: str = Field(min_length=1)
    description: str
    requirements: str
    location: str
    type: JobType
    status: JobStatus = JobStatus.ACTIVE


class JobUpdate(PartialModel):
    title: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    status: Optional[JobStatus] = None


class Job(JobCreate):
    id: str
    applicants_count: int = 0
