import uuid

from sqlalchemy import Column, Date, Integer, String, Text

from app.db.base import Base


class Candidate(Base):
    """Applicant for a job with the screening outcome attached."""

    __tablename__ = "candidates"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # Not a ForeignKey: jobs can be deleted without cascading
    job_id = Column(String, index=True, nullable=False)

    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)

    # Screening outcome
    resume_score = Column(Integer, nullable=False)  # 0-100
    rationale = Column(Text, nullable=False)
    recommendation = Column(String, nullable=False)  # "interview", "on-hold", "reject"

    # Pipeline
    status = Column(String, nullable=False, default="pending")
    applied_date = Column(Date, nullable=False)
    last_updated = Column(Date, nullable=False)
