import uuid

from sqlalchemy import Column, String, Text

from app.db.base import Base


class Interview(Base):
    """Scheduled interview or pre-screen call."""

    __tablename__ = "interviews"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(String, index=True, nullable=False)
    job_id = Column(String, index=True, nullable=False)
    type = Column(String, nullable=False)  # "interview" | "prescreen"
    scheduled_date = Column(String, nullable=False)
    scheduled_time = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    channel = Column(String, nullable=False)  # comma-joined, e.g. "email,whatsapp"
    status = Column(String, nullable=False, default="scheduled")
