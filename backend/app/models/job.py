import uuid

from sqlalchemy import Column, Integer, String, Text

from app.db.base import Base


class Job(Base):
    """Job posting. applicants_count is maintained by the storage layer."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    department = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    location = Column(String, nullable=False)
    type = Column(String, nullable=False)  # "full-time", "part-time", "contract", "internship"
    status = Column(String, nullable=False, default="active")
    applicants_count = Column(Integer, nullable=False, default=0)
