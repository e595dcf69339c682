import uuid

from sqlalchemy import Column, String

from app.db.base import Base


class User(Base):
    """Recruiter profile created during onboarding."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False, default="")  # empty for OAuth accounts
    company_name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    email = Column(String, nullable=False)
