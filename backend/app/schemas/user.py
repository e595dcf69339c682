from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Schema for onboarding a recruiter profile."""

    username: str = Field(min_length=1)
    password: str = ""  # empty for OAuth accounts
    company_name: str = Field(min_length=1)
    role: str = "HR Manager"
    email: EmailStr


class User(UserCreate):
    """Stored user; password holds the bcrypt hash (or "")."""

    id: str


class UserResponse(CamelModel):
    """Schema for user response (without password)."""

    id: str
    username: str
    company_name: str
    role: str
    email: str
