from app.models.user import User
from app.models.job import Job
from app.models.candidate import Candidate
from app.models.interview import Interview
from app.models.email_template import EmailTemplate

__all__ = ["User", "Job", "Candidate", "Interview", "EmailTemplate"]
