"""
Storage interface shared by the in-memory and SQL backends.

Every getter returns None for an unknown id, every delete returns False for
an unknown id, and update never creates a record. Implementations keep
Job.applicants_count equal to the number of stored candidates referencing
the job.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.schemas import (
    Candidate,
    CandidateCreate,
    CandidateUpdate,
    EmailTemplate,
    EmailTemplateCreate,
    Interview,
    InterviewCreate,
    InterviewUpdate,
    Job,
    JobCreate,
    JobUpdate,
    User,
    UserCreate,
)


class Storage(ABC):
    # Users

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Create a user; raises DuplicateUsernameError if the username is taken."""

    # Jobs

    @abstractmethod
    def list_jobs(self) -> list[Job]: ...

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]: ...

    @abstractmethod
    def create_job(self, data: JobCreate) -> Job: ...

    @abstractmethod
    def update_job(self, job_id: str, data: JobUpdate) -> Optional[Job]: ...

    @abstractmethod
    def delete_job(self, job_id: str) -> bool: ...

    # Candidates

    @abstractmethod
    def list_candidates(self) -> list[Candidate]: ...

    @abstractmethod
    def get_candidate(self, candidate_id: str) -> Optional[Candidate]: ...

    @abstractmethod
    def list_candidates_by_job(self, job_id: str) -> list[Candidate]: ...

    @abstractmethod
    def create_candidate(self, data: CandidateCreate) -> Candidate: ...

    @abstractmethod
    def update_candidate(self, candidate_id: str, data: CandidateUpdate) -> Optional[Candidate]:
        """Merge data into the candidate and stamp last_updated with today's date."""

    @abstractmethod
    def delete_candidate(self, candidate_id: str) -> bool: ...

    # Interviews

    @abstractmethod
    def list_interviews(self) -> list[Interview]: ...

    @abstractmethod
    def get_interview(self, interview_id: str) -> Optional[Interview]: ...

    @abstractmethod
    def create_interview(self, data: InterviewCreate) -> Interview: ...

    @abstractmethod
    def update_interview(self, interview_id: str, data: InterviewUpdate) -> Optional[Interview]: ...

    # Email templates

    @abstractmethod
    def list_email_templates(self) -> list[EmailTemplate]: ...

    @abstractmethod
    def get_email_template(self, template_id: str) -> Optional[EmailTemplate]: ...

    @abstractmethod
    def create_email_template(self, data: EmailTemplateCreate) -> EmailTemplate: ...
