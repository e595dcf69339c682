"""
In-memory storage: five id-keyed dicts, lost on restart.

Single-process and unlocked; each call runs to completion before the next
request observes the store.
"""

import logging
import uuid
from datetime import date
from typing import Callable, Optional

from app.core.errors import DuplicateUsernameError
from app.core.security import get_password_hash
from app.db.fixtures import seed_records
from app.db.repository import Storage
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

logger = logging.getLogger("storage")


def _new_id() -> str:
    return str(uuid.uuid4())


class MemoryStorage(Storage):
    def __init__(self, seed: bool = True, clock: Callable[[], date] = date.today):
        self._clock = clock
        self.users: dict[str, User] = {}
        self.jobs: dict[str, Job] = {}
        self.candidates: dict[str, Candidate] = {}
        self.interviews: dict[str, Interview] = {}
        self.email_templates: dict[str, EmailTemplate] = {}

        if seed:
            self._seed()

    def _seed(self) -> None:
        jobs, candidates, templates = seed_records()
        self.jobs.update((job.id, job) for job in jobs)
        self.candidates.update((candidate.id, candidate) for candidate in candidates)
        self.email_templates.update((template.id, template) for template in templates)
        logger.info(f"Seeded memory storage: {len(jobs)} jobs, {len(candidates)} candidates, {len(templates)} templates")

    def _adjust_applicants(self, job_id: str, delta: int) -> None:
        job = self.jobs.get(job_id)
        if job is None:
            return
        count = max(0, job.applicants_count + delta)
        self.jobs[job_id] = job.model_copy(update={"applicants_count": count})

    # ============== Users ==============

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.username == username), None)

    def create_user(self, data: UserCreate) -> User:
        if self.get_user_by_username(data.username) is not None:
            raise DuplicateUsernameError(data.username)
        fields = data.model_dump()
        fields["password"] = get_password_hash(data.password)
        user = User(id=_new_id(), **fields)
        self.users[user.id] = user
        return user

    # ============== Jobs ==============

    def list_jobs(self) -> list[Job]:
        return list(self.jobs.values())

    def get_job(self, job_id: str) -> Optional[Job]:
        return self.jobs.get(job_id)

    def create_job(self, data: JobCreate) -> Job:
        job = Job(id=_new_id(), applicants_count=0, **data.model_dump())
        self.jobs[job.id] = job
        return job

    def update_job(self, job_id: str, data: JobUpdate) -> Optional[Job]:
        job = self.jobs.get(job_id)
        if job is None:
            return None
        updated = job.model_copy(update=data.changes())
        self.jobs[job_id] = updated
        return updated

    def delete_job(self, job_id: str) -> bool:
        return self.jobs.pop(job_id, None) is not None

    # ============== Candidates ==============

    def list_candidates(self) -> list[Candidate]:
        return list(self.candidates.values())

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        return self.candidates.get(candidate_id)

    def list_candidates_by_job(self, job_id: str) -> list[Candidate]:
        return [c for c in self.candidates.values() if c.job_id == job_id]

    def create_candidate(self, data: CandidateCreate) -> Candidate:
        candidate = Candidate(id=_new_id(), **{**data.model_dump(), "last_updated": self._clock()})
        self.candidates[candidate.id] = candidate
        self._adjust_applicants(candidate.job_id, +1)
        return candidate

    def update_candidate(self, candidate_id: str, data: CandidateUpdate) -> Optional[Candidate]:
        candidate = self.candidates.get(candidate_id)
        if candidate is None:
            return None
        changes = data.changes()
        changes["last_updated"] = self._clock()
        updated = candidate.model_copy(update=changes)
        self.candidates[candidate_id] = updated

        if updated.job_id != candidate.job_id:
            self._adjust_applicants(candidate.job_id, -1)
            self._adjust_applicants(updated.job_id, +1)
        return updated

    def delete_candidate(self, candidate_id: str) -> bool:
        candidate = self.candidates.pop(candidate_id, None)
        if candidate is None:
            return False
        self._adjust_applicants(candidate.job_id, -1)
        return True

    # ============== Interviews ==============

    def list_interviews(self) -> list[Interview]:
        return list(self.interviews.values())

    def get_interview(self, interview_id: str) -> Optional[Interview]:
        return self.interviews.get(interview_id)

    def create_interview(self, data: InterviewCreate) -> Interview:
        interview = Interview(id=_new_id(), **data.model_dump())
        self.interviews[interview.id] = interview
        return interview

    def update_interview(self, interview_id: str, data: InterviewUpdate) -> Optional[Interview]:
        interview = self.interviews.get(interview_id)
        if interview is None:
            return None
        updated = interview.model_copy(update=data.changes())
        self.interviews[interview_id] = updated
        return updated

    # ============== Email templates ==============

    def list_email_templates(self) -> list[EmailTemplate]:
        return list(self.email_templates.values())

    def get_email_template(self, template_id: str) -> Optional[EmailTemplate]:
        return self.email_templates.get(template_id)

    def create_email_template(self, data: EmailTemplateCreate) -> EmailTemplate:
        template = EmailTemplate(id=_new_id(), **data.model_dump())
        self.email_templates[template.id] = template
        return template
