"""
SQL-backed storage over the SQLAlchemy models in app.models.

One session per operation; candidate writes adjust the job counter in the
same transaction.
"""

import logging
import uuid
from datetime import date
from typing import Callable, Optional

from sqlalchemy import case, select, update
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import DuplicateUsernameError
from app.core.security import get_password_hash
from app.db.base import Base
from app.db.fixtures import seed_records
from app.db.repository import Storage
from app.db.session import SessionLocal, session_scope
from app.models import (
    Candidate as CandidateRow,
    EmailTemplate as EmailTemplateRow,
    Interview as InterviewRow,
    Job as JobRow,
    User as UserRow,
)
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


class SqlStorage(Storage):
    def __init__(
        self,
        session_factory: sessionmaker[Session] = SessionLocal,
        clock: Callable[[], date] = date.today,
    ):
        self._session_factory = session_factory
        self._clock = clock

    def create_tables(self) -> None:
        # Importing app.models registers every table on Base.metadata
        bind = self._session_factory.kw["bind"]
        Base.metadata.create_all(bind=bind)
        logger.info(f"Ensured tables on {bind.url.render_as_string(hide_password=True)}")

    def seed(self) -> bool:
        """Load the demo fixtures into an empty database. Returns False if jobs already exist."""
        with self._scope() as session:
            if session.scalars(select(JobRow.id)).first() is not None:
                logger.info("Database already seeded. Skipping...")
                return False
            jobs, candidates, templates = seed_records()
            session.add_all(JobRow(**job.model_dump()) for job in jobs)
            session.add_all(CandidateRow(**candidate.model_dump()) for candidate in candidates)
            session.add_all(EmailTemplateRow(**template.model_dump()) for template in templates)
        logger.info(f"Seeded database: {len(jobs)} jobs, {len(candidates)} candidates, {len(templates)} templates")
        return True

    def _scope(self):
        return session_scope(self._session_factory)

    @staticmethod
    def _adjust_applicants(session: Session, job_id: str, delta: int) -> None:
        session.execute(
            update(JobRow)
            .where(JobRow.id == job_id)
            .values(
                applicants_count=case(
                    (JobRow.applicants_count + delta < 0, 0),
                    else_=JobRow.applicants_count + delta,
                )
            )
        )

    # ============== Users ==============

    def get_user(self, user_id: str) -> Optional[User]:
        with self._scope() as session:
            row = session.get(UserRow, user_id)
            return User.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._scope() as session:
            row = session.scalars(select(UserRow).where(UserRow.username == username)).first()
            return User.model_validate(row) if row else None

    def create_user(self, data: UserCreate) -> User:
        with self._scope() as session:
            exists = session.scalars(select(UserRow.id).where(UserRow.username == data.username)).first()
            if exists:
                raise DuplicateUsernameError(data.username)
            fields = data.model_dump()
            fields["password"] = get_password_hash(data.password)
            row = UserRow(id=str(uuid.uuid4()), **fields)
            session.add(row)
            session.flush()
            return User.model_validate(row)

    # ============== Jobs ==============

    def list_jobs(self) -> list[Job]:
        with self._scope() as session:
            return [Job.model_validate(row) for row in session.scalars(select(JobRow))]

    def get_job(self, job_id: str) -> Optional[Job]:
        with self._scope() as session:
            row = session.get(JobRow, job_id)
            return Job.model_validate(row) if row else None

    def create_job(self, data: JobCreate) -> Job:
        with self._scope() as session:
            row = JobRow(id=str(uuid.uuid4()), applicants_count=0, **data.model_dump())
            session.add(row)
            session.flush()
            return Job.model_validate(row)

    def update_job(self, job_id: str, data: JobUpdate) -> Optional[Job]:
        with self._scope() as session:
            row = session.get(JobRow, job_id)
            if row is None:
                return None
            for key, value in data.changes().items():
                setattr(row, key, value)
            session.flush()
            return Job.model_validate(row)

    def delete_job(self, job_id: str) -> bool:
        with self._scope() as session:
            row = session.get(JobRow, job_id)
            if row is None:
                return False
            session.delete(row)
            return True

    # ============== Candidates ==============

    def list_candidates(self) -> list[Candidate]:
        with self._scope() as session:
            return [Candidate.model_validate(row) for row in session.scalars(select(CandidateRow))]

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        with self._scope() as session:
            row = session.get(CandidateRow, candidate_id)
            return Candidate.model_validate(row) if row else None

    def list_candidates_by_job(self, job_id: str) -> list[Candidate]:
        with self._scope() as session:
            rows = session.scalars(select(CandidateRow).where(CandidateRow.job_id == job_id))
            return [Candidate.model_validate(row) for row in rows]

    def create_candidate(self, data: CandidateCreate) -> Candidate:
        with self._scope() as session:
            row = CandidateRow(id=str(uuid.uuid4()), **{**data.model_dump(), "last_updated": self._clock()})
            session.add(row)
            self._adjust_applicants(session, row.job_id, +1)
            session.flush()
            return Candidate.model_validate(row)

    def update_candidate(self, candidate_id: str, data: CandidateUpdate) -> Optional[Candidate]:
        with self._scope() as session:
            row = session.get(CandidateRow, candidate_id)
            if row is None:
                return None
            previous_job_id = row.job_id
            for key, value in data.changes().items():
                setattr(row, key, value)
            row.last_updated = self._clock()
            if row.job_id != previous_job_id:
                self._adjust_applicants(session, previous_job_id, -1)
                self._adjust_applicants(session, row.job_id, +1)
            session.flush()
            return Candidate.model_validate(row)

    def delete_candidate(self, candidate_id: str) -> bool:
        with self._scope() as session:
            row = session.get(CandidateRow, candidate_id)
            if row is None:
                return False
            self._adjust_applicants(session, row.job_id, -1)
            session.delete(row)
            return True

    # ============== Interviews ==============

    def list_interviews(self) -> list[Interview]:
        with self._scope() as session:
            return [Interview.model_validate(row) for row in session.scalars(select(InterviewRow))]

    def get_interview(self, interview_id: str) -> Optional[Interview]:
        with self._scope() as session:
            row = session.get(InterviewRow, interview_id)
            return Interview.model_validate(row) if row else None

    def create_interview(self, data: InterviewCreate) -> Interview:
        with self._scope() as session:
            row = InterviewRow(id=str(uuid.uuid4()), **data.model_dump())
            session.add(row)
            session.flush()
            return Interview.model_validate(row)

    def update_interview(self, interview_id: str, data: InterviewUpdate) -> Optional[Interview]:
        with self._scope() as session:
            row = session.get(InterviewRow, interview_id)
            if row is None:
                return None
            for key, value in data.changes().items():
                setattr(row, key, value)
            session.flush()
            return Interview.model_validate(row)

    # ============== Email templates ==============

    def list_email_templates(self) -> list[EmailTemplate]:
        with self._scope() as session:
            return [EmailTemplate.model_validate(row) for row in session.scalars(select(EmailTemplateRow))]

    def get_email_template(self, template_id: str) -> Optional[EmailTemplate]:
        with self._scope() as session:
            row = session.get(EmailTemplateRow, template_id)
            return EmailTemplate.model_validate(row) if row else None

    def create_email_template(self, data: EmailTemplateCreate) -> EmailTemplate:
        with self._scope() as session:
            row = EmailTemplateRow(id=str(uuid.uuid4()), **data.model_dump())
            session.add(row)
            session.flush()
            return EmailTemplate.model_validate(row)
