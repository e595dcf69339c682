"""
Batch workflows composed from several storage calls.

Each candidate id gets an explicit ItemResult; unknown ids and illegal
status moves are reported per item instead of being skipped silently.
"""

import logging
from typing import Optional

from app.core.errors import InvalidTransitionError
from app.db.repository import Storage
from app.schemas import (
    Candidate,
    CandidateUpdate,
    EmailTemplate,
    InterviewCreate,
    InterviewType,
)
from app.schemas.batch import ItemResult, RenderedEmail
from app.services.pipeline import CandidateStatus, validate_transition

logger = logging.getLogger("workflows")

CANDIDATE_NOT_FOUND = "Candidate not found"

INTERVIEW_CHANNEL = "email,whatsapp"
PRESCREEN_CHANNEL = "phone"


def _move_candidate(storage: Storage, candidate: Candidate, target: CandidateStatus) -> Optional[Candidate]:
    validate_transition(candidate.status, target)
    return storage.update_candidate(candidate.id, CandidateUpdate(status=target))


def screen_job(storage: Storage, job_id: str) -> list[ItemResult]:
    """
    Mark every candidate of a job as screened.

    Placeholder for the external scoring workflow: no score or rationale is
    computed here, only the pipeline stage changes.
    """
    results: list[ItemResult] = []
    for candidate in storage.list_candidates_by_job(job_id):
        try:
            _move_candidate(storage, candidate, CandidateStatus.SCREENED)
        except InvalidTransitionError as e:
            results.append(ItemResult(candidate_id=candidate.id, success=False, reason=str(e)))
            continue
        results.append(ItemResult(candidate_id=candidate.id, success=True))

    logger.info(f"Screened job {job_id}: {sum(r.success for r in results)}/{len(results)} candidates")
    return results


def schedule_meetings(
    storage: Storage,
    candidate_ids: list[str],
    *,
    kind: InterviewType,
    scheduled_date: str,
    scheduled_time: str,
    message: str,
) -> list[ItemResult]:
    """Create an interview (or pre-screen call) per candidate and advance its stage."""
    kind = InterviewType(kind)
    if kind == InterviewType.PRESCREEN:
        channel, target = PRESCREEN_CHANNEL, CandidateStatus.PRESCREEN_SCHEDULED
    else:
        channel, target = INTERVIEW_CHANNEL, CandidateStatus.INTERVIEW_SCHEDULED

    results: list[ItemResult] = []
    for candidate_id in candidate_ids:
        candidate = storage.get_candidate(candidate_id)
        if candidate is None:
            results.append(ItemResult(candidate_id=candidate_id, success=False, reason=CANDIDATE_NOT_FOUND))
            continue

        try:
            validate_transition(candidate.status, target)
        except InvalidTransitionError as e:
            results.append(ItemResult(candidate_id=candidate_id, success=False, reason=str(e)))
            continue

        interview = storage.create_interview(
            InterviewCreate(
                candidate_id=candidate_id,
                job_id=candidate.job_id,
                type=kind,
                scheduled_date=scheduled_date,
                scheduled_time=scheduled_time,
                message=message,
                channel=channel,
            )
        )
        storage.update_candidate(candidate_id, CandidateUpdate(status=target))
        results.append(ItemResult(candidate_id=candidate_id, success=True, interview=interview))

    failed = [r.candidate_id for r in results if not r.success]
    if failed:
        logger.warning(f"Skipped {len(failed)} candidate(s) while scheduling {kind.value}: {failed}")
    return results


def render_email(text: str, candidate: Candidate, position: str) -> str:
    """Fill the {name} and {position} placeholders used by the rejection templates."""
    return text.replace("{name}", candidate.name).replace("{position}", position)


def send_emails(
    storage: Storage,
    candidate_ids: list[str],
    *,
    subject: str,
    body: str,
    template: Optional[EmailTemplate] = None,
) -> list[ItemResult]:
    """
    Mark each candidate as emailed and return the rendered message.

    Nothing is delivered from here; delivery belongs to the external
    notification workflow.
    """
    if template is not None:
        subject = subject or template.subject
        body = body or template.body

    results: list[ItemResult] = []
    for candidate_id in candidate_ids:
        candidate = storage.get_candidate(candidate_id)
        if candidate is None:
            results.append(ItemResult(candidate_id=candidate_id, success=False, reason=CANDIDATE_NOT_FOUND))
            continue

        try:
            _move_candidate(storage, candidate, CandidateStatus.EMAIL_SENT)
        except InvalidTransitionError as e:
            results.append(ItemResult(candidate_id=candidate_id, success=False, reason=str(e)))
            continue

        job = storage.get_job(candidate.job_id)
        position = job.title if job else "open"
        email = RenderedEmail(
            to=candidate.email,
            subject=render_email(subject, candidate, position),
            body=render_email(body, candidate, position),
        )
        results.append(ItemResult(candidate_id=candidate_id, success=True, email=email))

    logger.info(f"Marked {sum(r.success for r in results)}/{len(results)} candidate(s) as emailed")
    return results
