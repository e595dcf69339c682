"""
Candidate pipeline stages and the transitions recruiters may trigger.

The store accepts any known stage (seed data and imports write directly);
every status change requested through the API goes through
validate_transition() first.
"""

from enum import Enum

from app.core.errors import InvalidTransitionError


class CandidateStatus(str, Enum):
    PENDING = "pending"
    SCREENED = "screened"
    PRESCREEN_SCHEDULED = "prescreen_scheduled"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    EMAIL_SENT = "email_sent"
    HIRED = "hired"
    REJECTED = "rejected"


class Recommendation(str, Enum):
    INTERVIEW = "interview"
    ON_HOLD = "on-hold"
    REJECT = "reject"


TERMINAL_STATUSES = {CandidateStatus.HIRED, CandidateStatus.REJECTED}

ALLOWED_TRANSITIONS: dict[CandidateStatus, set[CandidateStatus]] = {
    CandidateStatus.PENDING: {
        CandidateStatus.SCREENED,
        CandidateStatus.INTERVIEW_SCHEDULED,
        CandidateStatus.PRESCREEN_SCHEDULED,
        CandidateStatus.EMAIL_SENT,
        CandidateStatus.REJECTED,
    },
    CandidateStatus.SCREENED: {
        CandidateStatus.INTERVIEW_SCHEDULED,
        CandidateStatus.PRESCREEN_SCHEDULED,
        CandidateStatus.EMAIL_SENT,
        CandidateStatus.REJECTED,
    },
    CandidateStatus.PRESCREEN_SCHEDULED: {
        CandidateStatus.INTERVIEW_SCHEDULED,
        CandidateStatus.EMAIL_SENT,
        CandidateStatus.HIRED,
        CandidateStatus.REJECTED,
    },
    CandidateStatus.INTERVIEW_SCHEDULED: {
        CandidateStatus.EMAIL_SENT,
        CandidateStatus.HIRED,
        CandidateStatus.REJECTED,
    },
    CandidateStatus.EMAIL_SENT: {
        CandidateStatus.INTERVIEW_SCHEDULED,
        CandidateStatus.PRESCREEN_SCHEDULED,
        CandidateStatus.HIRED,
        CandidateStatus.REJECTED,
    },
    CandidateStatus.HIRED: set(),
    CandidateStatus.REJECTED: set(),
}


def can_transition(current: str, target: str) -> bool:
    current_status = CandidateStatus(current)
    target_status = CandidateStatus(target)
    if current_status == target_status:
        return True
    return target_status in ALLOWED_TRANSITIONS[current_status]


def validate_transition(current: str, target: str) -> None:
    """Raise InvalidTransitionError unless current -> target is allowed."""
    if not can_transition(current, target):
        raise InvalidTransitionError(CandidateStatus(current).value, CandidateStatus(target).value)
