import pytest

from app.core.errors import InvalidTransitionError
from app.services.pipeline import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    CandidateStatus,
    can_transition,
    validate_transition,
)


def test_every_status_has_a_transition_entry():
    assert set(ALLOWED_TRANSITIONS) == set(CandidateStatus)


@pytest.mark.parametrize("status", list(CandidateStatus))
def test_same_state_is_always_allowed(status):
    assert can_transition(status, status)


@pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES))
def test_terminal_statuses_have_no_exit(terminal):
    for target in CandidateStatus:
        if target != terminal:
            assert not can_transition(terminal, target)


@pytest.mark.parametrize(
    "current, target, allowed",
    [
        ("pending", "screened", True),
        ("pending", "rejected", True),
        ("pending", "hired", False),
        ("screened", "pending", False),
        ("prescreen_scheduled", "interview_scheduled", True),
        ("interview_scheduled", "prescreen_scheduled", False),
        ("interview_scheduled", "hired", True),
        ("email_sent", "interview_scheduled", True),
    ],
)
def test_transition_table(current, target, allowed):
    assert can_transition(current, target) is allowed


def test_validate_transition_raises_with_message():
    with pytest.raises(InvalidTransitionError) as exc_info:
        validate_transition("hired", "pending")
    assert str(exc_info.value) == "Cannot move candidate from 'hired' to 'pending'"
    assert exc_info.value.current == "hired"
    assert exc_info.value.target == "pending"


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        can_transition("pending", "archived")
