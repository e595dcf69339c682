from datetime import date

import pytest

from app.services.adapters import ManagedCandidateRow, MappingError, from_managed_row


def managed_row(**overrides) -> ManagedCandidateRow:
    row = {
        "id": "b7c1",
        "created_at": "2025-02-01T08:30:00+00:00",
        "job_id": "job-1",
        "name": "Sara Ali",
        "email": "sara.ali@example.com",
        "phone": "+91 90000 11111",
        "ai_score": 83,
        "ai_summary": "Strong React portfolio",
        "ai_recommendation": "hire",
        "ai_key_strengths": ["React", "TypeScript"],
        "stage": "new",
    }
    row.update(overrides)
    return ManagedCandidateRow.model_validate(row)


def test_maps_managed_fields_onto_candidate():
    candidate = from_managed_row(managed_row())
    assert candidate.job_id == "job-1"
    assert candidate.resume_score == 83
    assert candidate.rationale == "Strong React portfolio"
    assert candidate.recommendation == "interview"
    assert candidate.status == "pending"
    assert candidate.applied_date == date(2025, 2, 1)
    assert candidate.last_updated == date(2025, 2, 1)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hire", "interview"),
        ("strong-maybe", "interview"),
        ("Interview", "interview"),
        ("hold", "on-hold"),
        ("weak-maybe", "on-hold"),
        ("rejected", "reject"),
    ],
)
def test_recommendation_aliases(value, expected):
    assert from_managed_row(managed_row(ai_recommendation=value)).recommendation == expected


def test_stage_aliases():
    assert from_managed_row(managed_row(stage="analyzed")).status == "screened"
    assert from_managed_row(managed_row(stage=None)).status == "pending"


def test_unscored_row_defaults():
    candidate = from_managed_row(managed_row(ai_score=None, ai_summary=None, created_at=None))
    assert candidate.resume_score == 0
    assert candidate.rationale == ""
    assert candidate.applied_date == date.today()


def test_unknown_values_are_rejected():
    with pytest.raises(MappingError, match="Unknown recommendation 'maybe'"):
        from_managed_row(managed_row(ai_recommendation="maybe"))
    with pytest.raises(MappingError, match="Unknown stage 'archived'"):
        from_managed_row(managed_row(stage="archived"))
