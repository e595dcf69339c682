"""
Candidate pipeline endpoints.

CRUD over candidates, CSV export, and import of rows from the managed
backend. Status changes requested through PATCH are checked against the
pipeline transition table.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError

from app.api.deps import get_storage
from app.core.errors import InvalidTransitionError
from app.db.repository import Storage
from app.schemas import Candidate, CandidateCreate, CandidateUpdate
from app.schemas.batch import BatchResponse, ItemResult
from app.services.adapters import ManagedCandidateRow, MappingError, from_managed_row
from app.services.export import candidates_to_csv
from app.services.pipeline import validate_transition

logger = logging.getLogger("candidates")

router = APIRouter()

CANDIDATE_NOT_FOUND = "Candidate not found"


def _ensure_job_exists(storage: Storage, job_id: str) -> None:
    if not storage.get_job(job_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown jobId '{job_id}'",
        )


@router.get("", response_model=list[Candidate])
async def list_candidates(storage: Storage = Depends(get_storage)):
    return storage.list_candidates()


@router.get("/export")
async def export_candidates(storage: Storage = Depends(get_storage)):
    """Download every candidate as CSV."""
    content = candidates_to_csv(storage.list_candidates(), storage.list_jobs())
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="candidates.csv"'},
    )


@router.post("/import", response_model=BatchResponse)
async def import_candidates(rows: list[ManagedCandidateRow], storage: Storage = Depends(get_storage)):
    """
    Import candidate rows exported from the managed backend.

    Each row is mapped onto the canonical schema; rows that cannot be mapped
    or reference an unknown job are reported and skipped.
    """
    results: list[ItemResult] = []
    for row in rows:
        source_id = row.id or row.email
        try:
            data = from_managed_row(row)
        except (MappingError, ValidationError) as e:
            results.append(ItemResult(candidate_id=source_id, success=False, reason=str(e)))
            continue

        if not storage.get_job(data.job_id):
            results.append(
                ItemResult(candidate_id=source_id, success=False, reason=f"Unknown jobId '{data.job_id}'")
            )
            continue

        candidate = storage.create_candidate(data)
        results.append(ItemResult(candidate_id=candidate.id, success=True))

    imported = sum(r.success for r in results)
    logger.info(f"Imported {imported}/{len(rows)} managed candidate rows")
    return BatchResponse(
        message="Import complete",
        requested=len(rows),
        count=imported,
        results=results,
    )


@router.get("/{candidate_id}", response_model=Candidate)
async def get_candidate(candidate_id: str, storage: Storage = Depends(get_storage)):
    candidate = storage.get_candidate(candidate_id)
    if not candidate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CANDIDATE_NOT_FOUND)
    return candidate


@router.post("", response_model=Candidate, status_code=status.HTTP_201_CREATED)
async def create_candidate(data: CandidateCreate, storage: Storage = Depends(get_storage)):
    """Add a candidate to a job; the job's applicantsCount goes up by one."""
    _ensure_job_exists(storage, data.job_id)
    candidate = storage.create_candidate(data)
    logger.info(f"Created candidate {candidate.id} for job {candidate.job_id}")
    return candidate


@router.patch("/{candidate_id}", response_model=Candidate)
async def update_candidate(candidate_id: str, data: CandidateUpdate, storage: Storage = Depends(get_storage)):
    """
    Partially update a candidate.

    Unspecified fields keep their value; lastUpdated is always restamped.
    A status change must follow the pipeline (e.g. a hired candidate cannot
    go back to pending).
    """
    candidate = storage.get_candidate(candidate_id)
    if not candidate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CANDIDATE_NOT_FOUND)

    if data.status is not None:
        try:
            validate_transition(candidate.status, data.status)
        except InvalidTransitionError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if data.job_id is not None and data.job_id != candidate.job_id:
        _ensure_job_exists(storage, data.job_id)

    updated = storage.update_candidate(candidate_id, data)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CANDIDATE_NOT_FOUND)

    if updated.status != candidate.status:
        logger.info(f"Updated candidate {candidate_id} status to: {updated.status}")
    return updated


@router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_candidate(candidate_id: str, storage: Storage = Depends(get_storage)):
    """Remove a candidate; the job's applicantsCount goes down by one (never below 0)."""
    if not storage.delete_candidate(candidate_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CANDIDATE_NOT_FOUND)
    logger.info(f"Deleted candidate {candidate_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
