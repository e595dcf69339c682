"""
Job posting endpoints.

CRUD over job postings plus the screening trigger for a job's applicants.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_storage
from app.db.repository import Storage
from app.schemas import Candidate, Job, JobCreate, JobUpdate
from app.schemas.batch import ScreenResponse
from app.services.workflows import screen_job

logger = logging.getLogger("jobs")

router = APIRouter()

JOB_NOT_FOUND = "Job not found"


@router.get("", response_model=list[Job])
async def list_jobs(storage: Storage = Depends(get_storage)):
    return storage.list_jobs()


@router.get("/{job_id}", response_model=Job)
async def get_job(job_id: str, storage: Storage = Depends(get_storage)):
    job = storage.get_job(job_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
async def create_job(data: JobCreate, storage: Storage = Depends(get_storage)):
    """
    Create a job posting.

    applicantsCount always starts at 0; it only moves when candidates are
    added to or removed from the job.
    """
    job = storage.create_job(data)
    logger.info(f"Created job {job.id} ({job.title})")
    return job


@router.patch("/{job_id}", response_model=Job)
async def update_job(job_id: str, data: JobUpdate, storage: Storage = Depends(get_storage)):
    job = storage.update_job(job_id, data)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: str, storage: Storage = Depends(get_storage)):
    """Delete a job. Its candidates are kept."""
    if not storage.delete_job(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    logger.info(f"Deleted job {job_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{job_id}/candidates", response_model=list[Candidate])
async def list_job_candidates(job_id: str, storage: Storage = Depends(get_storage)):
    if not storage.get_job(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return storage.list_candidates_by_job(job_id)


@router.post("/{job_id}/screen", response_model=ScreenResponse)
async def screen_job_candidates(job_id: str, storage: Storage = Depends(get_storage)):
    """
    Mark every applicant of the job as screened.

    Scores and rationales come from the external automation workflow; this
    endpoint only advances the pipeline stage. Candidates that cannot move
    to "screened" (hired, rejected, ...) are reported in the results.
    """
    if not storage.get_job(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)

    results = screen_job(storage, job_id)
    return ScreenResponse(
        candidates_processed=sum(r.success for r in results),
        results=results,
    )
