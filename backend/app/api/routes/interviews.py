"""
Interview and pre-screen scheduling endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_storage
from app.db.repository import Storage
from app.schemas import Interview, InterviewCreate, InterviewType, InterviewUpdate
from app.schemas.batch import BatchResponse, InterviewScheduleRequest, PrescreenScheduleRequest
from app.services.workflows import schedule_meetings

logger = logging.getLogger("interviews")

router = APIRouter()

INTERVIEW_NOT_FOUND = "Interview not found"
NO_CANDIDATES_SELECTED = "No candidates selected"


@router.get("/interviews", response_model=list[Interview])
async def list_interviews(storage: Storage = Depends(get_storage)):
    return storage.list_interviews()


@router.post("/interviews", response_model=Interview, status_code=status.HTTP_201_CREATED)
async def create_interview(data: InterviewCreate, storage: Storage = Depends(get_storage)):
    """Record a single interview without touching the candidate's stage."""
    if not storage.get_candidate(data.candidate_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown candidateId '{data.candidate_id}'",
        )
    return storage.create_interview(data)


@router.post("/interviews/schedule", response_model=BatchResponse, status_code=status.HTTP_201_CREATED)
async def schedule_interviews(request: InterviewScheduleRequest, storage: Storage = Depends(get_storage)):
    """
    Schedule interviews for a batch of candidates.

    Creates one interview per known candidate (channel "email,whatsapp") and
    moves the candidate to interview_scheduled. Unknown ids and candidates
    that cannot be scheduled are listed in the results with a reason.
    """
    if not request.candidate_ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_CANDIDATES_SELECTED)

    results = schedule_meetings(
        storage,
        request.candidate_ids,
        kind=InterviewType.INTERVIEW,
        scheduled_date=request.date,
        scheduled_time=request.time,
        message=request.email_message,
    )
    count = sum(r.success for r in results)
    logger.info(f"Scheduled {count}/{len(results)} interview(s) for {request.date} {request.time}")
    return BatchResponse(
        message="Interviews scheduled successfully",
        requested=len(request.candidate_ids),
        count=count,
        results=results,
    )


@router.post("/prescreen/schedule", response_model=BatchResponse, status_code=status.HTTP_201_CREATED)
async def schedule_prescreens(request: PrescreenScheduleRequest, storage: Storage = Depends(get_storage)):
    """Schedule pre-screen phone calls; same rules as interview scheduling."""
    if not request.candidate_ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_CANDIDATES_SELECTED)

    results = schedule_meetings(
        storage,
        request.candidate_ids,
        kind=InterviewType.PRESCREEN,
        scheduled_date=request.date,
        scheduled_time=request.time,
        message=request.message,
    )
    count = sum(r.success for r in results)
    logger.info(f"Scheduled {count}/{len(results)} pre-screen call(s) for {request.date} {request.time}")
    return BatchResponse(
        message="Pre-screen calls scheduled successfully",
        requested=len(request.candidate_ids),
        count=count,
        results=results,
    )


@router.get("/interviews/{interview_id}", response_model=Interview)
async def get_interview(interview_id: str, storage: Storage = Depends(get_storage)):
    interview = storage.get_interview(interview_id)
    if not interview:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INTERVIEW_NOT_FOUND)
    return interview


@router.patch("/interviews/{interview_id}", response_model=Interview)
async def update_interview(interview_id: str, data: InterviewUpdate, storage: Storage = Depends(get_storage)):
    interview = storage.update_interview(interview_id, data)
    if not interview:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=INTERVIEW_NOT_FOUND)
    return interview
