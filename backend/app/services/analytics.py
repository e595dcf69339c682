"""
Dashboard and hiring analytics computed from the store on request.
"""

import math
from collections import Counter
from datetime import date, timedelta
from typing import Callable

from app.db.repository import Storage
from app.schemas import Candidate, Job
from app.schemas.common import CamelModel
from app.services.pipeline import CandidateStatus, Recommendation

TOP_CANDIDATE_MIN_SCORE = 70
TOP_CANDIDATE_LIMIT = 5
RECENT_JOBS_LIMIT = 4
VELOCITY_DAYS = 30

SCORE_BUCKETS = [
    ("0-50", 0, 50),
    ("51-70", 51, 70),
    ("71-85", 71, 85),
    ("86-100", 86, 100),
]

PIPELINE_CATEGORIES = ["New", "Screened", "Interviewing", "Hired", "Rejected"]


# ============== Response Schemas ==============


class RecommendationBreakdown(CamelModel):
    passed: int
    on_hold: int
    rejected: int


class DashboardSummary(CamelModel):
    """Schema for the recruiter home dashboard."""

    jobs: int
    candidates: int
    interviews_scheduled: int
    recommendations: RecommendationBreakdown
    recent_jobs: list[Job]
    top_candidates: list[Candidate]


class ScoreBucket(CamelModel):
    range: str
    count: int


class PipelineSlice(CamelModel):
    name: str
    value: int


class VelocityPoint(CamelModel):
    day: date
    count: int


class HiringAnalytics(CamelModel):
    """Schema for the hiring analytics page."""

    active_candidates: int
    avg_score: int
    pending_review: int
    score_distribution: list[ScoreBucket]
    pipeline_health: list[PipelineSlice]
    application_velocity: list[VelocityPoint]


# ============== Helper Functions ==============


def pipeline_category(status: str) -> str:
    if status == CandidateStatus.SCREENED:
        return "Screened"
    if status in (CandidateStatus.INTERVIEW_SCHEDULED, CandidateStatus.PRESCREEN_SCHEDULED):
        return "Interviewing"
    if status == CandidateStatus.HIRED:
        return "Hired"
    if status == CandidateStatus.REJECTED:
        return "Rejected"
    return "New"


def is_pending_review(candidate: Candidate) -> bool:
    """
    Screened, or scored and neither in interview nor rejected.

    Every candidate carries a score, so pre-screen calls and hires count too.
    """
    if candidate.status == CandidateStatus.SCREENED:
        return True
    return candidate.status not in (CandidateStatus.INTERVIEW_SCHEDULED, CandidateStatus.REJECTED)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def score_distribution(candidates: list[Candidate]) -> list[ScoreBucket]:
    counts = Counter()
    for candidate in candidates:
        for label, low, high in SCORE_BUCKETS:
            if low <= candidate.resume_score <= high:
                counts[label] += 1
                break
    return [ScoreBucket(range=label, count=counts[label]) for label, _, _ in SCORE_BUCKETS]


def application_velocity(candidates: list[Candidate], today: date) -> list[VelocityPoint]:
    days = [today - timedelta(days=offset) for offset in range(VELOCITY_DAYS - 1, -1, -1)]
    per_day = Counter(candidate.applied_date for candidate in candidates)
    return [VelocityPoint(day=day, count=per_day[day]) for day in days]


# ============== Summaries ==============


def dashboard_summary(storage: Storage) -> DashboardSummary:
    jobs = storage.list_jobs()
    candidates = storage.list_candidates()
    recommendations = Counter(candidate.recommendation for candidate in candidates)

    top = sorted(
        (c for c in candidates if c.resume_score >= TOP_CANDIDATE_MIN_SCORE),
        key=lambda c: c.resume_score,
        reverse=True,
    )

    return DashboardSummary(
        jobs=len(jobs),
        candidates=len(candidates),
        interviews_scheduled=sum(c.status == CandidateStatus.INTERVIEW_SCHEDULED for c in candidates),
        recommendations=RecommendationBreakdown(
            passed=recommendations[Recommendation.INTERVIEW.value],
            on_hold=recommendations[Recommendation.ON_HOLD.value],
            rejected=recommendations[Recommendation.REJECT.value],
        ),
        recent_jobs=jobs[:RECENT_JOBS_LIMIT],
        top_candidates=top[:TOP_CANDIDATE_LIMIT],
    )


def hiring_analytics(storage: Storage, clock: Callable[[], date] = date.today) -> HiringAnalytics:
    candidates = storage.list_candidates()
    active = [c for c in candidates if c.status != CandidateStatus.REJECTED]
    avg_score = round_half_up(sum(c.resume_score for c in candidates) / len(candidates)) if candidates else 0

    categories = Counter(pipeline_category(c.status) for c in candidates)

    return HiringAnalytics(
        active_candidates=len(active),
        avg_score=avg_score,
        pending_review=sum(is_pending_review(c) for c in candidates),
        score_distribution=score_distribution(candidates),
        pipeline_health=[
            PipelineSlice(name=name, value=categories[name])
            for name in PIPELINE_CATEGORIES
            if categories[name]
        ],
        application_velocity=application_velocity(candidates, clock()),
    )
