"""
API Router Aggregator.

Combines the resource routers into a single router for the main app.
"""

from fastapi import APIRouter

from app.api.routes import analytics, candidates, emails, interviews, jobs, users

api_router = APIRouter()

# Include all resource routers with their prefixes and tags
api_router.include_router(
    jobs.router,
    prefix="/jobs",
    tags=["Jobs"],
)

api_router.include_router(
    candidates.router,
    prefix="/candidates",
    tags=["Candidates"],
)

# /interviews/... and /prescreen/schedule
api_router.include_router(
    interviews.router,
    tags=["Interviews"],
)

# /emails/send and /email-templates/...
api_router.include_router(
    emails.router,
    tags=["Emails"],
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

api_router.include_router(
    analytics.router,
    prefix="/analytics",
    tags=["Analytics"],
)
