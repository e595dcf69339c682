"""CSV export of the candidate pipeline."""

import csv
import io

from app.schemas import Candidate, Job

EXPORT_HEADER = [
    "Name",
    "Email",
    "Phone",
    "Position",
    "Score",
    "Recommendation",
    "Stage",
    "Applied Date",
    "Summary",
]


def candidates_to_csv(candidates: list[Candidate], jobs: list[Job]) -> str:
    titles = {job.id: job.title for job in jobs}
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADER)
    for c in candidates:
        writer.writerow(
            [
                c.name,
                c.email,
                c.phone,
                titles.get(c.job_id, "Unknown"),
                c.resume_score,
                c.recommendation,
                c.status,
                c.applied_date.isoformat(),
                c.rationale or "Processing...",
            ]
        )
    return buffer.getvalue()
