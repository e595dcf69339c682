"""
RecruitFlow Database Seeder

Creates the tables on DATABASE_URL and loads the demo data:
- 3 job postings (Senior Frontend Developer, Product Manager, UX Designer)
- 12 scored candidates
- 3 rejection e-mail templates
"""

import logging

from app.core.config import settings
from app.db.sql import SqlStorage


def seed_database() -> None:
    """Seed the database with demo data."""
    storage = SqlStorage()
    storage.create_tables()

    print(f"Seeding {settings.DATABASE_URL}...")
    if not storage.seed():
        print("Database already seeded. Skipping...")
        return

    print("✅ Database seeded successfully!")
    print("\n📋 Created:")
    for job in storage.list_jobs():
        print(f"   - {job.title} ({job.applicants_count} applicants)")
    print(f"   - {len(storage.list_email_templates())} rejection email templates")


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    seed_database()
