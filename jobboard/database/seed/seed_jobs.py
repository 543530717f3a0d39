import logging

from jobboard.extensions import db
from jobboard.models import Job, User

logger = logging.getLogger(__name__)

JOBS = [
    {
        "employer_email": "acme@example.com",
        "title": "Backend Engineer",
        "company": "Acme Corp",
        "location": "Berlin, Germany",
        "type": "full-time",
        "description": (
            "Design and run the services behind our hiring platform. "
            "You will own APIs, data models and their deployment."
        ),
        "requirements": "3+ years of Python, SQL, and REST API design.",
        "salary_min": 50000,
        "salary_max": 90000,
        "salary_currency": "USD",
        "status": "open",
    },
    {
        "employer_email": "acme@example.com",
        "title": "Data Analyst Intern",
        "company": "Acme Corp",
        "location": "Remote",
        "type": "internship",
        "description": "Help the analytics team build dashboards and clean datasets.",
        "requirements": "Basic SQL and spreadsheet skills.",
        "salary_min": 1500,
        "salary_max": 2500,
        "salary_currency": "EUR",
        "status": "open",
    },
    {
        "employer_email": "globex@example.com",
        "title": "Frontend Contractor",
        "company": "Globex",
        "location": "London, UK",
        "type": "contract",
        "description": "Six month contract rebuilding the candidate portal.",
        "requirements": "React, TypeScript, accessibility experience.",
        "salary_min": 400,
        "salary_max": 600,
        "salary_currency": "GBP",
        "status": "draft",
    },
]


def seed():
    logger.info("🌱 Seeding jobs...")

    created = 0
    for data in JOBS:
        data = dict(data)
        employer = User.query.filter_by(email=data.pop("employer_email")).first()
        if employer is None:
            logger.warning(f"⚠️ Employer for '{data['title']}' missing. Skipping insert.")
            continue
        if Job.query.filter_by(title=data["title"], employer_id=employer.id).first():
            logger.info(f"⚠️ Job '{data['title']}' already exists. Skipping insert.")
            continue
        db.session.add(Job(employer_id=employer.id, **data))
        created += 1

    db.session.commit()
    logger.info(f"✅ Jobs seeded ({created} new)")
    return created
