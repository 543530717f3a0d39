import logging

from jobboard.extensions import db
from jobboard.models import Application, Job, User

logger = logging.getLogger(__name__)

APPLICATIONS = [
    ("bob@example.com", "Backend Engineer", "pending"),
    ("alice@example.com", "Backend Engineer", "reviewed"),
    ("alice@example.com", "Data Analyst Intern", "pending"),
]


def seed():
    logger.info("🌱 Seeding applications...")

    created = 0
    for email, job_title, status in APPLICATIONS:
        applicant = User.query.filter_by(email=email).first()
        job = Job.query.filter_by(title=job_title).first()
        if applicant is None or job is None:
            continue
        if Application.query.filter_by(job_id=job.id, applicant_id=applicant.id).first():
            continue
        db.session.add(Application(
            job_id=job.id,
            applicant_id=applicant.id,
            status=status,
            cover_letter=f"Hello {job.company}, I would love to join as {job.title}.",
            resume_url=f"https://example.com/resumes/{applicant.name.split()[0].lower()}.pdf",
        ))
        created += 1

    db.session.commit()
    logger.info(f"✅ Applications seeded ({created} new)")
    return created
