# jobboard/services/application_ledger.py
"""
Applications linking job seekers to jobs.

Uniqueness of (job, applicant) is left to the ``uq_application_job_applicant``
constraint: ``submit`` inserts and lets the store reject the second row, so
two concurrent submissions cannot both succeed.
"""
import logging

from flask import current_app
from sqlalchemy.exc import IntegrityError

from jobboard.errors import (
    DuplicateApplication,
    Forbidden,
    JobNotOpen,
    NotFound,
    ValidationError,
)
from jobboard.extensions import db
from jobboard.models import Application, Job, User
from jobboard.services import read_models
from jobboard.services.access import require_role
from jobboard.services.status_machine import StatusMachine

logger = logging.getLogger(__name__)


def _required_text(value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Please provide all required fields")
    return value.strip()


def _index_by_id(model, ids):
    ids = {str(i) for i in ids if i}
    if not ids:
        return {}
    return {row.id: row for row in model.query.filter(model.id.in_(ids)).all()}


def submit(applicant, job_id, cover_letter, resume_url):
    require_role(applicant, "jobseeker")

    job_id = _required_text(job_id)
    cover_letter = _required_text(cover_letter)
    # stored as given; never fetched or validated as a document
    resume_url = _required_text(resume_url)

    job = Job.query.filter_by(id=job_id, status="open").first()
    if job is None:
        raise JobNotOpen()

    application = Application(
        job_id=job.id,
        applicant_id=applicant.id,
        cover_letter=cover_letter,
        resume_url=resume_url,
        status="pending",
    )

    try:
        db.session.add(application)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info(f"❌ Duplicate application: job {job_id}, applicant {applicant.id}")
        raise DuplicateApplication()

    logger.info(f"✅ Application {application.id} submitted for job {job_id}")
    return application


def list_for_job(employer, job_id):
    """Applications to one of the employer's jobs, newest first."""
    require_role(employer, "employer")

    job = Job.query.filter_by(id=str(job_id), employer_id=employer.id).first()
    if job is None:
        raise NotFound("Job not found")

    applications = (
        Application.query.filter_by(job_id=job.id)
        .order_by(Application.created_at.desc())
        .all()
    )
    applicants = _index_by_id(User, [a.applicant_id for a in applications])

    return read_models.collect(
        read_models.job_applicant_view(a, applicants.get(a.applicant_id))
        for a in applications
    )


def list_mine(applicant):
    """The caller's own applications; ones whose job is gone are left out."""
    require_role(applicant, "jobseeker")

    applications = (
        Application.query.filter_by(applicant_id=applicant.id)
        .order_by(Application.created_at.desc())
        .all()
    )
    jobs = _index_by_id(Job, [a.job_id for a in applications])
    employers = _index_by_id(User, [j.employer_id for j in jobs.values()])

    views = []
    for a in applications:
        job = jobs.get(a.job_id)
        employer = employers.get(job.employer_id) if job else None
        views.append(read_models.seeker_view(a, job, employer))
    return read_models.collect(views)


def list_for_employer(employer):
    """Every application across the employer's jobs, newest first."""
    require_role(employer, "employer")

    jobs = {job.id: job for job in Job.query.filter_by(employer_id=employer.id).all()}
    if not jobs:
        return []

    applications = (
        Application.query.filter(Application.job_id.in_(list(jobs)))
        .order_by(Application.created_at.desc())
        .all()
    )
    applicants = _index_by_id(User, [a.applicant_id for a in applications])

    return read_models.collect(
        read_models.employer_view(a, jobs.get(a.job_id), applicants.get(a.applicant_id), employer)
        for a in applications
    )


def _application_for_employer(employer, application_id):
    application = db.session.get(Application, str(application_id))
    if application is None:
        raise NotFound("Application not found")

    job = db.session.get(Job, application.job_id)
    if job is None or job.employer_id != employer.id:
        raise Forbidden("You do not have permission to access this application")
    return application, job


def get_for_employer(employer, application_id):
    require_role(employer, "employer")
    application, job = _application_for_employer(employer, application_id)

    applicant = db.session.get(User, application.applicant_id)
    view = read_models.employer_view(application, job, applicant, employer)
    if view is None:
        raise NotFound("Application not found")
    return view


def update_status(employer, application_id, new_status):
    """Move an application to ``new_status`` under the configured policy."""
    require_role(employer, "employer")
    if not new_status:
        raise ValidationError("Please provide status")

    application, _ = _application_for_employer(employer, application_id)

    machine = StatusMachine.for_policy(current_app.config.get("APPLICATION_STATUS_POLICY"))
    previous = application.status
    application.status = machine.transition(previous, new_status)
    db.session.commit()

    logger.info(f"🔄 Application {application.id}: {previous} -> {application.status}")
    return application


def withdraw(applicant, application_id):
    """Delete the caller's own application, whatever its status."""
    application = Application.query.filter_by(
        id=str(application_id), applicant_id=applicant.id
    ).first()
    if application is None:
        raise NotFound("Application not found")

    db.session.delete(application)
    db.session.commit()
    logger.info(f"↩️ Application {application_id} withdrawn by {applicant.id}")
