# jobboard/services/job_catalog.py
import logging
import math
from numbers import Number

from flask import current_app
from sqlalchemy import or_

from jobboard.errors import NotFound, ValidationError
from jobboard.extensions import db
from jobboard.models import Application, Job, JOB_STATUSES, JOB_TYPES
from jobboard.services.access import require_role

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "company", "location", "description", "requirements")
REQUIRED_FIELDS = TEXT_FIELDS + ("type", "salary")
DELETE_POLICIES = ("orphan", "cascade")


def _like_pattern(term):
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _clean_text(name, value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string")
    return value.strip()


def _salary_number(name, value):
    # bool is a Number subclass; "true" is not a salary
    if isinstance(value, bool):
        raise ValidationError("Please provide valid salary information")
    if not isinstance(value, (str, Number)):
        raise ValidationError("Please provide valid salary information")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("Please provide valid salary information")
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(f"salary.{name} must be a positive number")
    return number


def _parse_salary(salary, current=None):
    """Validate a salary object, filling gaps from ``current`` on update."""
    if not isinstance(salary, dict):
        raise ValidationError("Please provide valid salary information")

    merged = dict(current or {})
    merged.update({k: v for k, v in salary.items() if v is not None})

    if not merged.get("min") or not merged.get("max") or not merged.get("currency"):
        raise ValidationError("Please provide valid salary information")

    salary_min = _salary_number("min", merged["min"])
    salary_max = _salary_number("max", merged["max"])
    currency = _clean_text("salary.currency", merged["currency"]).upper()

    if salary_min >= salary_max:
        raise ValidationError("salary.min must be less than salary.max")

    return salary_min, salary_max, currency


def _check_choice(name, value, choices):
    if value not in choices:
        raise ValidationError(f"{name} must be one of: {', '.join(choices)}")
    return value


def list_jobs(search=None, location=None, status=None):
    """
    Public job search, newest first.

    ``search`` matches any of its whitespace-separated terms against title,
    company and description; ``location`` is a case-insensitive substring.
    """
    query = Job.query

    if search and search.strip():
        conditions = []
        for term in search.split():
            pattern = _like_pattern(term)
            conditions.extend([
                Job.title.ilike(pattern, escape="\\"),
                Job.company.ilike(pattern, escape="\\"),
                Job.description.ilike(pattern, escape="\\"),
            ])
        query = query.filter(or_(*conditions))

    if location and location.strip():
        query = query.filter(Job.location.ilike(_like_pattern(location.strip()), escape="\\"))

    if status:
        query = query.filter(Job.status == _check_choice("status", status, JOB_STATUSES))

    return query.order_by(Job.created_at.desc()).all()


def get_job(job_id):
    job = db.session.get(Job, str(job_id))
    if job is None:
        raise NotFound("Job not found")
    return job


def list_by_employer(employer):
    require_role(employer, "employer")
    return (
        Job.query.filter_by(employer_id=employer.id)
        .order_by(Job.created_at.desc())
        .all()
    )


def create_job(employer, fields):
    require_role(employer, "employer")

    if any(not fields.get(name) for name in REQUIRED_FIELDS):
        raise ValidationError("Please provide all required fields")

    salary_min, salary_max, currency = _parse_salary(fields["salary"])

    job = Job(
        employer_id=employer.id,
        title=_clean_text("title", fields["title"]),
        company=_clean_text("company", fields["company"]),
        location=_clean_text("location", fields["location"]),
        type=_check_choice("type", fields["type"], JOB_TYPES),
        description=_clean_text("description", fields["description"]),
        requirements=_clean_text("requirements", fields["requirements"]),
        salary_min=salary_min,
        salary_max=salary_max,
        salary_currency=currency,
        status="open",
    )

    db.session.add(job)
    db.session.commit()
    logger.info(f"✅ Job {job.id} created by employer {employer.id}")
    return job


def _owned_job(employer, job_id):
    # someone else's job is reported exactly like a missing one
    job = Job.query.filter_by(id=str(job_id), employer_id=employer.id).first()
    if job is None:
        raise NotFound("Job not found")
    return job


def update_job(employer, job_id, fields):
    """Overwrite only the provided fields of an employer's own job."""
    require_role(employer, "employer")
    job = _owned_job(employer, job_id)

    # validate everything before touching the row
    changes = {}
    for name in TEXT_FIELDS:
        if fields.get(name) is not None:
            changes[name] = _clean_text(name, fields[name])

    if fields.get("type") is not None:
        changes["type"] = _check_choice("type", fields["type"], JOB_TYPES)

    if fields.get("status") is not None:
        changes["status"] = _check_choice("status", fields["status"], JOB_STATUSES)

    if fields.get("salary") is not None:
        salary_min, salary_max, currency = _parse_salary(fields["salary"], current=job.salary)
        changes.update(salary_min=salary_min, salary_max=salary_max, salary_currency=currency)

    for name, value in changes.items():
        setattr(job, name, value)

    db.session.commit()
    logger.info(f"✏️ Job {job.id} updated by employer {employer.id}")
    return job


def delete_job(employer, job_id):
    """
    Delete an employer's own job.

    With the ``orphan`` policy the job's applications stay in the store and
    every application listing drops them; ``cascade`` removes them in the
    same transaction.
    """
    require_role(employer, "employer")
    job = _owned_job(employer, job_id)

    policy = current_app.config.get("JOB_DELETE_POLICY", "orphan")
    if policy not in DELETE_POLICIES:
        raise ValueError(f"Unknown job delete policy: {policy}")

    if policy == "cascade":
        removed = Application.query.filter_by(job_id=job.id).delete(synchronize_session=False)
        logger.info(f"🗑️ Removed {removed} applications of job {job.id}")

    db.session.delete(job)
    db.session.commit()
    logger.info(f"🗑️ Job {job_id} deleted by employer {employer.id} (policy: {policy})")
