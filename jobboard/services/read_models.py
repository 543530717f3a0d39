# jobboard/services/read_models.py
"""
Denormalized application views for dashboards.

Each read endpoint gets its own view type. The assemblers are pure: they take
rows that were fetched independently (the store does not enforce that an
application's job or applicant still exists) and return ``None`` for any
record that cannot be assembled, after logging why. Collection endpoints drop
those records instead of failing the whole response.
"""
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, Optional

from jobboard.models.timestamps import to_iso

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployerSummary:
    id: str
    name: str
    company: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "name": self.name, "company": self.company}


@dataclass(frozen=True)
class ApplicantSummary:
    id: str
    name: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class JobSummary:
    id: str
    title: str
    company: str
    location: str
    type: str
    description: str
    requirements: str
    salary: Dict[str, Any]
    employer_id: str
    employer: Optional[EmployerSummary]
    status: str
    created_at: Optional[str]
    updated_at: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type,
            "description": self.description,
            "requirements": self.requirements,
            "salary": dict(self.salary),
            "employerId": self.employer_id,
            "employer": self.employer.to_dict() if self.employer else None,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class _ApplicationFields:
    id: str
    job_id: str
    applicant_id: str
    status: str
    cover_letter: str
    resume_url: str
    created_at: Optional[str]
    updated_at: Optional[str]

    def _base_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "jobId": self.job_id,
            "applicantId": self.applicant_id,
            "status": self.status,
            "coverLetter": self.cover_letter,
            "resumeUrl": self.resume_url,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class SeekerApplicationView(_ApplicationFields):
    """A job seeker's own application with the job it targets."""
    job: JobSummary

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["job"] = self.job.to_dict()
        return data


@dataclass(frozen=True)
class JobApplicantView(_ApplicationFields):
    """One applicant's application, as listed under a single job."""
    applicant: ApplicantSummary

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["applicant"] = self.applicant.to_dict()
        return data


@dataclass(frozen=True)
class EmployerApplicationView(_ApplicationFields):
    """Application with both its job and its applicant, for employer dashboards."""
    job: JobSummary
    applicant: ApplicantSummary

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data["job"] = self.job.to_dict()
        data["applicant"] = self.applicant.to_dict()
        return data


def _application_fields(application) -> Dict[str, Any]:
    return {
        "id": str(application.id),
        "job_id": str(application.job_id),
        "applicant_id": str(application.applicant_id),
        "status": application.status,
        "cover_letter": application.cover_letter or "",
        "resume_url": application.resume_url or "",
        "created_at": to_iso(application.created_at),
        "updated_at": to_iso(application.updated_at),
    }


def employer_summary(user) -> Optional[EmployerSummary]:
    if user is None:
        return None
    return EmployerSummary(id=str(user.id), name=user.name, company=user.company)


def applicant_summary(user) -> ApplicantSummary:
    return ApplicantSummary(id=str(user.id), name=user.name, email=user.email)


def job_summary(job, employer=None) -> JobSummary:
    return JobSummary(
        id=str(job.id),
        title=job.title,
        company=job.company,
        location=job.location,
        type=job.type,
        description=job.description or "",
        requirements=job.requirements or "",
        salary={
            "min": job.salary_min,
            "max": job.salary_max,
            "currency": job.salary_currency,
        },
        employer_id=str(job.employer_id),
        employer=employer_summary(employer),
        status=job.status,
        created_at=to_iso(job.created_at),
        updated_at=to_iso(job.updated_at),
    )


def _drop(application, reason):
    app_id = getattr(application, "id", None)
    logger.warning(f"⚠️ Dropping application {app_id} from listing: {reason}")
    return None


def _guarded(build: Callable[..., Any]) -> Callable[..., Any]:
    """Turn a malformed record into a logged drop instead of an exception."""
    @wraps(build)
    def wrapper(application, *args, **kwargs):
        if application is None:
            return _drop(application, "application record missing")
        try:
            return build(application, *args, **kwargs)
        except (AttributeError, TypeError, ValueError) as e:
            return _drop(application, f"malformed record ({e})")
    return wrapper


@_guarded
def seeker_view(application, job, employer=None) -> Optional[SeekerApplicationView]:
    if job is None:
        return _drop(application, f"job {application.job_id} no longer exists")
    return SeekerApplicationView(
        job=job_summary(job, employer),
        **_application_fields(application),
    )


@_guarded
def job_applicant_view(application, applicant) -> Optional[JobApplicantView]:
    if applicant is None:
        return _drop(application, f"applicant {application.applicant_id} no longer exists")
    return JobApplicantView(
        applicant=applicant_summary(applicant),
        **_application_fields(application),
    )


@_guarded
def employer_view(application, job, applicant, employer=None) -> Optional[EmployerApplicationView]:
    if job is None:
        return _drop(application, f"job {application.job_id} no longer exists")
    if applicant is None:
        return _drop(application, f"applicant {application.applicant_id} no longer exists")
    return EmployerApplicationView(
        job=job_summary(job, employer),
        applicant=applicant_summary(applicant),
        **_application_fields(application),
    )


def collect(views: Iterable[Optional[Any]]) -> List[Any]:
    """Keep the views that assembled; dropped records are already logged."""
    return [view for view in views if view is not None]
