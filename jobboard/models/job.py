from jobboard.extensions import db
from .timestamps import utcnow, to_iso
import uuid

JOB_TYPES = ("full-time", "part-time", "contract", "internship")
JOB_STATUSES = ("open", "closed", "draft")


class Job(db.Model):
    __tablename__ = "jobs"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    employer_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    type = db.Column(db.Enum(*JOB_TYPES, name="job_type"), nullable=False)
    description = db.Column(db.Text, nullable=False)
    requirements = db.Column(db.Text, nullable=False)
    salary_min = db.Column(db.Float, nullable=False)
    salary_max = db.Column(db.Float, nullable=False)
    salary_currency = db.Column(db.String(10), nullable=False, default="USD")
    status = db.Column(db.Enum(*JOB_STATUSES, name="job_status"), nullable=False, default="open")
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    employer = db.relationship("User", back_populates="jobs")

    @property
    def salary(self):
        return {
            "min": self.salary_min,
            "max": self.salary_max,
            "currency": self.salary_currency,
        }

    def to_dict(self, include_employer=False):
        data = {
            "_id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type,
            "description": self.description,
            "requirements": self.requirements,
            "salary": self.salary,
            "employerId": self.employer_id,
            "status": self.status,
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }
        if include_employer:
            employer = self.employer
            data["employer"] = {
                "_id": employer.id,
                "name": employer.name,
                "company": employer.company,
            } if employer else None
        return data

    def __repr__(self):
        return f"<Job {self.title} ({self.status})>"
