from jobboard.extensions import db
from .timestamps import utcnow, to_iso
import uuid

APPLICATION_STATUSES = ("pending", "reviewed", "accepted", "rejected")


class Application(db.Model):
    __tablename__ = "applications"
    # one application per job seeker per job, enforced by the store on insert
    __table_args__ = (
        db.UniqueConstraint("job_id", "applicant_id", name="uq_application_job_applicant"),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # weak reference: jobs can be deleted without touching their applications
    job_id = db.Column(db.String(36), nullable=False, index=True)
    applicant_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = db.Column(db.Enum(*APPLICATION_STATUSES, name="application_status"), nullable=False, default="pending")
    cover_letter = db.Column(db.Text, nullable=False)
    resume_url = db.Column(db.String(2048), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            "_id": self.id,
            "jobId": self.job_id,
            "applicantId": self.applicant_id,
            "status": self.status,
            "coverLetter": self.cover_letter,
            "resumeUrl": self.resume_url,
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }

    def __repr__(self):
        return f"<Application {self.id} job={self.job_id} status={self.status}>"
