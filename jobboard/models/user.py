from ..extensions import db
from .timestamps import utcnow, to_iso
import uuid

USER_ROLES = ("employer", "jobseeker")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(*USER_ROLES, name="user_roles"), nullable=False)
    company = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    jobs = db.relationship("Job", back_populates="employer", cascade="all, delete-orphan")

    def to_public_dict(self):
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "company": self.company,
            "createdAt": to_iso(self.created_at),
        }

    # for string representation
    def __repr__(self):
        return f"<User {self.email}>"
