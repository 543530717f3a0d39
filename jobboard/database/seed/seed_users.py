import logging

from jobboard.extensions import db, bcrypt
from jobboard.models import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

USERS = [
    {"name": "Acme Hiring", "email": "acme@example.com", "role": "employer", "company": "Acme Corp"},
    {"name": "Globex Talent", "email": "globex@example.com", "role": "employer", "company": "Globex"},
    {"name": "Bob Seeker", "email": "bob@example.com", "role": "jobseeker", "company": None},
    {"name": "Alice Seeker", "email": "alice@example.com", "role": "jobseeker", "company": None},
]


def seed():
    logger.info("🌱 Seeding users...")

    created = 0
    # prevent duplicates
    for data in USERS:
        if User.query.filter_by(email=data["email"]).first():
            continue
        db.session.add(User(
            name=data["name"],
            email=data["email"],
            password=bcrypt.generate_password_hash(DEMO_PASSWORD).decode("utf-8"),
            role=data["role"],
            company=data["company"],
        ))
        created += 1

    db.session.commit()
    logger.info(f"✅ Users seeded ({created} new)")
    return created
