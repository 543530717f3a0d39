# jobboard/services/auth.py
import logging
from datetime import timedelta

from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import PyJWTError
from sqlalchemy.exc import IntegrityError

from jobboard.errors import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    UserNotFound,
    ValidationError,
)
from jobboard.extensions import db, bcrypt
from jobboard.models import User, USER_ROLES

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _normalize_email(email):
    if not isinstance(email, str):
        return ""
    return email.strip().lower()


class AuthService:
    @staticmethod
    def issue_token(user):
        """Signed, time-bound session token carrying the user id."""
        return create_access_token(
            identity=str(user.id),
            additional_claims={
                "role": user.role,
                "email": user.email
            },
            expires_delta=timedelta(hours=current_app.config.get("JWT_EXPIRES_HOURS", 3))
        )

    @staticmethod
    def register(name, email, password, role, company=None):
        """
        Create a new user with the given role.
        Returns (user, token). The password is only ever stored as a bcrypt hash.
        """
        email = _normalize_email(email)
        name = name.strip() if isinstance(name, str) else ""
        logger.info(f"📝 Register attempt: email: {email}, role: {role}")

        if not name or not email or not password or not role or not isinstance(password, str):
            raise ValidationError("Name, email, password and role are required")
        if role not in USER_ROLES:
            raise ValidationError(f"Role must be one of: {', '.join(USER_ROLES)}")
        if "@" not in email:
            raise ValidationError("Please provide a valid email address")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        if User.query.filter_by(email=email).first():
            logger.info("❌ Email already registered")
            raise DuplicateEmail()

        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")

        # company only applies to employers
        if role != "employer" or not isinstance(company, str):
            company = None

        user = User(
            name=name,
            email=email,
            password=hashed_password,
            role=role,
            company=company.strip() or None if company else None,
        )

        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            # lost a race with a concurrent registration for the same email
            db.session.rollback()
            raise DuplicateEmail()

        logger.info(f"✅ Registration successful for {email}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def login(email, password):
        """
        Check email & password using bcrypt.
        Unknown email and wrong password fail identically.
        """
        email = _normalize_email(email)
        logger.info(f"🔐 Auth attempt: {email}")

        if not email or not password or not isinstance(password, str):
            raise ValidationError("Email and password are required")

        user = User.query.filter_by(email=email).first()
        if not user or not bcrypt.check_password_hash(user.password, password):
            logger.info(f"❌ Invalid credentials for {email}")
            raise InvalidCredentials()

        logger.info(f"✅ Auth successful for {email}, role: {user.role}")
        return user, AuthService.issue_token(user)

    @staticmethod
    def load_user(identity):
        if not identity:
            return None
        return db.session.get(User, str(identity))

    @staticmethod
    def resolve_session(token):
        """Decode a session token and load the user it names."""
        try:
            decoded = decode_token(token)
        except (JWTExtendedException, PyJWTError) as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidToken()

        user_id = decoded.get("sub")
        if not user_id:
            raise InvalidToken()

        user = AuthService.load_user(user_id)
        if user is None:
            raise UserNotFound()
        return user
