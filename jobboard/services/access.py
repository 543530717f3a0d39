# jobboard/services/access.py
"""
Access control gate.

Establishes who the caller is and whether their role may use an endpoint.
Reading the session token from the request is left to Flask-JWT-Extended, so
``JWT_TOKEN_LOCATION`` and ``JWT_HEADER_TYPE`` apply as configured. Whether
that caller may act on one particular job or application is decided by the
catalog and ledger services, not here.
"""
import logging
from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import (
    JWTExtendedException,
    NoAuthorizationError,
    UserLookupError,
)
from jwt import PyJWTError

from jobboard.errors import Forbidden, InvalidToken, Unauthenticated, UserNotFound
from jobboard.extensions import jwt
from jobboard.services.auth import AuthService

logger = logging.getLogger(__name__)


@jwt.user_lookup_loader
def load_session_user(_jwt_header, jwt_data):
    # None makes the library raise UserLookupError
    return AuthService.load_user(jwt_data.get("sub"))


def authorize(user, required_roles=None):
    """Check that a resolved caller holds one of ``required_roles``."""
    if user is None:
        raise Unauthenticated("No authentication token provided")

    if required_roles and user.role not in required_roles:
        logger.info(f"⛔ Role {user.role} not in {list(required_roles)} for user {user.id}")
        raise Forbidden()

    return user


def verify_session():
    """Validate the request's session token and return the user it names."""
    try:
        verify_jwt_in_request()
    except NoAuthorizationError as e:
        logger.debug(f"No session token: {e}")
        raise Unauthenticated("No authentication token provided")
    except UserLookupError:
        raise Unauthenticated(UserNotFound.message)
    except (JWTExtendedException, PyJWTError) as e:
        logger.debug(f"Token rejected: {e}")
        raise Unauthenticated(InvalidToken.message)
    return get_current_user()


def session_required(*roles):
    """Route decorator: verify the session token, then check the caller's role."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            authorize(verify_session(), roles or None)
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def current_user():
    return get_current_user()


def require_role(user, *roles):
    """Service-level role check for callers that bypass the route decorator."""
    if user is None or user.role not in roles:
        raise Forbidden()
    return user
