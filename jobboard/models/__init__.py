from .user import User, USER_ROLES
from .job import Job, JOB_TYPES, JOB_STATUSES
from .application import Application, APPLICATION_STATUSES

__all__ = [
    "User",
    "Job",
    "Application",
    "USER_ROLES",
    "JOB_TYPES",
    "JOB_STATUSES",
    "APPLICATION_STATUSES",
]
