# jobboard/errors.py
"""
Error taxonomy shared by every service.

Services raise these; the handlers registered in ``create_app`` turn them
into the ``{success, message, error}`` envelope with the matching status.
"""


class JobBoardError(Exception):
    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationError(JobBoardError):
    status_code = 400
    message = "Please provide all required fields"


class InvalidStatusTransition(ValidationError):
    message = "Status transition is not allowed"


class DuplicateEmail(JobBoardError):
    status_code = 400
    message = "Email already registered"


class DuplicateApplication(JobBoardError):
    status_code = 400
    message = "Already applied for this job"


class InvalidCredentials(JobBoardError):
    status_code = 401
    message = "Invalid email or password"


class Unauthenticated(JobBoardError):
    status_code = 401
    message = "Please authenticate"


class InvalidToken(JobBoardError):
    status_code = 401
    message = "Invalid or expired session token"


class UserNotFound(JobBoardError):
    status_code = 401
    message = "User not found"


class Forbidden(JobBoardError):
    status_code = 403
    message = "Access denied"


class NotFound(JobBoardError):
    status_code = 404
    message = "Resource not found"


class JobNotOpen(JobBoardError):
    status_code = 404
    message = "Job not found or not open"


class InternalError(JobBoardError):
    status_code = 500
    message = "Something went wrong!"
