"""
Error taxonomy shared by every app.

Services raise these (or app-specific subclasses defined in each app's
``services/exceptions.py``). Views let them propagate; the project
exception handler turns them into the response envelope.

Exception Hierarchy:
    ServiceError (base, 500)
    ├── InvalidInputError (400)
    ├── AuthenticationFailedError (401)
    ├── PermissionDeniedError (403)
    ├── NotFoundError (404)
    ├── ConflictError (400)
    └── InternalServiceError (500)
"""


class ServiceError(Exception):
    """Base exception for all service errors."""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ServiceError):
    """Malformed or missing input."""

    status_code = 400
    default_message = 'Invalid input'


class AuthenticationFailedError(ServiceError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = 'Authentication failed'


class PermissionDeniedError(ServiceError):
    """Authenticated, but lacking the required role."""

    status_code = 403
    default_message = 'You do not have permission to perform this action'


class NotFoundError(ServiceError):
    """Entity (or team-scoped entity) does not exist."""

    status_code = 404
    default_message = 'Not found'


class ConflictError(ServiceError):
    """Duplicate value on a unique field.

    Reported as 400, not 409.
    """

    status_code = 400
    default_message = 'Resource already exists'


class InternalServiceError(ServiceError):
    """Unexpected store or runtime failure."""

    status_code = 500
    default_message = 'Internal server error'
