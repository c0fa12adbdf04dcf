"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import (
    AuthenticationFailedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    ServiceError,
)


class AccountsServiceError(ServiceError):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(InvalidInputError, AccountsServiceError):
    """Raised when signup input is rejected."""
    pass


class EmailAlreadyRegisteredError(ConflictError, AccountsServiceError):
    """Raised when the email belongs to an existing account."""
    default_message = 'User with this email already exists'


class InvalidCredentialsError(AuthenticationFailedError, AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    default_message = 'Invalid email or password'


class InactiveAccountError(PermissionDeniedError, AccountsServiceError):
    """Raised when account is deactivated."""
    default_message = 'User account is inactive'


class InvalidTokenError(InvalidInputError, AccountsServiceError):
    """Raised when a reset token is wrong, used or expired."""
    default_message = 'Invalid reset token'


class UserNotFoundError(NotFoundError, AccountsServiceError):
    """Raised when user does not exist."""
    default_message = 'User not found'


class ProfileUpdateDeniedError(PermissionDeniedError, AccountsServiceError):
    """Raised when a user edits a profile they do not manage."""
    default_message = 'You can only update your own profile'
