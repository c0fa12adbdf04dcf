"""Domain-specific exceptions for snacks services."""

from apps.common.exceptions import InvalidInputError, NotFoundError, ServiceError


class SnacksServiceError(ServiceError):
    """Base exception for snacks services."""
    pass


class SnackNotFoundError(NotFoundError, SnacksServiceError):
    default_message = 'Snack not found'


class InvalidContributionError(InvalidInputError, SnacksServiceError):
    """Raised when the contribution list is empty or malformed."""
    default_message = 'At least one contribution is required'


class InvalidDateRangeError(InvalidInputError, SnacksServiceError):
    default_message = 'Start date and end date are required'
