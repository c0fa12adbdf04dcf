"""Domain-specific exceptions for rules services."""

from apps.common.exceptions import NotFoundError, ServiceError


class RulesServiceError(ServiceError):
    """Base exception for rules services."""
    pass


class RuleNotFoundError(NotFoundError, RulesServiceError):
    """Raised when a rule does not exist in the team."""
    default_message = 'Rule not found'


class ViolationNotFoundError(NotFoundError, RulesServiceError):
    """Raised when a rule violation does not exist in the team."""
    default_message = 'Rule violation not found'


class UserNotFoundError(NotFoundError, RulesServiceError):
    default_message = 'User not found'
