"""Domain-specific exceptions for funds services."""

from apps.common.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceError,
)


class FundsServiceError(ServiceError):
    """Base exception for funds services."""
    pass


class BankAccountNotFoundError(NotFoundError, FundsServiceError):
    default_message = 'Bank account not found'


class BankAccountExistsError(ConflictError, FundsServiceError):
    """Raised when the member already has an account in this team."""
    default_message = 'User already has a bank account registered for this team'


class ExpenseNotFoundError(NotFoundError, FundsServiceError):
    default_message = 'Expense not found'


class PaymentNotFoundError(NotFoundError, FundsServiceError):
    default_message = 'Payment not found'


class UserNotFoundError(NotFoundError, FundsServiceError):
    default_message = 'User not found'
