"""Services for the team fund: bank accounts, expenses and payments."""

from .exceptions import (
    FundsServiceError,
    BankAccountNotFoundError,
    BankAccountExistsError,
    ExpenseNotFoundError,
    PaymentNotFoundError,
    UserNotFoundError,
)
from .bank_accounts import (
    add_bank_account,
    list_bank_accounts,
    get_bank_account,
    update_bank_account,
    delete_bank_account,
)
from .expenses import (
    add_expense,
    list_expenses,
    list_expenses_by_user,
    get_expense,
    update_expense,
    delete_expense,
)
from .payments import (
    add_payment,
    list_payments,
    list_payments_by_user,
    get_payment,
    update_payment,
    delete_payment,
)

__all__ = [
    # Exceptions
    'FundsServiceError',
    'BankAccountNotFoundError',
    'BankAccountExistsError',
    'ExpenseNotFoundError',
    'PaymentNotFoundError',
    'UserNotFoundError',
    # Bank accounts
    'add_bank_account',
    'list_bank_accounts',
    'get_bank_account',
    'update_bank_account',
    'delete_bank_account',
    # Expenses
    'add_expense',
    'list_expenses',
    'list_expenses_by_user',
    'get_expense',
    'update_expense',
    'delete_expense',
    # Payments
    'add_payment',
    'list_payments',
    'list_payments_by_user',
    'get_payment',
    'update_payment',
    'delete_payment',
]
