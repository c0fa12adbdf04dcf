"""Services for snack purchases and member contributions."""

from .exceptions import (
    SnacksServiceError,
    SnackNotFoundError,
    InvalidContributionError,
    InvalidDateRangeError,
)
from .snack_management import (
    add_snack,
    list_snacks,
    list_snacks_by_date_range,
    get_snack,
    update_snack,
    delete_snack,
)

__all__ = [
    # Exceptions
    'SnacksServiceError',
    'SnackNotFoundError',
    'InvalidContributionError',
    'InvalidDateRangeError',
    # Services
    'add_snack',
    'list_snacks',
    'list_snacks_by_date_range',
    'get_snack',
    'update_snack',
    'delete_snack',
]
