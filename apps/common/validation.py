"""Scalar input checks shared by the ledger services."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from django.utils.dateparse import parse_date

from .exceptions import InvalidInputError


def to_amount(value, field='amount') -> Decimal:
    """Coerce a numeric input to Decimal or raise InvalidInputError."""
    if isinstance(value, bool) or value is None:
        raise InvalidInputError(f"Valid {field} is required")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidInputError(f"Valid {field} is required")
    if not amount.is_finite():
        raise InvalidInputError(f"Valid {field} is required")
    return amount


def require_non_negative(value, field='amount') -> Decimal:
    amount = to_amount(value, field)
    if amount < 0:
        raise InvalidInputError(f"{field.capitalize()} must be non-negative")
    return amount


def require_positive(value, field='amount') -> Decimal:
    amount = to_amount(value, field)
    if amount <= 0:
        raise InvalidInputError(f"{field.capitalize()} must be greater than 0")
    return amount


def require_text(value, field) -> str:
    """Return the stripped string, rejecting empty or whitespace-only input."""
    if value is None or not str(value).strip():
        raise InvalidInputError(f"{field} is required")
    return str(value).strip()


def to_date(value, field='date') -> date:
    """Accept a date or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = parse_date(str(value)) if value else None
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidInputError(f"Valid {field} is required")
    return parsed
