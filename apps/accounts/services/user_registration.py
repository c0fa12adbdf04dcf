"""User registration service."""

import logging
import re
from datetime import date

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import transaction, IntegrityError

from apps.accounts.models import calculate_age
from .exceptions import UserRegistrationError, EmailAlreadyRegisteredError

logger = logging.getLogger(__name__)

User = get_user_model()

PHONE_PATTERN = re.compile(r'^[0-9\-\+\(\)\s]{10,}$')

def register_user(
    *,
    full_name: str,
    email: str,
    phone: str,
    password: str,
    date_of_birth: date,
) -> User:
    """
    Register a new user account.

    Args:
        full_name: User's full name
        email: Email address, stored lower-cased
        phone: Phone number (10+ digits, spaces or ``+-()``)
        password: Plaintext password (will be hashed)
        date_of_birth: Used to enforce the minimum signup age

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If any input is invalid
        EmailAlreadyRegisteredError: If the email is taken
    """
    full_name = (full_name or '').strip()
    email = (email or '').strip().lower()
    phone = (phone or '').strip()

    validate_signup_inputs(
        full_name=full_name,
        email=email,
        phone=phone,
        password=password,
        date_of_birth=date_of_birth,
    )

    # Unique constraint on email settles concurrent signups
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                full_name=full_name,
                phone=phone,
                date_of_birth=date_of_birth,
            )
    except IntegrityError:
        raise EmailAlreadyRegisteredError()

    logger.info("Registered user %s", user.id)
    return user


def validate_signup_inputs(*, full_name, email, phone, password, date_of_birth):
    if not full_name:
        raise UserRegistrationError('Full name is required')

    if not is_valid_email(email):
        raise UserRegistrationError('Valid email is required')

    if not is_valid_phone(phone):
        raise UserRegistrationError('Valid phone number is required')

    check_password_strength(
        password,
        user=User(email=email, full_name=full_name, phone=phone),
    )

    if not isinstance(date_of_birth, date):
        raise UserRegistrationError('Valid date of birth is required')

    minimum_age = settings.MINIMUM_SIGNUP_AGE
    if calculate_age(date_of_birth) < minimum_age:
        raise UserRegistrationError(f'User must be at least {minimum_age} years old')


def check_password_strength(password, user=None):
    """Run AUTH_PASSWORD_VALIDATORS, reporting failures as UserRegistrationError."""
    if not password:
        raise UserRegistrationError('Password is required')
    try:
        validate_password(password, user=user)
    except DjangoValidationError as e:
        raise UserRegistrationError(' '.join(e.messages))


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email)
    except DjangoValidationError:
        return False
    return True


def is_valid_phone(phone: str) -> bool:
    return bool(phone) and PHONE_PATTERN.match(phone) is not None
