"""User authentication service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=(email or '').strip().lower())
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError()

    if not user.check_password(password):
        logger.warning("Failed sign-in for user %s", user.id)
        raise InvalidCredentialsError()

    if not user.is_active:
        raise InactiveAccountError()

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
