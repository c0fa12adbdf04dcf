"""Password reset service."""

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
from django.utils.crypto import constant_time_compare

from .exceptions import UserNotFoundError, InvalidTokenError
from .user_registration import check_password_strength

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def request_password_reset(*, email: str) -> User:
    """
    Generate a password reset token for the user.

    A new request overwrites any pending token, so only the latest one
    is usable.

    Args:
        email: User's email address

    Returns:
        User instance carrying ``reset_token`` and ``reset_token_expiry``

    Raises:
        UserNotFoundError: If no user has this email
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=(email or '').strip().lower())
        )
    except User.DoesNotExist:
        raise UserNotFoundError('User with this email not found')

    user.reset_token = secrets.token_urlsafe(32)
    user.reset_token_expiry = timezone.now() + timedelta(
        minutes=settings.PASSWORD_RESET_TOKEN_TTL_MINUTES
    )
    user.save(update_fields=['reset_token', 'reset_token_expiry', 'updated_at'])

    # TODO: deliver the token by email once an email backend is configured
    logger.info("Password reset requested for user %s", user.id)
    return user


@transaction.atomic
def confirm_password_reset(*, email: str, token: str, new_password: str) -> User:
    """
    Reset user password with token.

    The token is cleared on success, so it cannot be used twice.

    Args:
        email: User's email address
        token: Reset token from ``request_password_reset``
        new_password: New password

    Returns:
        User instance

    Raises:
        UserNotFoundError: If no user has this email
        InvalidTokenError: If token is wrong, already used or expired
        UserRegistrationError: If the new password fails the password validators
    """
    if not token or not token.strip():
        raise InvalidTokenError('Reset token is required')

    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=(email or '').strip().lower())
        )
    except User.DoesNotExist:
        raise UserNotFoundError('User with this email not found')

    if not user.reset_token or not constant_time_compare(user.reset_token, token):
        raise InvalidTokenError('Invalid reset token')

    if not user.has_valid_reset_token(token):
        raise InvalidTokenError('Reset token has expired')

    check_password_strength(new_password, user=user)

    user.set_password(new_password)
    user.clear_reset_token()
    user.save(update_fields=['password', 'reset_token', 'reset_token_expiry', 'updated_at'])

    logger.info("Password reset completed for user %s", user.id)
    return user
