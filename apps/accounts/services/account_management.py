"""Account management service."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.common.exceptions import InvalidInputError
from apps.teams.services.authorization import is_fund_manager_over
from .exceptions import (
    EmailAlreadyRegisteredError,
    ProfileUpdateDeniedError,
    UserNotFoundError,
    UserRegistrationError,
)
from .user_registration import is_valid_email, is_valid_phone

logger = logging.getLogger(__name__)

User = get_user_model()


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError()


def update_user_profile(
    *,
    user_id: UUID,
    requested_by: User,
    full_name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> User:
    """
    Update a user's profile.

    Users can update their own profile. A fund manager can update any
    member of a team they manage funds for, and is the only one who can
    change ``is_active``.

    Raises:
        UserNotFoundError: If the target user does not exist
        ProfileUpdateDeniedError: If the requester may not edit this profile
        UserRegistrationError: If a field value is invalid
        EmailAlreadyRegisteredError: If the new email is taken
    """
    user = get_user_by_id(user_id=user_id)
    is_self = user.id == requested_by.id
    manages_user = not is_self and is_fund_manager_over(requested_by, user)

    if not is_self and not manages_user:
        logger.warning("User %s denied profile update of %s", requested_by.id, user.id)
        raise ProfileUpdateDeniedError()

    update_fields = ['updated_at']

    if full_name is not None:
        full_name = full_name.strip()
        if not full_name:
            raise UserRegistrationError('Full name is required')
        user.full_name = full_name
        update_fields.append('full_name')

    if email is not None:
        email = email.strip().lower()
        if not is_valid_email(email):
            raise UserRegistrationError('Valid email is required')
        user.email = email
        update_fields.append('email')

    if phone is not None:
        phone = phone.strip()
        if not is_valid_phone(phone):
            raise UserRegistrationError('Valid phone number is required')
        user.phone = phone
        update_fields.append('phone')

    if is_active is not None:
        if is_self:
            raise InvalidInputError('You cannot change your own account status')
        user.is_active = is_active
        update_fields.append('is_active')

    try:
        with transaction.atomic():
            user.save(update_fields=update_fields)
    except IntegrityError:
        raise EmailAlreadyRegisteredError('Email is already in use')

    logger.info("User %s updated profile of %s", requested_by.id, user.id)
    return user
