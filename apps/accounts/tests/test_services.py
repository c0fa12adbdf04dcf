"""
Service layer unit tests for accounts app.

Tests cover:
- Registration validation and email uniqueness
- Authentication outcomes
- Password reset token lifecycle
- Profile update permissions
"""

import pytest
from datetime import date, timedelta
from django.utils import timezone

from apps.accounts.models import User, calculate_age
from apps.accounts.services import (
    register_user,
    authenticate_user,
    request_password_reset,
    confirm_password_reset,
    update_user_profile,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
    UserNotFoundError,
    UserRegistrationError,
    ProfileUpdateDeniedError,
)
from apps.common.exceptions import ConflictError, InvalidInputError


def _adult_birthday():
    return date(1990, 1, 1)


# =============================================================================
# Registration Service Tests
# =============================================================================

@pytest.mark.django_db
class TestRegisterUser:
    """Tests for register_user."""

    def test_register_user(self):
        user = register_user(
            full_name='  Ada Member ',
            email=' Ada@Example.com ',
            phone='0123456789',
            password='SecurePass123!',
            date_of_birth=_adult_birthday(),
        )

        assert user.full_name == 'Ada Member'
        assert user.email == 'ada@example.com'
        assert user.password != 'SecurePass123!'
        assert user.check_password('SecurePass123!')
        assert user.current_team is None

    def test_register_duplicate_email(self, user):
        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            register_user(
                full_name='Copy Cat',
                email=user.email,
                phone='0123456789',
                password='SecurePass123!',
                date_of_birth=_adult_birthday(),
            )

        assert isinstance(exc_info.value, ConflictError)
        assert exc_info.value.status_code == 400

    def test_register_exactly_minimum_age(self):
        today = date.today()
        try:
            birthday = today.replace(year=today.year - 18)
        except ValueError:
            # Today is 29 February
            birthday = today.replace(year=today.year - 18, day=28)

        user = register_user(
            full_name='Fresh Adult',
            email='fresh@example.com',
            phone='0123456789',
            password='SecurePass123!',
            date_of_birth=birthday,
        )
        assert user.get_age() == 18

    @pytest.mark.parametrize('field, value, message', [
        ('full_name', ' ', 'Full name is required'),
        ('email', 'broken@', 'Valid email is required'),
        ('phone', '12345', 'Valid phone number is required'),
        ('password', 'seven77', 'too short'),
        ('password', '12345678', 'entirely numeric'),
        ('password', 'password', 'too common'),
        ('date_of_birth', None, 'Valid date of birth is required'),
    ])
    def test_register_invalid_input(self, field, value, message):
        data = {
            'full_name': 'Someone',
            'email': 'someone@example.com',
            'phone': '0123456789',
            'password': 'SecurePass123!',
            'date_of_birth': _adult_birthday(),
        }
        data[field] = value

        with pytest.raises(UserRegistrationError, match=message):
            register_user(**data)

        assert not User.objects.filter(email='someone@example.com').exists()

    def test_calculate_age_before_birthday(self):
        assert calculate_age(date(2000, 6, 15), today=date(2018, 6, 14)) == 17
        assert calculate_age(date(2000, 6, 15), today=date(2018, 6, 15)) == 18


# =============================================================================
# Authentication Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAuthenticateUser:
    """Tests for authenticate_user."""

    def test_authenticate(self, user):
        authenticated = authenticate_user(email=user.email, password='TestPass123!')

        assert authenticated.id == user.id
        assert authenticated.last_login is not None

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_inactive_account(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')


# =============================================================================
# Password Reset Service Tests
# =============================================================================

@pytest.mark.django_db
class TestPasswordResetService:
    """Tests for request_password_reset and confirm_password_reset."""

    def test_request_sets_token_for_one_hour(self, user, settings):
        settings.PASSWORD_RESET_TOKEN_TTL_MINUTES = 60
        before = timezone.now()

        result = request_password_reset(email=user.email)

        assert result.reset_token
        expected = before + timedelta(hours=1)
        assert expected <= result.reset_token_expiry <= timezone.now() + timedelta(hours=1)

    def test_new_request_replaces_token(self, user):
        first = request_password_reset(email=user.email).reset_token
        second = request_password_reset(email=user.email).reset_token

        assert first != second
        user.refresh_from_db()
        assert user.reset_token == second

    def test_request_unknown_email(self, db):
        with pytest.raises(UserNotFoundError):
            request_password_reset(email='ghost@example.com')

    def test_confirm_clears_token(self, user):
        token = request_password_reset(email=user.email).reset_token

        confirm_password_reset(email=user.email, token=token, new_password='BrandNew123!')

        user.refresh_from_db()
        assert user.check_password('BrandNew123!')
        assert user.reset_token is None
        assert user.reset_token_expiry is None

        with pytest.raises(InvalidTokenError):
            confirm_password_reset(email=user.email, token=token, new_password='Again12345!')

    def test_confirm_expired_token(self, user_with_expired_token):
        with pytest.raises(InvalidTokenError, match='expired'):
            confirm_password_reset(
                email=user_with_expired_token.email,
                token='expired-reset-token-12345',
                new_password='BrandNew123!',
            )

        user_with_expired_token.refresh_from_db()
        assert user_with_expired_token.check_password('OldPass123!')

    def test_confirm_short_password(self, user_with_reset_token):
        with pytest.raises(UserRegistrationError):
            confirm_password_reset(
                email=user_with_reset_token.email,
                token='valid-reset-token-12345',
                new_password='short',
            )

        user_with_reset_token.refresh_from_db()
        assert user_with_reset_token.reset_token == 'valid-reset-token-12345'

    def test_confirm_common_password(self, user_with_reset_token):
        with pytest.raises(UserRegistrationError, match='too common'):
            confirm_password_reset(
                email=user_with_reset_token.email,
                token='valid-reset-token-12345',
                new_password='password',
            )

        user_with_reset_token.refresh_from_db()
        assert user_with_reset_token.check_password('OldPass123!')


# =============================================================================
# Profile Update Service Tests
# =============================================================================

@pytest.mark.django_db
class TestUpdateUserProfile:
    """Tests for update_user_profile."""

    def test_self_update(self, user):
        updated = update_user_profile(user_id=user.id, requested_by=user, email='NEW@example.com')
        assert updated.email == 'new@example.com'

    def test_stranger_denied(self, user, other_user):
        with pytest.raises(ProfileUpdateDeniedError):
            update_user_profile(user_id=user.id, requested_by=other_user, full_name='Hacked')

    def test_fund_manager_of_shared_team(self, user, fund_manager, shared_team):
        updated = update_user_profile(user_id=user.id, requested_by=fund_manager, is_active=False)
        assert updated.is_active is False

    def test_member_of_shared_team_without_role_denied(self, user, fund_manager, shared_team):
        with pytest.raises(ProfileUpdateDeniedError):
            update_user_profile(user_id=fund_manager.id, requested_by=user, full_name='Boss')

    def test_self_cannot_change_status(self, user):
        with pytest.raises(InvalidInputError):
            update_user_profile(user_id=user.id, requested_by=user, is_active=False)

    def test_blank_full_name(self, user):
        with pytest.raises(UserRegistrationError, match='Full name is required'):
            update_user_profile(user_id=user.id, requested_by=user, full_name='   ')
